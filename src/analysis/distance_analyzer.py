"""Distribución de distancias de colaboración respecto del autor de referencia."""
import numpy as np
from typing import Any, Dict
from .base import GraphAnalyzer


class DistanceAnalyzer(GraphAnalyzer):
    """Resume las distancias (saltos y ponderadas) de una red de colaboración."""

    def analyze(self, collaboration, **kwargs) -> Dict[str, Any]:
        autores = sorted(collaboration.authors)
        saltos = np.array([collaboration.unweighted_distance(a) for a in autores], dtype=float)
        ponderadas = np.array([collaboration.weighted_distance(a) for a in autores], dtype=float)

        alcanzables = np.isfinite(saltos)
        finitos = saltos[alcanzables].astype(int)
        valores, cuentas = np.unique(finitos, return_counts=True)

        return {
            'referencia': collaboration.reference_author,
            'autores': len(autores),
            'alcanzables': int(alcanzables.sum()),
            'inalcanzables': int((~alcanzables).sum()),
            'histograma': {int(v): int(c) for v, c in zip(valores, cuentas)},
            'distancia_media': float(finitos.mean()) if finitos.size else 0.0,
            'distancia_maxima': int(finitos.max()) if finitos.size else 0,
            'ponderada_media': float(ponderadas[alcanzables].mean()) if finitos.size else 0.0
        }

    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'alcanzables': results['alcanzables'],
            'inalcanzables': results['inalcanzables'],
            'distancia_media': round(results['distancia_media'], 4),
            'distancia_maxima': results['distancia_maxima'],
            'ponderada_media': round(results['ponderada_media'], 4)
        }

    def print_results(self, results: Dict[str, Any]):
        print(f"\n{'='*60}")
        print(f"DISTANCIAS A {results['referencia']}")
        print(f"{'='*60}")
        print(f"Autores: {results['autores']} ({results['inalcanzables']} sin camino)")
        print(f"Distancia media: {results['distancia_media']:.3f}")
        print(f"Distancia ponderada media: {results['ponderada_media']:.3f}")

        for distancia, cantidad in results['histograma'].items():
            print(f"  {distancia:3d} saltos: {cantidad}")
