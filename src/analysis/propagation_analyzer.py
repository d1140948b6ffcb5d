"""Analizador de árboles de propagación producidos por el rastreo de contactos."""
import networkx as nx
from collections import Counter
from typing import Any, Dict
from .base import GraphAnalyzer


class PropagationAnalyzer(GraphAnalyzer):
    """Generaciones de exposición y principales propagadores de un rastreo."""

    def __init__(self, top_n: int = 10):
        self.top_n = top_n

    def analyze(self, tree: nx.DiGraph, **kwargs) -> Dict[str, Any]:
        if tree.number_of_nodes() <= 1:
            return {'expuestos': 0, 'generaciones': {}, 'top_spreaders': [], 'max_spread': 0}

        generaciones = Counter(g for _, g in tree.nodes(data='generacion') if g)
        out_degrees = [(n, d) for n, d in tree.out_degree() if d > 0]
        top_spreaders = sorted(out_degrees, key=lambda x: (-x[1], x[0]))[:self.top_n]

        return {
            'expuestos': tree.number_of_nodes() - 1,
            'generaciones': dict(sorted(generaciones.items())),
            'top_spreaders': top_spreaders,
            'max_spread': top_spreaders[0][1] if top_spreaders else 0
        }

    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'expuestos': results['expuestos'],
            'num_generaciones': len(results['generaciones']),
            'max_spread': results['max_spread'],
            'top_5_spreaders': [
                {'persona': persona, 'expuestos_directos': count}
                for persona, count in results['top_spreaders'][:5]
            ]
        }

    def print_results(self, results: Dict[str, Any]):
        print(f"\n{'='*60}")
        print("PROPAGACIÓN DE EXPOSICIÓN")
        print(f"{'='*60}")
        print(f"Expuestos: {results['expuestos']}")

        for generacion, cantidad in results['generaciones'].items():
            print(f"  Generación {generacion}: {cantidad}")

        for i, (persona, count) in enumerate(results['top_spreaders'], 1):
            print(f"{i:2d}. {persona}: {count} exposiciones directas")
