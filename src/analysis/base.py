"""Interfaz común de los analizadores de grafos."""
from abc import ABC, abstractmethod
from typing import Any, Dict


class GraphAnalyzer(ABC):
    """Clase base abstracta para analizadores (resultado serializable + métricas)."""

    @abstractmethod
    def analyze(self, subject, **kwargs) -> Dict[str, Any]:
        """Realiza el análisis y devuelve resultados en formato serializable."""
        pass

    @abstractmethod
    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        """Extrae métricas esenciales para la API."""
        pass

    def print_results(self, results: Dict[str, Any]):
        """Imprime resultados del análisis (opcional - para CLI)."""
        pass
