"""
Módulo de análisis de los grafos construidos por los motores.

Exporta:
- Interfaz base de analizadores
- Estadísticas estructurales
- Analizadores de propagación y de distancias
"""

from .base import GraphAnalyzer
from .statistics import GraphStatistics
from .propagation_analyzer import PropagationAnalyzer
from .distance_analyzer import DistanceAnalyzer

__all__ = [
    'GraphAnalyzer',
    'GraphStatistics',
    'PropagationAnalyzer',
    'DistanceAnalyzer',
]
