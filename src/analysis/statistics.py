"""Estadísticas estructurales de grafos no dirigidos."""
import networkx as nx
from typing import Dict


class GraphStatistics:

    @staticmethod
    def get_statistics(G: nx.Graph) -> Dict:
        """Nodos, aristas, densidad y componentes conexas del grafo."""
        if G.number_of_nodes() == 0:
            return {
                'nodos': 0,
                'aristas': 0,
                'densidad': 0.0,
                'componentes': 0,
                'componente_mayor': 0
            }

        componentes = list(nx.connected_components(G))

        return {
            'nodos': G.number_of_nodes(),
            'aristas': G.number_of_edges(),
            'densidad': nx.density(G),
            'componentes': len(componentes),
            'componente_mayor': len(max(componentes, key=len))
        }
