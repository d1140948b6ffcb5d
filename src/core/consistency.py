"""Verificación de consistencia de hechos temporales mediante detección de ciclos."""
import networkx as nx
from typing import Dict, Iterable, List, Optional

from .models import Event, EventState, Statement, StatementType
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ConsistencyChecker:
    """
    Construye un grafo dirigido de eventos (llegadas/salidas) donde cada arista
    indica "ocurre antes que". Los hechos son consistentes si el grafo es un DAG.
    """

    @staticmethod
    def build_graph(statements: Iterable[Statement]) -> nx.DiGraph:
        """Construye el grafo de eventos a partir de los hechos."""
        G = nx.DiGraph()

        for statement in statements:
            a_llego = Event(statement.person_a, EventState.ARRIVED)
            a_salio = Event(statement.person_a, EventState.LEFT)
            b_llego = Event(statement.person_b, EventState.ARRIVED)
            b_salio = Event(statement.person_b, EventState.LEFT)

            # Toda persona llega antes de irse
            G.add_edge(a_llego, a_salio)
            G.add_edge(b_llego, b_salio)

            if statement.type is StatementType.TYPE_ONE:
                G.add_edge(a_salio, b_llego)
            else:
                G.add_edge(a_llego, b_salio)
                G.add_edge(b_llego, a_salio)

        return G

    @staticmethod
    def _search_cycle(G: nx.DiGraph) -> Optional[List[Event]]:
        """DFS con pila explícita; retorna el primer ciclo encontrado o None."""
        visitados = set()

        for inicio in G:
            if inicio in visitados:
                continue

            visitados.add(inicio)
            camino: List[Event] = [inicio]
            en_camino: Dict[Event, int] = {inicio: 0}
            pila = [iter(G.successors(inicio))]

            while pila:
                siguiente = next(pila[-1], None)

                if siguiente is None:
                    pila.pop()
                    del en_camino[camino.pop()]
                elif siguiente in en_camino:
                    # Arista de retroceso
                    return camino[en_camino[siguiente]:]
                elif siguiente not in visitados:
                    visitados.add(siguiente)
                    en_camino[siguiente] = len(camino)
                    camino.append(siguiente)
                    pila.append(iter(G.successors(siguiente)))
                # Visitado fuera del camino: unión del DAG, no es ciclo

        return None

    @classmethod
    def has_cycle(cls, G: nx.DiGraph) -> bool:
        return cls._search_cycle(G) is not None

    @classmethod
    def find_cycle(cls, statements: Iterable[Statement]) -> Optional[List[Event]]:
        """Eventos que forman el primer ciclo detectado, o None si no hay."""
        return cls._search_cycle(cls.build_graph(statements))

    @classmethod
    def is_consistent(cls, statements: Iterable[Statement]) -> bool:
        """True si todos los hechos pueden ser ciertos a la vez."""
        G = cls.build_graph(statements)
        ciclo = cls._search_cycle(G)

        logger.debug(
            f"Grafo de eventos: {G.number_of_nodes()} nodos, {G.number_of_edges()} aristas, "
            f"ciclo={'sí' if ciclo else 'no'}"
        )
        return ciclo is None


is_consistent = ConsistencyChecker.is_consistent
