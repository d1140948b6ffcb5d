"""Propagación de exposición (rastreo de contactos) sobre la red de contactos."""
import networkx as nx
from collections import deque
from typing import Set

from .config import TRACING_CONFIG
from .contact_graph import ContactGraph
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ExposurePropagator:
    """
    BFS desde una persona contagiosa respetando la ventana de incubación.

    Una persona expuesta en el instante ``t`` se vuelve contagiosa en
    ``t + incubation_window``. Cada persona se examina una sola vez: el primer
    descubrimiento en orden BFS fija su instante de contagio, aunque otra
    ruta pudiera exponerla antes.
    """

    def __init__(self, contacts: ContactGraph,
                 incubation_window: int = TRACING_CONFIG.incubation_window):
        self.contacts = contacts
        self.incubation_window = incubation_window

    def trace_tree(self, person: str, contagion_start: int) -> nx.DiGraph:
        """
        Árbol de propagación desde ``person``.

        Nodos: ``contagio`` (instante en que se vuelve contagioso) y ``generacion``
        (capa BFS). Aristas expositor → expuesto con ``tiempo`` (instante de exposición).

        Raises:
            UnknownEntityError: si ``person`` no está en la red
        """
        vecinos = self.contacts.direct_contacts(person)

        arbol = nx.DiGraph()
        arbol.add_node(person, contagio=contagion_start, generacion=0)

        visitados = {person}
        cola = deque([(person, contagion_start, 0, vecinos)])

        while cola:
            actual, contagio, generacion, vecinos = cola.popleft()

            for candidato in sorted(vecinos):
                if candidato in visitados:
                    continue
                # Se marca aunque no resulte expuesto
                visitados.add(candidato)

                # Primer contacto al menos una ventana después del contagio
                for tiempo in self.contacts.contact_times(actual, candidato):
                    if tiempo - contagio >= self.incubation_window:
                        nuevo_contagio = tiempo + self.incubation_window
                        arbol.add_node(candidato, contagio=nuevo_contagio,
                                       generacion=generacion + 1)
                        arbol.add_edge(actual, candidato, tiempo=tiempo)
                        cola.append((candidato, nuevo_contagio, generacion + 1,
                                     self.contacts.direct_contacts(candidato)))
                        break

        logger.debug(
            f"Rastreo desde {person!r} (t={contagion_start}): "
            f"{arbol.number_of_nodes() - 1} personas expuestas"
        )
        return arbol

    def trace(self, person: str, contagion_start: int) -> Set[str]:
        """Personas que pudieron contagiarse a partir de ``person`` (sin incluirla)."""
        expuestos = set(self.trace_tree(person, contagion_start).nodes)
        expuestos.discard(person)
        return expuestos
