"""Red de contactos: multigrafo no dirigido etiquetado con instantes de contacto."""
import copy
import networkx as nx
from typing import Iterable, List, Set

from .errors import UnknownEntityError
from .models import ContactRecord
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ContactGraph:
    """
    Grafo de contactos entre personas.

    Cada arista guarda en ``tiempos`` el conjunto de instantes (minutos) en que
    el par estuvo en contacto. networkx comparte el mismo diccionario de datos
    para ambos sentidos de la arista, por lo que el grafo es siempre simétrico.
    """

    def __init__(self, records: Iterable[ContactRecord] = ()):
        self._G = nx.Graph()
        for record in records:
            self.add_contact(record)

        if self._G.number_of_nodes():
            logger.info(
                f"Red de contactos construida: {self._G.number_of_nodes()} personas, "
                f"{self._G.number_of_edges()} pares"
            )

    def add_contact(self, record: ContactRecord):
        """Agrega un contacto; repetir el mismo (par, instante) no tiene efecto."""
        a, b = record.person_a, record.person_b

        if self._G.has_edge(a, b):
            self._G[a][b]['tiempos'].add(record.timestamp)
        else:
            self._G.add_edge(a, b, tiempos={record.timestamp})

    def _require(self, person: str):
        if person not in self._G:
            raise UnknownEntityError('Persona', person)

    def contact_times(self, person_a: str, person_b: str) -> List[int]:
        """Instantes de contacto entre dos personas, en orden ascendente."""
        self._require(person_a)
        self._require(person_b)

        if not self._G.has_edge(person_a, person_b):
            return []
        return sorted(self._G[person_a][person_b]['tiempos'])

    def direct_contacts(self, person: str) -> Set[str]:
        self._require(person)
        return set(self._G.neighbors(person))

    def direct_contacts_at_or_after(self, person: str, timestamp: int) -> Set[str]:
        """
        Contactos directos cuyo contacto MÁS RECIENTE con ``person`` es >= timestamp.

        Solo se compara el último instante de cada par, no cualquier instante.
        """
        self._require(person)
        return {
            otra
            for otra, datos in self._G[person].items()
            if max(datos['tiempos']) >= timestamp
        }

    @property
    def people(self) -> Set[str]:
        return set(self._G.nodes)

    @property
    def graph(self) -> nx.Graph:
        """Copia congelada del grafo; modificarla no altera la red."""
        return nx.freeze(copy.deepcopy(self._G))

    def __contains__(self, person) -> bool:
        return person in self._G

    def __len__(self) -> int:
        return self._G.number_of_nodes()

    def __repr__(self) -> str:
        return (
            f"ContactGraph(personas={self._G.number_of_nodes()}, "
            f"pares={self._G.number_of_edges()})"
        )
