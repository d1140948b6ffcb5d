"""Red de colaboración entre autores y distancias a un autor de referencia."""
import copy
import heapq
import itertools
import math
import networkx as nx
from collections import deque
from typing import Dict, Iterable, List, Set, Union

from .config import COLLAB_CONFIG
from .errors import MalformedRecordError, UnknownEntityError
from .models import Paper
from ..utils.logger import get_logger

logger = get_logger(__name__)

INFINITY = math.inf


class CollaborationGraph:
    """
    Grafo ponderado de coautorías.

    El peso de cada arista es el número de artículos compartidos. Al construir
    se calculan, desde el autor de referencia, la distancia en saltos (BFS) y
    la distancia ponderada (Dijkstra con costo ``1 / peso``). Los autores sin
    camino a la referencia quedan con distancia ``math.inf``.
    """

    def __init__(self, papers: Iterable[Union[Paper, str]],
                 reference_author: str = COLLAB_CONFIG.reference_author):
        self.reference_author = reference_author
        self._G = nx.Graph()
        self._paper_authors: Dict[str, tuple] = {}

        for paper in papers:
            self._add_paper(paper if isinstance(paper, Paper) else Paper.parse(paper))

        if reference_author not in self._G:
            logger.warning(f"Autor de referencia {reference_author!r} ausente del conjunto de artículos")

        self._compute_distances()
        self._compute_weighted_distances()

        logger.info(
            f"Red de colaboración construida: {self._G.number_of_nodes()} autores, "
            f"{self._G.number_of_edges()} coautorías, {len(self._paper_authors)} artículos"
        )

    def _add_paper(self, paper: Paper):
        if paper.title in self._paper_authors:
            raise MalformedRecordError(f"Artículo repetido: {paper.title!r}")
        self._paper_authors[paper.title] = paper.authors

        for author in paper.authors:
            if author not in self._G:
                self._G.add_node(author, articulos=set(),
                                 distancia=INFINITY, distancia_ponderada=INFINITY)
            self._G.nodes[author]['articulos'].add(paper.title)

        # Una unidad de peso por artículo compartido
        for u, v in itertools.combinations(paper.authors, 2):
            if self._G.has_edge(u, v):
                self._G[u][v]['peso'] += 1
            else:
                self._G.add_edge(u, v, peso=1)

    def _compute_distances(self):
        """BFS desde la referencia: distancia en número de saltos."""
        if self.reference_author not in self._G:
            return

        nodos = self._G.nodes
        nodos[self.reference_author]['distancia'] = 0
        visitados = {self.reference_author}
        cola = deque([self.reference_author])

        while cola:
            actual = cola.popleft()
            for colaborador in self._G.neighbors(actual):
                if colaborador not in visitados:
                    visitados.add(colaborador)
                    nodos[colaborador]['distancia'] = nodos[actual]['distancia'] + 1
                    cola.append(colaborador)

    def _compute_weighted_distances(self):
        """
        Dijkstra desde la referencia con costo ``1 / peso`` por arista.

        heapq no permite cambiar prioridades: al relajar se invalida la entrada
        anterior del autor y se inserta una nueva (eliminar + reinsertar).
        Las entradas invalidadas se descartan al extraerlas.
        """
        if self.reference_author not in self._G:
            return

        nodos = self._G.nodes
        contador = itertools.count()  # desempate estable
        entradas: Dict[str, list] = {}
        heap: List[list] = []

        def push(author: str, distancia: float):
            anterior = entradas.pop(author, None)
            if anterior is not None:
                anterior[-1] = None  # entrada obsoleta
            entrada = [distancia, next(contador), author]
            entradas[author] = entrada
            heapq.heappush(heap, entrada)

        nodos[self.reference_author]['distancia_ponderada'] = 0.0
        push(self.reference_author, 0.0)

        while heap:
            distancia, _, actual = heapq.heappop(heap)
            if actual is None:
                continue
            del entradas[actual]

            for colaborador, datos in self._G[actual].items():
                relajada = distancia + 1.0 / datos['peso']
                if relajada < nodos[colaborador]['distancia_ponderada']:
                    nodos[colaborador]['distancia_ponderada'] = relajada
                    push(colaborador, relajada)

    def _node(self, author: str) -> dict:
        if author not in self._G:
            raise UnknownEntityError('Autor', author)
        return self._G.nodes[author]

    def papers_of(self, author: str) -> Set[str]:
        return set(self._node(author)['articulos'])

    def collaborators_of(self, author: str) -> Set[str]:
        self._node(author)
        return set(self._G.neighbors(author))

    def authors_of(self, title: str) -> tuple:
        if title not in self._paper_authors:
            raise UnknownEntityError('Artículo', title)
        return self._paper_authors[title]

    def is_reference_connected_to_all(self) -> bool:
        """True si todo autor tiene distancia finita a la referencia."""
        return all(d != INFINITY for _, d in self._G.nodes(data='distancia'))

    def unweighted_distance(self, author: str) -> Union[int, float]:
        """Saltos hasta la referencia; ``math.inf`` si no hay camino."""
        return self._node(author)['distancia']

    def weighted_distance(self, author: str) -> float:
        """Suma mínima de ``1 / peso``; ``math.inf`` si no hay camino."""
        return self._node(author)['distancia_ponderada']

    def average_paper_distance(self, title: str) -> float:
        """Promedio de las distancias en saltos de los autores del artículo."""
        autores = self.authors_of(title)
        return sum(self.unweighted_distance(a) for a in autores) / len(autores)

    @property
    def authors(self) -> Set[str]:
        return set(self._G.nodes)

    @property
    def titles(self) -> Set[str]:
        return set(self._paper_authors)

    @property
    def graph(self) -> nx.Graph:
        """Copia congelada del grafo; modificarla no altera la red."""
        return nx.freeze(copy.deepcopy(self._G))

    def __contains__(self, author) -> bool:
        return author in self._G

    def __len__(self) -> int:
        return self._G.number_of_nodes()

    def __repr__(self) -> str:
        return (
            f"CollaborationGraph(referencia={self.reference_author!r}, "
            f"autores={self._G.number_of_nodes()}, coautorias={self._G.number_of_edges()})"
        )
