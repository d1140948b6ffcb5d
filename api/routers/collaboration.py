"""
Router de Colaboración

Distancias de colaboración entre autores y el autor de referencia.
"""
import math
from fastapi import APIRouter, Depends, HTTPException
from typing import Any, Dict, List, Optional
from pydantic import BaseModel

from api.dependencies import get_collaboration
from src.analysis import DistanceAnalyzer, GraphStatistics
from src.core.collaboration import CollaborationGraph
from src.core.errors import UnknownEntityError
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


def _finite(value: float) -> Optional[float]:
    """JSON no admite infinito: sin camino se reporta como null."""
    return None if math.isinf(value) else value


class AuthorResponse(BaseModel):
    autor: str
    articulos: List[str]
    colaboradores: List[str]
    distancia: Optional[int] = None
    distancia_ponderada: Optional[float] = None


class PaperDistanceResponse(BaseModel):
    titulo: str
    autores: List[str]
    distancia_promedio: Optional[float] = None


class ConnectivityResponse(BaseModel):
    referencia: str
    conectado_a_todos: bool
    estadisticas: Dict[str, Any]
    distancias: Dict[str, Any]


@router.get("/collaboration/authors/{autor}", response_model=AuthorResponse)
async def get_author(autor: str, collaboration: CollaborationGraph = Depends(get_collaboration)):
    try:
        distancia = _finite(collaboration.unweighted_distance(autor))
        return AuthorResponse(
            autor=autor,
            articulos=sorted(collaboration.papers_of(autor)),
            colaboradores=sorted(collaboration.collaborators_of(autor)),
            distancia=None if distancia is None else int(distancia),
            distancia_ponderada=_finite(collaboration.weighted_distance(autor))
        )
    except UnknownEntityError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/collaboration/papers/{titulo}/average", response_model=PaperDistanceResponse)
async def get_paper_average(titulo: str, collaboration: CollaborationGraph = Depends(get_collaboration)):
    try:
        return PaperDistanceResponse(
            titulo=titulo,
            autores=list(collaboration.authors_of(titulo)),
            distancia_promedio=_finite(collaboration.average_paper_distance(titulo))
        )
    except UnknownEntityError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/collaboration/connectivity", response_model=ConnectivityResponse)
async def get_connectivity(collaboration: CollaborationGraph = Depends(get_collaboration)):
    analyzer = DistanceAnalyzer()
    resultados = analyzer.analyze(collaboration)

    logger.info(f"Conectividad de {collaboration.reference_author}: {resultados['inalcanzables']} autores sin camino")

    return ConnectivityResponse(
        referencia=collaboration.reference_author,
        conectado_a_todos=collaboration.is_reference_connected_to_all(),
        estadisticas=GraphStatistics.get_statistics(collaboration.graph),
        distancias=analyzer.get_metrics(resultados)
    )
