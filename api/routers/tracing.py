"""
Router de Rastreo de Contactos

Consultas sobre la red de contactos y propagación de exposición.
"""
from fastapi import APIRouter, Depends, HTTPException
from typing import Any, Dict, List, Optional
from pydantic import BaseModel

from api.dependencies import get_contact_graph, get_propagator
from src.analysis import PropagationAnalyzer
from src.core.contact_graph import ContactGraph
from src.core.errors import UnknownEntityError
from src.core.exposure import ExposurePropagator
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


class ContactsResponse(BaseModel):
    persona: str
    desde: Optional[int] = None
    contactos: List[str]


class ContactTimesResponse(BaseModel):
    persona_a: str
    persona_b: str
    tiempos: List[int]


class TraceRequest(BaseModel):
    """Persona contagiosa y el instante (minutos) en que se volvió contagiosa."""
    persona: str
    tiempo: int


class Exposure(BaseModel):
    expositor: str
    expuesto: str
    tiempo: int


class TraceResponse(BaseModel):
    persona: str
    tiempo: int
    expuestos: List[str]
    exposiciones: List[Exposure]
    metricas: Dict[str, Any]


@router.get("/tracing/contacts/{persona}", response_model=ContactsResponse)
async def get_contacts(persona: str, desde: Optional[int] = None,
                       contacts: ContactGraph = Depends(get_contact_graph)):
    """
    Contactos directos de una persona.

    Query params:
        desde: si se indica, solo contactos cuyo último encuentro es >= desde
    """
    try:
        if desde is None:
            encontrados = contacts.direct_contacts(persona)
        else:
            encontrados = contacts.direct_contacts_at_or_after(persona, desde)
    except UnknownEntityError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ContactsResponse(persona=persona, desde=desde, contactos=sorted(encontrados))


@router.get("/tracing/times", response_model=ContactTimesResponse)
async def get_contact_times(persona_a: str, persona_b: str,
                            contacts: ContactGraph = Depends(get_contact_graph)):
    try:
        tiempos = contacts.contact_times(persona_a, persona_b)
    except UnknownEntityError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ContactTimesResponse(persona_a=persona_a, persona_b=persona_b, tiempos=tiempos)


@router.post("/tracing/trace", response_model=TraceResponse)
async def trace(request: TraceRequest,
                propagator: ExposurePropagator = Depends(get_propagator)):
    """Personas a notificar a partir de una persona contagiosa."""
    try:
        arbol = propagator.trace_tree(request.persona, request.tiempo)
    except UnknownEntityError as e:
        raise HTTPException(status_code=404, detail=str(e))

    analyzer = PropagationAnalyzer()
    metricas = analyzer.get_metrics(analyzer.analyze(arbol))

    logger.info(f"Rastreo desde {request.persona} (t={request.tiempo}): {metricas['expuestos']} expuestos")

    return TraceResponse(
        persona=request.persona,
        tiempo=request.tiempo,
        expuestos=sorted(n for n in arbol.nodes if n != request.persona),
        exposiciones=[
            Exposure(expositor=u, expuesto=v, tiempo=t)
            for u, v, t in arbol.edges(data='tiempo')
        ],
        metricas=metricas
    )
