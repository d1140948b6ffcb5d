"""
Router de Consistencia

Verifica si un conjunto de hechos temporales puede ser cierto a la vez.
"""
from fastapi import APIRouter, HTTPException
from typing import List, Optional
from pydantic import BaseModel, Field

from src.core.consistency import ConsistencyChecker
from src.core.errors import MalformedRecordError
from src.core.models import Statement, StatementType
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


class StatementIn(BaseModel):
    """Hecho temporal entre dos personas."""
    persona_a: str = Field(min_length=1)
    persona_b: str = Field(min_length=1)
    tipo: StatementType


class ConsistencyRequest(BaseModel):
    hechos: List[StatementIn]


class CycleEvent(BaseModel):
    persona: str
    estado: str


class ConsistencyResponse(BaseModel):
    """Resultado de la verificación; ``ciclo`` lista los eventos en conflicto."""
    consistente: bool
    total_hechos: int
    ciclo: Optional[List[CycleEvent]] = None


@router.post("/consistency/check", response_model=ConsistencyResponse)
async def check_consistency(request: ConsistencyRequest):
    try:
        hechos = [Statement(h.persona_a, h.persona_b, h.tipo) for h in request.hechos]
    except MalformedRecordError as e:
        raise HTTPException(status_code=422, detail=str(e))

    ciclo = ConsistencyChecker.find_cycle(hechos)
    logger.info(f"Verificación de {len(hechos)} hechos: {'inconsistente' if ciclo else 'consistente'}")

    return ConsistencyResponse(
        consistente=ciclo is None,
        total_hechos=len(hechos),
        ciclo=[CycleEvent(persona=e.name, estado=e.state.value) for e in ciclo] if ciclo else None
    )
