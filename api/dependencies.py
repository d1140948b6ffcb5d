"""
Dependencias compartidas de la API.

Los motores se construyen una sola vez (al primer uso) a partir de los
archivos de PATHS y luego solo se consultan.
"""
import threading

from src.core.config import PATHS, COLLAB_CONFIG
from src.core.contact_graph import ContactGraph
from src.core.exposure import ExposurePropagator
from src.core.collaboration import CollaborationGraph
from src.data.loader import DataLoader
from src.utils.logger import get_logger

logger = get_logger(__name__)

# Instancias globales (singleton para eficiencia)
_loader = None
_contact_graph = None
_collaboration = None

# Reentrante: get_contact_graph y get_collaboration llaman a get_loader con el lock tomado
_lock = threading.RLock()


def get_loader() -> DataLoader:
    """Obtiene o crea instancia del DataLoader."""
    global _loader
    if _loader is None:
        with _lock:
            if _loader is None:
                _loader = DataLoader(PATHS.hechos, PATHS.contactos, PATHS.articulos)
                logger.info("DataLoader inicializado")
    return _loader


def get_contact_graph() -> ContactGraph:
    global _contact_graph
    if _contact_graph is None:
        with _lock:
            if _contact_graph is None:
                _contact_graph = ContactGraph(get_loader().load_contacts())
    return _contact_graph


def get_propagator() -> ExposurePropagator:
    return ExposurePropagator(get_contact_graph())


def get_collaboration() -> CollaborationGraph:
    global _collaboration
    if _collaboration is None:
        with _lock:
            if _collaboration is None:
                _collaboration = CollaborationGraph(get_loader().load_papers(),
                                                    COLLAB_CONFIG.reference_author)
    return _collaboration
