
from .config import PATHS, TRACING_CONFIG, COLLAB_CONFIG
from .errors import GraphError, UnknownEntityError, MalformedRecordError
from .models import (
    Event,
    EventState,
    Statement,
    StatementType,
    ContactRecord,
    Paper
)
from .consistency import ConsistencyChecker, is_consistent
from .contact_graph import ContactGraph
from .exposure import ExposurePropagator
from .collaboration import CollaborationGraph, INFINITY

__all__ = [
    'PATHS',
    'TRACING_CONFIG',
    'COLLAB_CONFIG',
    'GraphError',
    'UnknownEntityError',
    'MalformedRecordError',
    'Event',
    'EventState',
    'Statement',
    'StatementType',
    'ContactRecord',
    'Paper',
    'ConsistencyChecker',
    'is_consistent',
    'ContactGraph',
    'ExposurePropagator',
    'CollaborationGraph',
    'INFINITY',
]
