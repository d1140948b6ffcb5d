"""Fixtures compartidas por los tests de los motores."""
import pytest

from src.core.contact_graph import ContactGraph
from src.core.collaboration import CollaborationGraph
from src.core.models import ContactRecord


@pytest.fixture
def contacts() -> ContactGraph:
    """Red pequeña: cadena A-B-C, rama A-E-D y un par aislado F-G."""
    return ContactGraph([
        ContactRecord("A", "B", 70),
        ContactRecord("B", "C", 200),
        ContactRecord("A", "E", 30),
        ContactRecord("E", "D", 500),
        ContactRecord("C", "D", 150),
        ContactRecord("C", "D", 400),
        ContactRecord("F", "G", 90),
    ])


@pytest.fixture
def collaboration() -> CollaborationGraph:
    return CollaborationGraph(
        [
            "P1:Erdos|X",
            "P2:X|Y",
            "P3:Erdos|Z|X",
            "P4:Erdos|Z",
            "P5:Solo",
        ],
        reference_author="Erdos",
    )
