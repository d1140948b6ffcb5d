"""
Consistency Checker Tests
=========================

Los hechos son consistentes si y solo si el grafo de eventos es acíclico.
"""
import pytest
import networkx as nx

from src.core.consistency import ConsistencyChecker, is_consistent
from src.core.models import Event, EventState, Statement, StatementType


def one(a: str, b: str) -> Statement:
    return Statement(a, b, StatementType.TYPE_ONE)


def two(a: str, b: str) -> Statement:
    return Statement(a, b, StatementType.TYPE_TWO)


class TestEventGraph:

    def test_every_person_gets_arrival_and_departure(self):
        G = ConsistencyChecker.build_graph([one("A", "B")])

        assert set(G.nodes) == {
            Event("A", EventState.ARRIVED), Event("A", EventState.LEFT),
            Event("B", EventState.ARRIVED), Event("B", EventState.LEFT),
        }
        assert G.has_edge(Event("A", EventState.ARRIVED), Event("A", EventState.LEFT))
        assert G.has_edge(Event("B", EventState.ARRIVED), Event("B", EventState.LEFT))

    def test_type_one_adds_departure_before_arrival(self):
        G = ConsistencyChecker.build_graph([one("A", "B")])

        assert G.has_edge(Event("A", EventState.LEFT), Event("B", EventState.ARRIVED))
        assert G.number_of_edges() == 3

    def test_type_two_adds_both_overlap_edges(self):
        G = ConsistencyChecker.build_graph([two("A", "B")])

        assert G.has_edge(Event("A", EventState.ARRIVED), Event("B", EventState.LEFT))
        assert G.has_edge(Event("B", EventState.ARRIVED), Event("A", EventState.LEFT))
        assert G.number_of_edges() == 4

    def test_duplicate_statements_collapse(self):
        G = ConsistencyChecker.build_graph([one("A", "B"), one("A", "B")])
        assert G.number_of_edges() == 3

    def test_events_are_compared_by_value(self):
        assert Event("A", EventState.LEFT) == Event("A", EventState.LEFT)
        assert hash(Event("A", EventState.LEFT)) == hash(Event("A", EventState.LEFT))
        assert Event("A", EventState.LEFT) != Event("A", EventState.ARRIVED)


class TestIsConsistent:

    def test_empty_set_is_consistent(self):
        assert is_consistent([]) is True

    def test_single_statement_is_consistent(self):
        assert is_consistent([one("A", "B")])
        assert is_consistent([two("A", "B")])

    def test_opposite_type_one_is_inconsistent(self):
        assert is_consistent([one("A", "B"), one("B", "A")]) is False

    def test_before_contradicts_together(self):
        # A se fue antes de que B llegara, pero estuvieron juntos
        assert not is_consistent([one("A", "B"), two("A", "B")])

    def test_chain_is_consistent(self):
        assert is_consistent([one("A", "B"), one("B", "C"), one("C", "D")])

    def test_long_cycle_is_inconsistent(self):
        assert not is_consistent([one("A", "B"), one("B", "C"), one("C", "A")])

    def test_join_in_dag_is_not_a_cycle(self):
        # Dos caminos hacia D-ARRIVED: una unión, no un ciclo
        statements = [one("A", "D"), one("B", "D"), two("A", "B"), one("C", "D")]
        assert is_consistent(statements)

    def test_overlaps_are_consistent(self):
        assert is_consistent([two("A", "B"), two("B", "C"), two("A", "C")])

    def test_self_precedence_is_inconsistent(self):
        assert not is_consistent([one("A", "A")])

    def test_tags_accepted_as_text(self):
        assert not is_consistent([Statement("A", "B", "TYPE_ONE"), Statement("B", "A", "type_one")])

    def test_deep_chain_does_not_hit_recursion_limit(self):
        statements = [one(f"P{i}", f"P{i + 1}") for i in range(5000)]
        assert is_consistent(statements)
        assert not is_consistent(statements + [one("P5000", "P0")])


class TestFindCycle:

    def test_no_cycle_returns_none(self):
        assert ConsistencyChecker.find_cycle([one("A", "B")]) is None

    def test_cycle_events_form_a_closed_path(self):
        ciclo = ConsistencyChecker.find_cycle([one("A", "B"), one("B", "A")])
        G = ConsistencyChecker.build_graph([one("A", "B"), one("B", "A")])

        assert ciclo is not None
        for u, v in zip(ciclo, ciclo[1:] + ciclo[:1]):
            assert G.has_edge(u, v)

    @pytest.mark.parametrize("statements", [
        [one("A", "B"), one("B", "C"), one("C", "A")],
        [two("A", "B"), one("B", "C"), one("C", "A"), two("C", "D")],
        [one("A", "B"), two("B", "C"), two("C", "D"), one("D", "E")],
    ])
    def test_agrees_with_networkx(self, statements):
        G = ConsistencyChecker.build_graph(statements)
        assert ConsistencyChecker.has_cycle(G) == (not nx.is_directed_acyclic_graph(G))
