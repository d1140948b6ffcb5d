"""Tests de la API REST con dependencias reemplazadas por grafos en memoria."""
import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from app import app
from api import dependencies
from api.dependencies import get_collaboration, get_contact_graph, get_propagator
from src.core.exposure import ExposurePropagator


@pytest.fixture
def client(contacts, collaboration):
    app.dependency_overrides[get_contact_graph] = lambda: contacts
    app.dependency_overrides[get_propagator] = lambda: ExposurePropagator(contacts)
    app.dependency_overrides[get_collaboration] = lambda: collaboration
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRoutes:

    def test_routes_are_registered(self):
        paths = {getattr(route, "path", None) for route in app.routes}
        assert {
            "/api/consistency/check",
            "/api/tracing/contacts/{persona}",
            "/api/tracing/times",
            "/api/tracing/trace",
            "/api/collaboration/authors/{autor}",
            "/api/collaboration/papers/{titulo}/average",
            "/api/collaboration/connectivity",
        } <= paths

    def test_root(self, client):
        assert client.get("/").json()["version"] == "1.0.0"


class TestConsistencyEndpoint:

    def test_consistent(self, client):
        response = client.post("/api/consistency/check", json={"hechos": [
            {"persona_a": "A", "persona_b": "B", "tipo": "TYPE_ONE"},
        ]})
        assert response.status_code == 200
        assert response.json() == {"consistente": True, "total_hechos": 1, "ciclo": None}

    def test_inconsistent_reports_cycle(self, client):
        response = client.post("/api/consistency/check", json={"hechos": [
            {"persona_a": "A", "persona_b": "B", "tipo": "TYPE_ONE"},
            {"persona_a": "B", "persona_b": "A", "tipo": "TYPE_ONE"},
        ]})
        body = response.json()
        assert body["consistente"] is False
        assert {e["persona"] for e in body["ciclo"]} == {"A", "B"}

    def test_bad_tag_is_unprocessable(self, client):
        response = client.post("/api/consistency/check", json={"hechos": [
            {"persona_a": "A", "persona_b": "B", "tipo": "TYPE_NINE"},
        ]})
        assert response.status_code == 422


class TestTracingEndpoints:

    def test_contacts(self, client):
        assert client.get("/api/tracing/contacts/C").json()["contactos"] == ["B", "D"]
        assert client.get("/api/tracing/contacts/C", params={"desde": 300}).json()["contactos"] == ["D"]

    def test_contact_times(self, client):
        response = client.get("/api/tracing/times", params={"persona_a": "D", "persona_b": "C"})
        assert response.json()["tiempos"] == [150, 400]

    def test_trace(self, client):
        body = client.post("/api/tracing/trace", json={"persona": "A", "tiempo": 0}).json()
        assert body["expuestos"] == ["B", "C", "D"]
        assert {"expositor": "A", "expuesto": "B", "tiempo": 70} in body["exposiciones"]
        assert body["metricas"]["expuestos"] == 3

    def test_unknown_person_is_not_found(self, client):
        assert client.get("/api/tracing/contacts/Nadie").status_code == 404
        assert client.post("/api/tracing/trace", json={"persona": "Nadie", "tiempo": 0}).status_code == 404


class TestCollaborationEndpoints:

    def test_author(self, client):
        body = client.get("/api/collaboration/authors/Y").json()
        assert body["articulos"] == ["P2"]
        assert body["colaboradores"] == ["X"]
        assert body["distancia"] == 2
        assert body["distancia_ponderada"] == pytest.approx(1.5)

    def test_unreachable_author_has_null_distances(self, client):
        body = client.get("/api/collaboration/authors/Solo").json()
        assert body["distancia"] is None
        assert body["distancia_ponderada"] is None

    def test_paper_average(self, client):
        body = client.get("/api/collaboration/papers/P2/average").json()
        assert body["distancia_promedio"] == pytest.approx(1.5)

    def test_connectivity(self, client):
        body = client.get("/api/collaboration/connectivity").json()
        assert body["conectado_a_todos"] is False
        assert body["distancias"]["inalcanzables"] == 1

    def test_unknown_author_is_not_found(self, client):
        assert client.get("/api/collaboration/authors/Nadie").status_code == 404
        assert client.get("/api/collaboration/papers/P99/average").status_code == 404


class TestDependencies:

    def test_contact_graph_is_built_once_across_threads(self, monkeypatch, contacts):
        construcciones = []

        def construir(records):
            construcciones.append(records)
            time.sleep(0.05)
            return contacts

        class LoaderFalso:
            def load_contacts(self):
                return []

        monkeypatch.setattr(dependencies, "_contact_graph", None)
        monkeypatch.setattr(dependencies, "get_loader", lambda: LoaderFalso())
        monkeypatch.setattr(dependencies, "ContactGraph", construir)

        with ThreadPoolExecutor(max_workers=8) as pool:
            grafos = list(pool.map(lambda _: dependencies.get_contact_graph(), range(8)))

        assert len(construcciones) == 1
        assert all(g is contacts for g in grafos)
