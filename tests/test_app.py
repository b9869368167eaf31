"""Application wiring: lifespan, docs and prefix."""

from __future__ import annotations

from fastapi.testclient import TestClient

from equipment_api import create_app
from equipment_api.core.config import Settings


def test_lifespan_opens_and_closes_store(app):
    with TestClient(app) as c:
        store = app.state.store
        assert store.is_open
        assert c.get("/equipment").status_code == 200
    assert not store.is_open


def test_each_app_starts_empty(pump):
    for _ in range(2):
        with TestClient(create_app(Settings(database_url="sqlite://"))) as c:
            assert c.post("/equipment", json=pump).json()["id"] == 1


def test_docs_served_in_development(client):
    assert client.get("/openapi.json").status_code == 200


def test_docs_hidden_outside_development():
    app = create_app(Settings(database_url="sqlite://", environment="production"))
    with TestClient(app) as c:
        assert c.get("/openapi.json").status_code == 404
        assert c.get("/docs").status_code == 404


def test_api_prefix(pump):
    app = create_app(Settings(database_url="sqlite://", api_prefix="/api"))
    with TestClient(app) as c:
        resp = c.post("/api/equipment", json=pump)
        assert resp.status_code == 201
        assert resp.headers["location"] == "/api/equipment/1"
