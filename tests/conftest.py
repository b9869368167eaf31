"""Shared fixtures: a fresh in-memory store and an application per test."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlmodel import Session

from equipment_api import create_app
from equipment_api.core.config import Settings
from equipment_api.db.store import Store


@pytest.fixture
def store() -> Iterator[Store]:
    store = Store("sqlite://")
    store.open()
    yield store
    store.close()


@pytest.fixture
def session(store: Store) -> Iterator[Session]:
    with store.session() as session:
        yield session


@pytest.fixture
def app() -> FastAPI:
    return create_app(Settings(database_url="sqlite://", environment="development"))


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def pump() -> dict[str, str]:
    return {"name": "Pump", "description": "d", "code": "PUMP1"}


@pytest.fixture
def pressure() -> dict[str, object]:
    return {
        "name": "Pressure",
        "description": "d2",
        "equipmentCode": "PUMP1",
        "equipmentId": 1,
    }
