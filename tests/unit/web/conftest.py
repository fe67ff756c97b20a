"""
Fixtures des tests de l'API : application complete sur une base temporaire.
"""

from typing import Iterator

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from cinecatalog.config import Settings
from cinecatalog.container import Container
from cinecatalog.web.app import create_app


@pytest.fixture
def client(test_settings: Settings) -> Iterator[TestClient]:
    """Client HTTP sur une application dont le container utilise les Settings de test."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    app = create_app(container)
    with TestClient(app) as client:
        yield client
    container.config.reset_override()


@pytest.fixture
def seeded(client: TestClient) -> dict:
    """Cree genres, cinemas et acteurs via l'API et retourne leurs IDs."""
    genres = [
        client.post("/api/genres", json={"name": name}).json()["id"]
        for name in ("Action", "Drame", "Comedie")
    ]
    theaters = [
        client.post("/api/theaters", json={"name": name, "latitude": 48.8, "longitude": 2.3}).json()["id"]
        for name in ("Rex", "Gaumont")
    ]
    actors = [
        client.post("/api/actors", data={"name": name, "birth_date": "1980-01-01"}).json()["id"]
        for name in ("Alice Martin", "Bruno Petit", "Chloe Durand")
    ]
    return {"genres": genres, "theaters": theaters, "actors": actors}
