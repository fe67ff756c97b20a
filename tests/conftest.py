"""
Fixtures pytest partagees pour les tests CineCatalog.

Ce module contient les fixtures communes utilisees dans les tests:
- Session SQLModel sur une base en memoire
- Donnees de reference (genres, cinemas, acteurs) deja persistees
- Mocks des ports de stockage et de cache
- Settings de test avec chemins temporaires
"""

from datetime import date
from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlmodel import Session, SQLModel

from cinecatalog.config import Settings
from cinecatalog.core.ports.storage import IAssetStore, IResponseCache
from cinecatalog.infrastructure.persistence.database import create_database_engine
from cinecatalog.infrastructure.persistence.models import ActorModel, GenreModel, TheaterModel


@pytest.fixture
def session() -> Iterator[Session]:
    """Session sur une base SQLite en memoire, cles etrangeres actives."""
    engine = create_database_engine("sqlite:///:memory:")
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def reference_data(session: Session) -> dict:
    """
    Persiste un jeu de donnees de reference.

    Returns:
        Dict avec les IDs : genres (Action, Drame, Comedie), theaters
        (Rex, Gaumont), actors (Alice, Bruno, Chloe)
    """
    genres = [GenreModel(name=name) for name in ("Action", "Drame", "Comedie")]
    theaters = [
        TheaterModel(name="Rex", latitude=48.87, longitude=2.35),
        TheaterModel(name="Gaumont", latitude=45.76, longitude=4.83),
    ]
    actors = [
        ActorModel(name="Alice Martin", birth_date=date(1980, 1, 1)),
        ActorModel(name="Bruno Petit", birth_date=date(1975, 6, 15)),
        ActorModel(name="Chloe Durand", birth_date=date(1990, 3, 30)),
    ]
    session.add_all([*genres, *theaters, *actors])
    session.commit()
    return {
        "genres": [g.id for g in genres],
        "theaters": [t.id for t in theaters],
        "actors": [a.id for a in actors],
    }


@pytest.fixture
def mock_asset_store() -> MagicMock:
    """
    Mock de IAssetStore pour les tests.

    store() et replace() retournent une URL fixe par defaut.
    """
    mock = MagicMock(spec=IAssetStore)
    mock.store = AsyncMock(return_value="/media/movies/new.jpg")
    mock.replace = AsyncMock(return_value="/media/movies/replaced.jpg")
    mock.delete = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def passthrough_cache() -> MagicMock:
    """
    Mock de IResponseCache qui recalcule toujours la valeur.

    Permet de verifier les invalidations sans dependre de diskcache.
    """
    mock = MagicMock(spec=IResponseCache)

    async def get_or_compute(key, tag, compute):
        return compute()

    mock.get_or_compute = AsyncMock(side_effect=get_or_compute)
    mock.evict = AsyncMock(return_value=0)
    mock.clear = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler base, fichiers, cache et logs.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'catalog.db'}",
        media_dir=tmp_path / "media",
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "logs" / "cinecatalog.log",
    )
