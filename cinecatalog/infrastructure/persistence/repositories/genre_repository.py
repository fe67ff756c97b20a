"""
Implementation SQLModel du repository Genre.
"""

from cinecatalog.core.entities.catalog import Genre
from cinecatalog.core.ports.repositories import IGenreRepository
from cinecatalog.infrastructure.persistence.models import GenreModel
from cinecatalog.infrastructure.persistence.repositories.reference_repository import (
    SQLModelReferenceRepository,
)


class SQLModelGenreRepository(SQLModelReferenceRepository[Genre, GenreModel], IGenreRepository):
    """Repository SQLModel pour les genres."""

    model = GenreModel

    def _to_entity(self, model: GenreModel) -> Genre:
        return Genre(id=model.id, name=model.name)

    def _apply(self, entity: Genre, model: GenreModel) -> None:
        model.name = entity.name
