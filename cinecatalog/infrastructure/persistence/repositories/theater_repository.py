"""
Implementation SQLModel du repository Theater.
"""

from cinecatalog.core.entities.catalog import Theater
from cinecatalog.core.ports.repositories import ITheaterRepository
from cinecatalog.infrastructure.persistence.models import TheaterModel
from cinecatalog.infrastructure.persistence.repositories.reference_repository import (
    SQLModelReferenceRepository,
)


class SQLModelTheaterRepository(
    SQLModelReferenceRepository[Theater, TheaterModel], ITheaterRepository
):
    """Repository SQLModel pour les cinemas."""

    model = TheaterModel

    def _to_entity(self, model: TheaterModel) -> Theater:
        return Theater(
            id=model.id,
            name=model.name,
            latitude=model.latitude,
            longitude=model.longitude,
        )

    def _apply(self, entity: Theater, model: TheaterModel) -> None:
        model.name = entity.name
        model.latitude = entity.latitude
        model.longitude = entity.longitude
