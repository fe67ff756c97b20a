"""
Implementation SQLModel du repository Actor.

Ajoute la recherche par nom utilisee par l'autocompletion du formulaire film.
La suppression d'un acteur reindexe la distribution des films ou il jouait.
"""

from sqlalchemy import func
from sqlmodel import select

from cinecatalog.core.casting import reindex_cast
from cinecatalog.core.entities.catalog import Actor
from cinecatalog.core.ports.repositories import IActorRepository
from cinecatalog.infrastructure.persistence.models import ActorModel, CastLinkModel
from cinecatalog.infrastructure.persistence.repositories.reference_repository import (
    SQLModelReferenceRepository,
)


class SQLModelActorRepository(SQLModelReferenceRepository[Actor, ActorModel], IActorRepository):
    """Repository SQLModel pour les acteurs."""

    model = ActorModel

    def _to_entity(self, model: ActorModel) -> Actor:
        return Actor(
            id=model.id,
            name=model.name,
            birth_date=model.birth_date,
            photo=model.photo,
        )

    def _apply(self, entity: Actor, model: ActorModel) -> None:
        model.name = entity.name
        model.birth_date = entity.birth_date
        model.photo = entity.photo

    def search_by_name(self, name: str, limit: int = 5) -> list[Actor]:
        """Recherche des acteurs dont le nom contient le texte (insensible a la casse)."""
        pattern = f"%{name.strip().lower()}%"
        statement = (
            select(ActorModel)
            .where(func.lower(ActorModel.name).like(pattern))
            .order_by(ActorModel.name)
            .limit(limit)
        )
        return [self._to_entity(m) for m in self._session.exec(statement).all()]

    def delete(self, entity_id: int) -> bool:
        """
        Supprime un acteur et ses roles.

        Les distributions des films concernes sont reindexees dans le meme
        commit : les positions restent 0, 1, 2... sans trou.
        """
        model = self._session.get(ActorModel, entity_id)
        if model is None:
            return False

        movie_ids = {link.movie_id for link in model.cast_links}
        try:
            self._session.delete(model)
            self._session.flush()
            for movie_id in movie_ids:
                remaining = self._session.exec(
                    select(CastLinkModel)
                    .where(CastLinkModel.movie_id == movie_id)
                    .order_by(CastLinkModel.position)
                ).all()
                reindex_cast(remaining)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        return True
