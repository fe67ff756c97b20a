"""
Base SQLModel commune aux repositories de donnees de reference.

Genres, acteurs et cinemas partagent la pagination, la verification des
references et le CRUD ; chaque sous-classe fournit le modele et la
conversion entite <-> modele.
"""

from abc import abstractmethod
from typing import ClassVar, Generic, Iterable, Optional, TypeVar

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from cinecatalog.core.ports.repositories import IReferenceRepository

EntityT = TypeVar("EntityT")
ModelT = TypeVar("ModelT", bound=SQLModel)


class SQLModelReferenceRepository(IReferenceRepository[EntityT], Generic[EntityT, ModelT]):
    """
    Repository SQLModel generique pour une table de reference.

    Les sous-classes definissent `model` et les conversions.
    """

    model: ClassVar[type[SQLModel]]

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    @abstractmethod
    def _to_entity(self, model: ModelT) -> EntityT:
        """Convertit un modele DB en entite domaine."""
        ...

    @abstractmethod
    def _apply(self, entity: EntityT, model: ModelT) -> None:
        """Copie les champs de l'entite sur le modele."""
        ...

    def get_by_id(self, entity_id: int) -> Optional[EntityT]:
        """Recupere une entite par son ID."""
        model = self._session.get(self.model, entity_id)
        if model:
            return self._to_entity(model)
        return None

    def list_page(self, page: int, records_per_page: int) -> list[EntityT]:
        """Liste une page d'entites triees par nom (page commence a 1)."""
        statement = (
            select(self.model)
            .order_by(self.model.name, self.model.id)
            .offset((page - 1) * records_per_page)
            .limit(records_per_page)
        )
        return [self._to_entity(m) for m in self._session.exec(statement).all()]

    def list_all(self) -> list[EntityT]:
        """Liste toutes les entites triees par nom."""
        statement = select(self.model).order_by(self.model.name, self.model.id)
        return [self._to_entity(m) for m in self._session.exec(statement).all()]

    def count(self) -> int:
        """Retourne le nombre total d'entites."""
        return self._session.exec(select(func.count()).select_from(self.model)).one()

    def find_missing_ids(self, ids: Iterable[int]) -> set[int]:
        """Retourne les IDs demandes absents de la table."""
        wanted = set(ids)
        if not wanted:
            return set()
        statement = select(self.model.id).where(self.model.id.in_(wanted))
        found = set(self._session.exec(statement).all())
        return wanted - found

    def save(self, entity: EntityT) -> EntityT:
        """Sauvegarde une entite (insertion ou mise a jour)."""
        existing = None
        if entity.id is not None:
            existing = self._session.get(self.model, entity.id)

        model = existing if existing is not None else self.model()
        self._apply(entity, model)
        try:
            self._session.add(model)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        self._session.refresh(model)
        return self._to_entity(model)

    def delete(self, entity_id: int) -> bool:
        """Supprime une entite ; ses liens vers les films suivent par cascade."""
        model = self._session.get(self.model, entity_id)
        if model is None:
            return False
        self._session.delete(model)
        self._session.commit()
        return True
