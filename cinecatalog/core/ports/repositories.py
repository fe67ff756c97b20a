"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel).
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, TypeVar

from cinecatalog.core.entities.catalog import Actor, Genre, Movie, Theater

EntityT = TypeVar("EntityT")


class IReferenceRepository(ABC, Generic[EntityT]):
    """
    Interface commune aux données de référence (genres, acteurs, cinémas).

    Définit la pagination, la vérification des références et le CRUD.
    """

    @abstractmethod
    def get_by_id(self, entity_id: int) -> Optional[EntityT]:
        """Récupère une entité par son ID."""
        ...

    @abstractmethod
    def list_page(self, page: int, records_per_page: int) -> list[EntityT]:
        """Liste une page d'entités (page commence à 1), triées par nom."""
        ...

    @abstractmethod
    def list_all(self) -> list[EntityT]:
        """Liste toutes les entités triées par nom."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Retourne le nombre total d'entités."""
        ...

    @abstractmethod
    def find_missing_ids(self, ids: Iterable[int]) -> set[int]:
        """Retourne les IDs demandés qui n'existent pas en base."""
        ...

    @abstractmethod
    def save(self, entity: EntityT) -> EntityT:
        """Sauvegarde une entité (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def delete(self, entity_id: int) -> bool:
        """Supprime une entité et ses liens vers les films. Retourne True si supprimée."""
        ...


class IGenreRepository(IReferenceRepository[Genre]):
    """Interface de stockage des genres."""


class ITheaterRepository(IReferenceRepository[Theater]):
    """Interface de stockage des cinémas."""


class IActorRepository(IReferenceRepository[Actor]):
    """Interface de stockage des acteurs."""

    @abstractmethod
    def search_by_name(self, name: str, limit: int = 5) -> list[Actor]:
        """Recherche des acteurs dont le nom contient le texte (insensible à la casse)."""
        ...


class IMovieRepository(ABC):
    """
    Interface de stockage des films.

    Le film est la racine de l'agrégat : la sauvegarde persiste aussi sa
    distribution, ses genres et ses cinémas dans une seule transaction.
    """

    @abstractmethod
    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Récupère un film et ses liens par son ID."""
        ...

    @abstractmethod
    def save(self, movie: Movie) -> Movie:
        """
        Sauvegarde un film et remplace ses liens par ceux de l'agrégat.

        Les positions de la distribution sont écrites telles quelles :
        l'agrégat reçu doit déjà être réindexé.
        """
        ...

    @abstractmethod
    def delete(self, movie_id: int) -> bool:
        """Supprime un film et tous ses liens. Retourne True si supprimé."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Retourne le nombre total de films."""
        ...
