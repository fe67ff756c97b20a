"""
Services des donnees de reference : genres, cinemas et acteurs.

CRUD pagine commun a ces trois catalogues, avec les regles de validation
propres a chacun. Toute ecriture invalide l'etiquette de cache du catalogue
ainsi que celle des films, dont les vues embarquent ces donnees.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import ClassVar, Generic, Optional, TypeVar

from loguru import logger

from cinecatalog.core.entities.catalog import Actor, AssetUpload, Genre, Theater
from cinecatalog.core.exceptions import AssetStoreError, NotFoundError, ValidationError
from cinecatalog.core.ports.repositories import (
    IActorRepository,
    IGenreRepository,
    IReferenceRepository,
    ITheaterRepository,
)
from cinecatalog.core.ports.storage import IAssetStore, IResponseCache
from cinecatalog.services.movie_service import MOVIES_CACHE_TAG

EntityT = TypeVar("EntityT")

# Pagination par defaut des listes
DEFAULT_RECORDS_PER_PAGE = 10
MAX_RECORDS_PER_PAGE = 50

# Conteneur des photos d'acteurs dans le stockage des fichiers
PHOTO_BUCKET = "actors"


def _check_name(errors: dict[str, list[str]], name: str, max_length: int) -> None:
    if not name or not name.strip():
        errors.setdefault("name", []).append("field is required")
    elif len(name) > max_length:
        errors.setdefault("name", []).append(f"must be at most {max_length} characters")


class CatalogEntityService(ABC, Generic[EntityT]):
    """
    Base des services de catalogue.

    Les sous-classes definissent `entity_name`, `cache_tag` et `_validate`.
    """

    entity_name: ClassVar[str]
    cache_tag: ClassVar[str]

    def __init__(self, repo: IReferenceRepository[EntityT], cache: IResponseCache) -> None:
        self._repo = repo
        self._cache = cache

    @abstractmethod
    def _validate(self, entity: EntityT) -> None:
        """Leve ValidationError si l'entite est invalide."""
        ...

    async def _invalidate(self) -> None:
        await self._cache.evict(self.cache_tag)
        await self._cache.evict(MOVIES_CACHE_TAG)

    async def list_page(
        self, page: int = 1, records_per_page: int = DEFAULT_RECORDS_PER_PAGE
    ) -> tuple[list[EntityT], int]:
        """
        Page d'entites triees par nom (en cache).

        Returns:
            (entites de la page, nombre total d'entites)
        """
        page = max(page, 1)
        records_per_page = min(max(records_per_page, 1), MAX_RECORDS_PER_PAGE)
        return await self._cache.get_or_compute(
            f"page:{page}:{records_per_page}",
            self.cache_tag,
            lambda: (self._repo.list_page(page, records_per_page), self._repo.count()),
        )

    async def list_all(self) -> list[EntityT]:
        """Toutes les entites triees par nom (en cache)."""
        return await self._cache.get_or_compute("all", self.cache_tag, self._repo.list_all)

    def get(self, entity_id: int) -> EntityT:
        """
        Recupere une entite.

        Raises:
            NotFoundError: Entite inexistante
        """
        entity = self._repo.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    async def create(self, entity: EntityT) -> EntityT:
        """Cree une entite apres validation."""
        self._validate(entity)
        saved = self._repo.save(replace(entity, id=None))
        await self._invalidate()
        logger.info(f"{self.entity_name} cree", entity_id=saved.id)
        return saved

    async def update(self, entity_id: int, entity: EntityT) -> EntityT:
        """
        Remplace les champs d'une entite existante.

        Raises:
            NotFoundError: Entite inexistante
            ValidationError: Champs invalides
        """
        self.get(entity_id)
        self._validate(entity)
        saved = self._repo.save(replace(entity, id=entity_id))
        await self._invalidate()
        logger.info(f"{self.entity_name} modifie", entity_id=entity_id)
        return saved

    async def delete(self, entity_id: int) -> EntityT:
        """
        Supprime une entite et ses liens vers les films.

        Returns:
            L'entite supprimee

        Raises:
            NotFoundError: Entite inexistante
        """
        entity = self.get(entity_id)
        self._repo.delete(entity_id)
        await self._invalidate()
        logger.info(f"{self.entity_name} supprime", entity_id=entity_id)
        return entity


class GenreService(CatalogEntityService[Genre]):
    """Catalogue des genres : nom obligatoire, 50 caracteres, initiale majuscule."""

    entity_name = "genre"
    cache_tag = "genres"

    def __init__(self, repo: IGenreRepository, cache: IResponseCache) -> None:
        super().__init__(repo, cache)

    def _validate(self, entity: Genre) -> None:
        errors: dict[str, list[str]] = {}
        _check_name(errors, entity.name, 50)
        if not errors and not entity.name[0].isupper():
            errors.setdefault("name", []).append("first letter must be uppercase")
        if errors:
            raise ValidationError(errors)


class TheaterService(CatalogEntityService[Theater]):
    """Catalogue des cinemas : nom obligatoire et coordonnees valides."""

    entity_name = "theater"
    cache_tag = "theaters"

    def __init__(self, repo: ITheaterRepository, cache: IResponseCache) -> None:
        super().__init__(repo, cache)

    def _validate(self, entity: Theater) -> None:
        errors: dict[str, list[str]] = {}
        _check_name(errors, entity.name, 75)
        if not -90 <= entity.latitude <= 90:
            errors.setdefault("latitude", []).append("must be between -90 and 90")
        if not -180 <= entity.longitude <= 180:
            errors.setdefault("longitude", []).append("must be between -180 and 180")
        if errors:
            raise ValidationError(errors)


class ActorService(CatalogEntityService[Actor]):
    """
    Catalogue des acteurs, avec photo et recherche par nom.

    La photo suit les memes regles que l'affiche d'un film : absente a
    l'edition, la photo actuelle est conservee.
    """

    entity_name = "actor"
    cache_tag = "actors"

    def __init__(
        self, repo: IActorRepository, asset_store: IAssetStore, cache: IResponseCache
    ) -> None:
        super().__init__(repo, cache)
        self._actors = repo
        self._assets = asset_store

    def _validate(self, entity: Actor) -> None:
        errors: dict[str, list[str]] = {}
        _check_name(errors, entity.name, 150)
        if entity.birth_date is None:
            errors.setdefault("birth_date", []).append("field is required")
        if errors:
            raise ValidationError(errors)

    async def create(self, entity: Actor, photo: Optional[AssetUpload] = None) -> Actor:
        """
        Cree un acteur et enregistre sa photo si fournie.

        Si le commit echoue, la photo enregistree est supprimee.
        """
        self._validate(entity)
        photo_url = None
        if photo is not None:
            photo_url = await self._assets.store(PHOTO_BUCKET, photo)

        try:
            saved = self._repo.save(replace(entity, id=None, photo=photo_url))
        except Exception:
            if photo_url is not None:
                logger.warning(f"Echec du commit, suppression de la photo {photo_url}")
                await self._assets.delete(photo_url, PHOTO_BUCKET)
            raise

        await self._invalidate()
        logger.info("actor cree", entity_id=saved.id)
        return saved

    async def update(
        self, entity_id: int, entity: Actor, photo: Optional[AssetUpload] = None
    ) -> Actor:
        """
        Modifie un acteur ; la photo n'est remplacee que si une nouvelle est fournie.

        L'ancienne photo n'est supprimee qu'apres le commit.
        """
        current = self.get(entity_id)
        self._validate(entity)
        photo_url = current.photo
        if photo is not None:
            photo_url = await self._assets.store(PHOTO_BUCKET, photo)

        try:
            saved = self._repo.save(replace(entity, id=entity_id, photo=photo_url))
        except Exception:
            if photo is not None:
                logger.warning(f"Echec du commit, suppression de la photo {photo_url}")
                await self._assets.delete(photo_url, PHOTO_BUCKET)
            raise

        await self._invalidate()
        logger.info("actor modifie", entity_id=entity_id)

        if photo is not None and current.photo:
            await self._discard_photo(current.photo, entity_id)
        return saved

    async def delete(self, entity_id: int) -> Actor:
        """Supprime un acteur, ses roles et sa photo."""
        actor = await super().delete(entity_id)
        if actor.photo:
            await self._discard_photo(actor.photo, entity_id)
        return actor

    async def _discard_photo(self, reference: str, actor_id: int) -> None:
        try:
            await self._assets.delete(reference, PHOTO_BUCKET)
        except AssetStoreError as e:
            logger.error(f"Photo non supprimee pour l'acteur {actor_id}: {e}")

    def search(self, name: str, limit: int = 5) -> list[Actor]:
        """Acteurs dont le nom contient le texte, pour l'autocompletion."""
        if not name or not name.strip():
            return []
        return self._actors.search_by_name(name, limit=limit)
