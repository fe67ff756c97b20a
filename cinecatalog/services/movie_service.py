"""
Service des films : ecritures de l'agregat, lectures et invalidation du cache.

Ordre d'une ecriture :
1. Verification des champs et des references (acteurs, genres, cinemas)
2. Enregistrement de la nouvelle affiche (un echec annule l'ecriture)
3. Assemblage de l'agregat (reindexation de la distribution)
4. Commit unique
5. Invalidation de l'etiquette "movies" du cache, avant la reponse
6. Suppression de l'affiche remplacee ou du film supprime

Aucune etape n'est relancee en cas d'echec : le client resoumet.
"""

from datetime import date
from typing import Callable, Optional

from loguru import logger

from cinecatalog.core.entities.catalog import Movie, MovieDraft
from cinecatalog.core.entities.views import (
    LandingPage,
    MovieDetail,
    MovieEditContext,
    MovieFormOptions,
    MovieSummary,
)
from cinecatalog.core.exceptions import AssetStoreError, NotFoundError, ValidationError
from cinecatalog.core.ports.repositories import (
    IActorRepository,
    IGenreRepository,
    IMovieRepository,
    ITheaterRepository,
)
from cinecatalog.core.ports.storage import IAssetStore, IResponseCache
from cinecatalog.infrastructure.persistence.queries import MovieQueryProjector
from cinecatalog.services.movie_assembler import MovieAssembler

# Etiquette de cache de toutes les lectures de films
MOVIES_CACHE_TAG = "movies"

# Conteneur des affiches dans le stockage des fichiers
POSTER_BUCKET = "movies"

# Nombre de films par liste de la page d'accueil
LANDING_TOP = 6

TITLE_MAX_LENGTH = 300


class MovieService:
    """
    Cas d'utilisation de l'agregat film.

    Example:
        service = MovieService(
            movie_repo=movies, genre_repo=genres, actor_repo=actors,
            theater_repo=theaters, projector=MovieQueryProjector(session),
            asset_store=store, cache=cache,
        )
        summary = await service.create(draft)
        detail = await service.get_detail(summary.id)
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        genre_repo: IGenreRepository,
        actor_repo: IActorRepository,
        theater_repo: ITheaterRepository,
        projector: MovieQueryProjector,
        asset_store: IAssetStore,
        cache: IResponseCache,
        assembler: Optional[MovieAssembler] = None,
        landing_top: int = LANDING_TOP,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._movies = movie_repo
        self._genres = genre_repo
        self._actors = actor_repo
        self._theaters = theater_repo
        self._projector = projector
        self._assets = asset_store
        self._cache = cache
        self._assembler = assembler or MovieAssembler()
        self._landing_top = landing_top
        self._today = today

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate(self, draft: MovieDraft) -> None:
        """Leve ValidationError avec toutes les erreurs trouvees, par champ."""
        errors: dict[str, list[str]] = {}

        if not draft.title or not draft.title.strip():
            errors.setdefault("title", []).append("field is required")
        elif len(draft.title) > TITLE_MAX_LENGTH:
            errors.setdefault("title", []).append(
                f"must be at most {TITLE_MAX_LENGTH} characters"
            )
        if draft.release_date is None:
            errors.setdefault("release_date", []).append("field is required")

        checks = (
            ("actors", self._actors, [item.actor_id for item in draft.cast]),
            ("genre_ids", self._genres, draft.genre_ids),
            ("theater_ids", self._theaters, draft.theater_ids),
        )
        for field, repo, ids in checks:
            missing = repo.find_missing_ids(ids)
            if missing:
                errors.update(ValidationError.unknown_references(field, missing).errors)

        if errors:
            raise ValidationError(errors)

    # ------------------------------------------------------------------
    # Ecritures
    # ------------------------------------------------------------------

    async def _invalidate(self) -> None:
        await self._cache.evict(MOVIES_CACHE_TAG)

    async def create(self, draft: MovieDraft) -> MovieSummary:
        """
        Cree un film avec sa distribution, ses genres et ses cinemas.

        Returns:
            Le resume du film cree (avec son ID)

        Raises:
            ValidationError: Champ manquant ou reference inconnue
            AssetStoreError: L'affiche n'a pas pu etre enregistree
        """
        self._validate(draft)

        poster_url = None
        if draft.poster is not None:
            poster_url = await self._assets.store(POSTER_BUCKET, draft.poster)

        movie = self._assembler.build(draft, poster_url)
        try:
            saved = self._movies.save(movie)
        except Exception:
            # L'affiche enregistree n'est referencee par aucun film
            if poster_url is not None:
                logger.warning(f"Echec du commit, suppression de l'affiche {poster_url}")
                await self._assets.delete(poster_url, POSTER_BUCKET)
            raise

        await self._invalidate()
        logger.info("Film cree", movie_id=saved.id, title=saved.title, cast=len(saved.cast))
        return self._summary_of(saved)

    async def update(self, movie_id: int, draft: MovieDraft) -> None:
        """
        Remplace les champs et les selections d'un film existant.

        Sans nouvelle affiche, l'affiche actuelle est conservee. Sinon la
        nouvelle est enregistree avant le commit et l'ancienne n'est
        supprimee qu'apres : si le commit echoue, le film garde une affiche
        toujours presente dans le stockage.

        Raises:
            NotFoundError: Film inexistant
            ValidationError: Champ manquant ou reference inconnue
            AssetStoreError: La nouvelle affiche n'a pas pu etre enregistree
        """
        existing = self._movies.get_by_id(movie_id)
        if existing is None:
            raise NotFoundError("movie", movie_id)

        self._validate(draft)

        previous_poster = existing.poster
        poster_url = None
        if draft.poster is not None:
            poster_url = await self._assets.store(POSTER_BUCKET, draft.poster)

        movie = self._assembler.overlay(draft, existing, poster_url)
        try:
            self._movies.save(movie)
        except Exception:
            if poster_url is not None:
                logger.warning(f"Echec du commit, suppression de l'affiche {poster_url}")
                await self._assets.delete(poster_url, POSTER_BUCKET)
            raise

        await self._invalidate()
        logger.info("Film modifie", movie_id=movie_id, cast=len(movie.cast))

        if poster_url is not None and previous_poster:
            await self._discard_poster(previous_poster, movie_id)

    async def delete(self, movie_id: int) -> None:
        """
        Supprime un film, ses liens et son affiche.

        Raises:
            NotFoundError: Film inexistant
        """
        existing = self._movies.get_by_id(movie_id)
        if existing is None or not self._movies.delete(movie_id):
            raise NotFoundError("movie", movie_id)

        await self._invalidate()
        logger.info("Film supprime", movie_id=movie_id)

        if existing.poster:
            await self._discard_poster(existing.poster, movie_id)

    async def _discard_poster(self, reference: str, movie_id: int) -> None:
        """Supprime une affiche qui n'est plus referencee ; l'ecriture est deja commitee."""
        try:
            await self._assets.delete(reference, POSTER_BUCKET)
        except AssetStoreError as e:
            logger.error(f"Affiche non supprimee pour le film {movie_id}: {e}")

    # ------------------------------------------------------------------
    # Lectures
    # ------------------------------------------------------------------

    @staticmethod
    def _summary_of(movie: Movie) -> MovieSummary:
        return MovieSummary(
            id=movie.id,
            title=movie.title,
            release_date=movie.release_date,
            trailer=movie.trailer,
            poster=movie.poster,
        )

    async def get_landing(self) -> LandingPage:
        """Page d'accueil (en cache) : films a l'affiche et prochaines sorties."""
        today = self._today()
        key = f"landing:{today.isoformat()}:{self._landing_top}"
        return await self._cache.get_or_compute(
            key,
            MOVIES_CACHE_TAG,
            lambda: self._projector.landing(top=self._landing_top, today=today),
        )

    async def get_detail(self, movie_id: int) -> MovieDetail:
        """
        Detail d'un film (en cache).

        Raises:
            NotFoundError: Film inexistant
        """

        def compute() -> MovieDetail:
            detail = self._projector.detail(movie_id)
            if detail is None:
                raise NotFoundError("movie", movie_id)
            return detail

        return await self._cache.get_or_compute(f"detail:{movie_id}", MOVIES_CACHE_TAG, compute)

    def get_edit_context(self, movie_id: int) -> MovieEditContext:
        """
        Detail du film et choix disponibles pour le formulaire d'edition.

        Raises:
            NotFoundError: Film inexistant
        """
        context = self._projector.edit_context(movie_id)
        if context is None:
            raise NotFoundError("movie", movie_id)
        return context

    def get_form_options(self) -> MovieFormOptions:
        """Genres et cinemas proposes dans le formulaire de creation."""
        return self._projector.form_options()
