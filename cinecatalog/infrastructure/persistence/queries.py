"""
Projections de lecture des films.

Construit les vues de l'API (accueil, detail, contexte d'edition, options
du formulaire) par des requetes sur colonnes, sans charger le graphe ORM
des films. Sans etat : chaque appel lit la base.
"""

from datetime import date
from typing import Iterable, Optional

from sqlalchemy import exists
from sqlmodel import Session, select

from cinecatalog.core.entities.catalog import Genre, Theater
from cinecatalog.core.entities.views import (
    CastEntry,
    LandingPage,
    MovieDetail,
    MovieEditContext,
    MovieFormOptions,
    MovieSummary,
)
from cinecatalog.infrastructure.persistence.models import (
    ActorModel,
    CastLinkModel,
    GenreLinkModel,
    GenreModel,
    MovieModel,
    TheaterLinkModel,
    TheaterModel,
)

_SUMMARY_COLUMNS = (
    MovieModel.id,
    MovieModel.title,
    MovieModel.release_date,
    MovieModel.trailer,
    MovieModel.poster,
)


def _summaries(rows: Iterable[tuple]) -> list[MovieSummary]:
    return [
        MovieSummary(id=id_, title=title, release_date=released, trailer=trailer, poster=poster)
        for id_, title, released, trailer, poster in rows
    ]


class MovieQueryProjector:
    """
    Projections de lecture sur une session SQLModel.

    Example:
        projector = MovieQueryProjector(session)
        landing = projector.landing(top=6, today=date.today())
        detail = projector.detail(42)  # None si inexistant
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def landing(self, top: int, today: date) -> LandingPage:
        """
        Listes de la page d'accueil.

        - upcoming : sortie strictement apres today, par date croissante
        - now_showing : au moins un cinema associe, par date croissante

        Chaque liste contient au plus `top` films.
        """
        upcoming = self._session.exec(
            select(*_SUMMARY_COLUMNS)
            .where(MovieModel.release_date > today)
            .order_by(MovieModel.release_date, MovieModel.id)
            .limit(top)
        ).all()

        now_showing = self._session.exec(
            select(*_SUMMARY_COLUMNS)
            .where(exists().where(TheaterLinkModel.movie_id == MovieModel.id))
            .order_by(MovieModel.release_date, MovieModel.id)
            .limit(top)
        ).all()

        return LandingPage(now_showing=_summaries(now_showing), upcoming=_summaries(upcoming))

    def summary(self, movie_id: int) -> Optional[MovieSummary]:
        """Resume d'un film, ou None si inexistant."""
        row = self._session.exec(
            select(*_SUMMARY_COLUMNS).where(MovieModel.id == movie_id)
        ).first()
        if row is None:
            return None
        return _summaries([row])[0]

    def detail(self, movie_id: int) -> Optional[MovieDetail]:
        """Film avec genres, cinemas et distribution ordonnee, ou None si inexistant."""
        summary = self.summary(movie_id)
        if summary is None:
            return None

        genres = self._session.exec(
            select(GenreModel.id, GenreModel.name)
            .join(GenreLinkModel, GenreLinkModel.genre_id == GenreModel.id)
            .where(GenreLinkModel.movie_id == movie_id)
            .order_by(GenreModel.name)
        ).all()

        theaters = self._session.exec(
            select(TheaterModel.id, TheaterModel.name, TheaterModel.latitude, TheaterModel.longitude)
            .join(TheaterLinkModel, TheaterLinkModel.theater_id == TheaterModel.id)
            .where(TheaterLinkModel.movie_id == movie_id)
            .order_by(TheaterModel.name)
        ).all()

        cast = self._session.exec(
            select(
                CastLinkModel.actor_id,
                ActorModel.name,
                CastLinkModel.character,
                CastLinkModel.position,
                ActorModel.photo,
            )
            .join(ActorModel, ActorModel.id == CastLinkModel.actor_id)
            .where(CastLinkModel.movie_id == movie_id)
            .order_by(CastLinkModel.position)
        ).all()

        return MovieDetail(
            id=summary.id,
            title=summary.title,
            release_date=summary.release_date,
            trailer=summary.trailer,
            poster=summary.poster,
            genres=[Genre(id=id_, name=name) for id_, name in genres],
            theaters=[
                Theater(id=id_, name=name, latitude=lat, longitude=lng)
                for id_, name, lat, lng in theaters
            ],
            cast=[
                CastEntry(actor_id=actor_id, name=name, character=character, position=position, photo=photo)
                for actor_id, name, character, position, photo in cast
            ],
        )

    def edit_context(self, movie_id: int) -> Optional[MovieEditContext]:
        """
        Detail du film et choix encore disponibles, ou None si inexistant.

        Le detail est lu une seule fois ; les complements sont calcules en
        base (NOT IN) sur les tables completes des genres et cinemas.
        """
        movie = self.detail(movie_id)
        if movie is None:
            return None

        selected_genre_ids = [g.id for g in movie.genres]
        unselected_genres = self._session.exec(
            select(GenreModel.id, GenreModel.name)
            .where(GenreModel.id.notin_(selected_genre_ids))
            .order_by(GenreModel.name)
        ).all()

        selected_theater_ids = [t.id for t in movie.theaters]
        unselected_theaters = self._session.exec(
            select(TheaterModel.id, TheaterModel.name, TheaterModel.latitude, TheaterModel.longitude)
            .where(TheaterModel.id.notin_(selected_theater_ids))
            .order_by(TheaterModel.name)
        ).all()

        return MovieEditContext(
            movie=movie,
            selected_genres=list(movie.genres),
            unselected_genres=[Genre(id=id_, name=name) for id_, name in unselected_genres],
            selected_theaters=list(movie.theaters),
            unselected_theaters=[
                Theater(id=id_, name=name, latitude=lat, longitude=lng)
                for id_, name, lat, lng in unselected_theaters
            ],
            cast=list(movie.cast),
        )

    def form_options(self) -> MovieFormOptions:
        """Tous les genres et cinemas, tries par nom."""
        genres = self._session.exec(
            select(GenreModel.id, GenreModel.name).order_by(GenreModel.name)
        ).all()
        theaters = self._session.exec(
            select(TheaterModel.id, TheaterModel.name, TheaterModel.latitude, TheaterModel.longitude)
            .order_by(TheaterModel.name)
        ).all()
        return MovieFormOptions(
            genres=[Genre(id=id_, name=name) for id_, name in genres],
            theaters=[
                Theater(id=id_, name=name, latitude=lat, longitude=lng)
                for id_, name, lat, lng in theaters
            ],
        )
