"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance de l'agregat
film (film + distribution + genres + cinemas) via SQLModel.

La sauvegarde synchronise les liens par difference d'ensembles plutot que
de les recreer : les liens conserves sont mis a jour en place, les liens
retires sont supprimes (delete-orphan), les nouveaux sont inseres. Un meme
couple (film, acteur) n'est donc jamais supprime puis reinsere dans le
meme flush.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from cinecatalog.core.entities.catalog import CastMember, Movie
from cinecatalog.core.ports.repositories import IMovieRepository
from cinecatalog.infrastructure.persistence.models import (
    CastLinkModel,
    GenreLinkModel,
    MovieModel,
    TheaterLinkModel,
)


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour les films.

    Implemente IMovieRepository avec conversion bidirectionnelle
    entre l'agregat Movie (domaine) et MovieModel + liens (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MovieModel) -> Movie:
        """
        Convertit un modele DB (et ses liens) en agregat domaine.

        Args :
            model : Le modele MovieModel depuis la DB

        Retourne :
            L'agregat Movie, distribution triee par position
        """
        cast = sorted(model.cast_links, key=lambda link: link.position)
        return Movie(
            id=model.id,
            title=model.title,
            release_date=model.release_date,
            trailer=model.trailer,
            poster=model.poster,
            cast=[
                CastMember(
                    actor_id=link.actor_id,
                    character=link.character,
                    position=link.position,
                )
                for link in cast
            ],
            genre_ids=sorted(link.genre_id for link in model.genre_links),
            theater_ids=sorted(link.theater_id for link in model.theater_links),
        )

    def _sync_cast(self, model: MovieModel, cast: list[CastMember]) -> None:
        """Aligne la distribution du modele sur celle de l'agregat, dans son ordre."""
        existing = {link.actor_id: link for link in model.cast_links}
        links = []
        for member in cast:
            link = existing.get(member.actor_id)
            if link is None:
                link = CastLinkModel(actor_id=member.actor_id)
            link.character = member.character
            link.position = member.position
            links.append(link)
        # Les liens absents de la nouvelle liste deviennent orphelins et sont supprimes
        model.cast_links = links

    def _sync_genres(self, model: MovieModel, genre_ids: list[int]) -> None:
        existing = {link.genre_id: link for link in model.genre_links}
        model.genre_links = [
            existing.get(genre_id) or GenreLinkModel(genre_id=genre_id)
            for genre_id in genre_ids
        ]

    def _sync_theaters(self, model: MovieModel, theater_ids: list[int]) -> None:
        existing = {link.theater_id: link for link in model.theater_links}
        model.theater_links = [
            existing.get(theater_id) or TheaterLinkModel(theater_id=theater_id)
            for theater_id in theater_ids
        ]

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Recupere un film et ses liens par son ID."""
        model = self._session.get(MovieModel, movie_id)
        if model:
            return self._to_entity(model)
        return None

    def save(self, movie: Movie) -> Movie:
        """
        Sauvegarde un film (insertion ou mise a jour) et ses liens.

        Tout est ecrit en un seul commit : en cas d'erreur la transaction
        est annulee et l'etat precedent reste intact.
        """
        existing = None
        if movie.id is not None:
            existing = self._session.get(MovieModel, movie.id)

        model = existing if existing is not None else MovieModel()
        model.title = movie.title
        model.release_date = movie.release_date
        model.trailer = movie.trailer
        model.poster = movie.poster
        model.updated_at = datetime.now(timezone.utc)

        self._sync_cast(model, movie.cast)
        self._sync_genres(model, movie.genre_ids)
        self._sync_theaters(model, movie.theater_ids)

        try:
            self._session.add(model)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        self._session.refresh(model)
        return self._to_entity(model)

    def delete(self, movie_id: int) -> bool:
        """Supprime un film ; ses liens suivent par cascade."""
        model = self._session.get(MovieModel, movie_id)
        if model is None:
            return False
        self._session.delete(model)
        self._session.commit()
        return True

    def count(self) -> int:
        """Retourne le nombre total de films."""
        return self._session.exec(select(func.count()).select_from(MovieModel)).one()
