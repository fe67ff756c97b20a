"""
Modeles SQLModel pour la base de donnees CineCatalog.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- movies: Films (racine de l'agregat)
- genres, actors, theaters: Donnees de reference
- movie_actors: Distribution ordonnee (position = index dans la liste)
- movie_genres, movie_theaters: Appartenance simple

Les liens n'ont pas d'identite propre : ils sont supprimes avec leur film
(cascade ORM "delete-orphan" et ON DELETE CASCADE en base), ainsi qu'avec
l'entite de reference qu'ils designent.
"""

from datetime import date, datetime, timezone
from typing import Optional

from sqlmodel import Field, Index, Relationship, SQLModel

_OWNED = {"cascade": "all, delete-orphan"}
# Cote donnee de reference : les liens suivent la suppression, sans notion d'orphelin
_REFERENCED = {"cascade": "all, delete"}


class CastLinkModel(SQLModel, table=True):
    """
    Lien film-acteur avec le personnage joue et la position d'affichage.

    Pas de contrainte d'unicite sur (movie_id, position) : les positions
    sont reecrites en place lors d'un reordonnancement.
    """

    __tablename__ = "movie_actors"
    __table_args__ = (
        Index("ix_movie_actors_movie_position", "movie_id", "position"),
    )

    movie_id: int = Field(foreign_key="movies.id", primary_key=True, ondelete="CASCADE")
    actor_id: int = Field(foreign_key="actors.id", primary_key=True, ondelete="CASCADE")
    character: str = Field(default="", max_length=100)
    position: int = 0

    movie: "MovieModel" = Relationship(back_populates="cast_links")
    actor: "ActorModel" = Relationship(back_populates="cast_links")


class GenreLinkModel(SQLModel, table=True):
    """Appartenance d'un film a un genre."""

    __tablename__ = "movie_genres"

    movie_id: int = Field(foreign_key="movies.id", primary_key=True, ondelete="CASCADE")
    genre_id: int = Field(foreign_key="genres.id", primary_key=True, ondelete="CASCADE")

    movie: "MovieModel" = Relationship(back_populates="genre_links")
    genre: "GenreModel" = Relationship(back_populates="movie_links")


class TheaterLinkModel(SQLModel, table=True):
    """Programmation d'un film dans un cinema."""

    __tablename__ = "movie_theaters"

    movie_id: int = Field(foreign_key="movies.id", primary_key=True, ondelete="CASCADE")
    theater_id: int = Field(foreign_key="theaters.id", primary_key=True, ondelete="CASCADE")

    movie: "MovieModel" = Relationship(back_populates="theater_links")
    theater: "TheaterModel" = Relationship(back_populates="movie_links")


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    La distribution est chargee triee par position.
    """

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=300, index=True)
    release_date: date = Field(index=True)
    trailer: str | None = None
    poster: str | None = None  # URL dans le stockage des fichiers
    created_at: datetime | None = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = Field(default_factory=lambda: datetime.now(timezone.utc))

    cast_links: list[CastLinkModel] = Relationship(
        back_populates="movie",
        sa_relationship_kwargs={**_OWNED, "order_by": "CastLinkModel.position"},
    )
    genre_links: list[GenreLinkModel] = Relationship(
        back_populates="movie", sa_relationship_kwargs=_OWNED
    )
    theater_links: list[TheaterLinkModel] = Relationship(
        back_populates="movie", sa_relationship_kwargs=_OWNED
    )


class GenreModel(SQLModel, table=True):
    """Modele representant un genre."""

    __tablename__ = "genres"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=50, index=True)

    movie_links: list[GenreLinkModel] = Relationship(
        back_populates="genre", sa_relationship_kwargs=_REFERENCED
    )


class ActorModel(SQLModel, table=True):
    """Modele representant un acteur."""

    __tablename__ = "actors"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=150, index=True)
    birth_date: date
    photo: Optional[str] = None  # URL dans le stockage des fichiers

    cast_links: list[CastLinkModel] = Relationship(
        back_populates="actor", sa_relationship_kwargs=_REFERENCED
    )


class TheaterModel(SQLModel, table=True):
    """Modele representant un cinema et sa position geographique."""

    __tablename__ = "theaters"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=75, index=True)
    latitude: float
    longitude: float

    movie_links: list[TheaterLinkModel] = Relationship(
        back_populates="theater", sa_relationship_kwargs=_REFERENCED
    )
