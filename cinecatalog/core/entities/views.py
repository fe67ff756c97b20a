"""
Read models.

Flat views projected from the database for the API responses.
They are plain dataclasses so they can be cached and serialized as-is.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from cinecatalog.core.entities.catalog import Genre, Theater


@dataclass
class MovieSummary:
    """Movie as shown in lists (landing page, creation result)."""

    id: int
    title: str
    release_date: date
    trailer: Optional[str] = None
    poster: Optional[str] = None


@dataclass
class CastEntry:
    """Cast member expanded with the actor display data."""

    actor_id: int
    name: str
    character: str
    position: int
    photo: Optional[str] = None


@dataclass
class MovieDetail:
    """Movie with its genres, theaters and ordered cast."""

    id: int
    title: str
    release_date: date
    trailer: Optional[str] = None
    poster: Optional[str] = None
    genres: list[Genre] = field(default_factory=list)
    theaters: list[Theater] = field(default_factory=list)
    cast: list[CastEntry] = field(default_factory=list)


@dataclass
class MovieEditContext:
    """
    Movie detail with the choices still available in the edit form.

    Selected and unselected sets are disjoint, and their union is the
    full genre (resp. theater) table.
    """

    movie: MovieDetail
    selected_genres: list[Genre]
    unselected_genres: list[Genre]
    selected_theaters: list[Theater]
    unselected_theaters: list[Theater]
    cast: list[CastEntry]


@dataclass
class LandingPage:
    """Landing page lists, both sorted by ascending release date."""

    now_showing: list[MovieSummary]
    upcoming: list[MovieSummary]


@dataclass
class MovieFormOptions:
    """Every genre and theater selectable in a movie form."""

    genres: list[Genre]
    theaters: list[Theater]
