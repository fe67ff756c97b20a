"""
Catalog entities.

Entities representing the movie aggregate and the reference data
(genres, actors, theaters) it links to.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass
class Genre:
    """
    Movie genre.

    Attributes:
        id: Internal database ID
        name: Display name (first letter uppercase)
    """

    id: Optional[int] = None
    name: str = ""


@dataclass
class Actor:
    """
    Actor that can be cast in movies.

    Attributes:
        id: Internal database ID
        name: Full name
        birth_date: Date of birth
        photo: URL of the photo in the asset store
    """

    id: Optional[int] = None
    name: str = ""
    birth_date: Optional[date] = None
    photo: Optional[str] = None


@dataclass
class Theater:
    """
    Movie theater where movies are showing.

    Attributes:
        id: Internal database ID
        name: Theater name
        latitude: Location latitude (-90..90)
        longitude: Location longitude (-180..180)
    """

    id: Optional[int] = None
    name: str = ""
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass
class CastMember:
    """
    Link between a movie and an actor.

    The position is owned by the movie aggregate: it always equals the
    index of the member in the movie cast list.

    Attributes:
        actor_id: Referenced actor ID
        character: Character played in the movie
        position: Zero-based display order
    """

    actor_id: int
    character: str = ""
    position: int = 0


@dataclass
class Movie:
    """
    Movie aggregate root.

    Owns its ordered cast and its genre and theater selections.
    Links have no identity outside their movie.

    Attributes:
        id: Internal database ID
        title: Movie title
        release_date: Release date
        trailer: Trailer URL
        poster: URL of the poster in the asset store
        cast: Ordered cast
        genre_ids: Selected genre IDs
        theater_ids: Selected theater IDs
    """

    id: Optional[int] = None
    title: str = ""
    release_date: Optional[date] = None
    trailer: Optional[str] = None
    poster: Optional[str] = None
    cast: list[CastMember] = field(default_factory=list)
    genre_ids: list[int] = field(default_factory=list)
    theater_ids: list[int] = field(default_factory=list)


@dataclass
class CastSelection:
    """Actor picked in a movie form, in display order."""

    actor_id: int
    character: str = ""


@dataclass
class AssetUpload:
    """
    Binary file uploaded with a form.

    Attributes:
        filename: Client-side file name (used for the extension)
        content: Raw bytes
        content_type: MIME type announced by the client
    """

    filename: str
    content: bytes
    content_type: Optional[str] = None


@dataclass
class MovieDraft:
    """
    Movie creation or edit request.

    Collections are complete selections: an edit replaces the existing
    cast, genres and theaters with them. A missing poster means "no poster"
    on creation and "keep the current poster" on edit.
    """

    title: str
    release_date: date
    trailer: Optional[str] = None
    poster: Optional[AssetUpload] = None
    cast: list[CastSelection] = field(default_factory=list)
    genre_ids: list[int] = field(default_factory=list)
    theater_ids: list[int] = field(default_factory=list)
