"""
Business entities representing core domain concepts.

Exports:
- Movie: Movie aggregate root with its cast, genres and theaters
- CastMember: Ordered movie-actor link
- Genre, Actor, Theater: Reference data linked to movies
- MovieDraft, CastSelection, AssetUpload: Write requests
- MovieSummary, MovieDetail, MovieEditContext, LandingPage, MovieFormOptions: Read models
"""

from cinecatalog.core.entities.catalog import (
    Actor,
    AssetUpload,
    CastMember,
    CastSelection,
    Genre,
    Movie,
    MovieDraft,
    Theater,
)
from cinecatalog.core.entities.views import (
    CastEntry,
    LandingPage,
    MovieDetail,
    MovieEditContext,
    MovieFormOptions,
    MovieSummary,
)

__all__ = [
    "Actor",
    "AssetUpload",
    "CastEntry",
    "CastMember",
    "CastSelection",
    "Genre",
    "LandingPage",
    "Movie",
    "MovieDetail",
    "MovieDraft",
    "MovieEditContext",
    "MovieFormOptions",
    "MovieSummary",
    "Theater",
]
