"""
Tests pour MovieAssembler.

Ces tests verifient:
- Construction d'un agregat a partir d'une requete de creation
- Application d'une requete d'edition (affiche conservee ou remplacee)
- Reindexation systematique de la distribution
"""

from datetime import date

import pytest

from cinecatalog.core.entities.catalog import CastMember, CastSelection, Movie, MovieDraft
from cinecatalog.services.movie_assembler import MovieAssembler


@pytest.fixture
def assembler() -> MovieAssembler:
    return MovieAssembler()


def _draft(**overrides) -> MovieDraft:
    values = dict(
        title="Dune",
        release_date=date(2024, 2, 28),
        trailer="https://example.com/dune",
        cast=[CastSelection(actor_id=2, character="Paul"), CastSelection(actor_id=1, character="Chani")],
        genre_ids=[1, 1, 3],
        theater_ids=[2],
    )
    values.update(overrides)
    return MovieDraft(**values)


class TestBuild:
    """Tests pour build()."""

    def test_build_copies_fields_and_indexes_cast(self, assembler):
        movie = assembler.build(_draft(), poster_url="/media/movies/a.jpg")

        assert movie.id is None
        assert movie.title == "Dune"
        assert movie.poster == "/media/movies/a.jpg"
        assert [(m.actor_id, m.character, m.position) for m in movie.cast] == [
            (2, "Paul", 0),
            (1, "Chani", 1),
        ]

    def test_build_collapses_duplicate_ids(self, assembler):
        movie = assembler.build(_draft())
        assert movie.genre_ids == [1, 3]

    def test_build_without_poster(self, assembler):
        assert assembler.build(_draft()).poster is None


class TestOverlay:
    """Tests pour overlay()."""

    @pytest.fixture
    def existing(self) -> Movie:
        return Movie(
            id=10,
            title="Old",
            release_date=date(2020, 1, 1),
            poster="/media/movies/old.jpg",
            cast=[CastMember(actor_id=1, character="A", position=0)],
            genre_ids=[5],
            theater_ids=[1, 2],
        )

    def test_overlay_keeps_poster_without_new_url(self, assembler, existing):
        movie = assembler.overlay(_draft(), existing)

        assert movie.id == 10
        assert movie.poster == "/media/movies/old.jpg"
        assert movie.title == "Dune"

    def test_overlay_replaces_poster_with_new_url(self, assembler, existing):
        movie = assembler.overlay(_draft(), existing, poster_url="/media/movies/new.jpg")
        assert movie.poster == "/media/movies/new.jpg"

    def test_overlay_replaces_collections(self, assembler, existing):
        movie = assembler.overlay(_draft(theater_ids=[], cast=[]), existing)

        assert movie.theater_ids == []
        assert movie.cast == []
        assert movie.genre_ids == [1, 3]

    def test_overlay_reorder_cast(self, assembler, existing):
        draft = _draft(cast=[CastSelection(actor_id=2), CastSelection(actor_id=1, character="A")])

        movie = assembler.overlay(draft, existing)

        assert [(m.actor_id, m.position) for m in movie.cast] == [(2, 0), (1, 1)]
