"""
Tests pour les modeles SQLModel de persistance.

Verifie que les horodatages ecrits en base portent un fuseau horaire.
"""

from datetime import date

from sqlalchemy import event

from cinecatalog.core.entities.catalog import Movie
from cinecatalog.infrastructure.persistence.models import MovieModel
from cinecatalog.infrastructure.persistence.repositories import SQLModelMovieRepository


class TestMovieModel:
    """Tests pour les horodatages de MovieModel."""

    def test_default_timestamps_are_timezone_aware(self):
        model = MovieModel(title="Dune", release_date=date(2024, 2, 28))

        assert model.created_at.tzinfo is not None
        assert model.updated_at.tzinfo is not None

    def test_save_writes_timezone_aware_timestamps(self, session):
        written = []

        def collect(session, flush_context, instances):
            for obj in [*session.new, *session.dirty]:
                if isinstance(obj, MovieModel):
                    written.append((obj.created_at, obj.updated_at))

        event.listen(session, "before_flush", collect)
        repo = SQLModelMovieRepository(session)

        saved = repo.save(Movie(title="Dune", release_date=date(2024, 2, 28)))
        saved.title = "Dune: Part One"
        repo.save(saved)

        assert len(written) >= 2
        assert all(updated.tzinfo is not None for _, updated in written)
        assert written[0][0].tzinfo is not None
