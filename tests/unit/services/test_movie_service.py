"""
Tests pour MovieService.

Ces tests verifient:
- Validation des champs et des references avant toute ecriture
- Gestion de l'affiche (creation, conservation, remplacement, suppression)
- Invalidation du cache apres chaque ecriture reussie
- Compensation quand le commit echoue apres l'enregistrement de l'affiche
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from sqlmodel import Session

from cinecatalog.adapters.storage.local_asset_store import LocalAssetStore
from cinecatalog.core.entities.catalog import AssetUpload, CastSelection, MovieDraft
from cinecatalog.core.exceptions import AssetStoreError, NotFoundError, ValidationError
from cinecatalog.infrastructure.persistence.queries import MovieQueryProjector
from cinecatalog.infrastructure.persistence.repositories import (
    SQLModelActorRepository,
    SQLModelGenreRepository,
    SQLModelMovieRepository,
    SQLModelTheaterRepository,
)
from cinecatalog.services.movie_service import MOVIES_CACHE_TAG, POSTER_BUCKET, MovieService

TODAY = date(2024, 6, 1)


@pytest.fixture
def movie_repo(session: Session) -> SQLModelMovieRepository:
    return SQLModelMovieRepository(session)


@pytest.fixture
def service(session, movie_repo, mock_asset_store, passthrough_cache) -> MovieService:
    return MovieService(
        movie_repo=movie_repo,
        genre_repo=SQLModelGenreRepository(session),
        actor_repo=SQLModelActorRepository(session),
        theater_repo=SQLModelTheaterRepository(session),
        projector=MovieQueryProjector(session),
        asset_store=mock_asset_store,
        cache=passthrough_cache,
        today=lambda: TODAY,
    )


def _draft(reference_data: dict, **overrides) -> MovieDraft:
    alice, bruno, _ = reference_data["actors"]
    values = dict(
        title="Dune",
        release_date=date(2024, 9, 1),
        cast=[CastSelection(actor_id=bruno, character="Paul"), CastSelection(actor_id=alice, character="Chani")],
        genre_ids=[reference_data["genres"][0]],
        theater_ids=[reference_data["theaters"][0]],
    )
    values.update(overrides)
    return MovieDraft(**values)


class TestCreate:
    """Tests pour create()."""

    @pytest.mark.asyncio
    async def test_create_persists_and_evicts(self, service, movie_repo, reference_data, passthrough_cache):
        summary = await service.create(_draft(reference_data))

        saved = movie_repo.get_by_id(summary.id)
        assert saved.title == "Dune"
        assert [m.character for m in saved.cast] == ["Paul", "Chani"]
        assert [m.position for m in saved.cast] == [0, 1]
        passthrough_cache.evict.assert_awaited_once_with(MOVIES_CACHE_TAG)

    @pytest.mark.asyncio
    async def test_create_with_poster(self, service, reference_data, mock_asset_store):
        poster = AssetUpload("dune.jpg", b"img")

        summary = await service.create(_draft(reference_data, poster=poster))

        mock_asset_store.store.assert_awaited_once_with(POSTER_BUCKET, poster)
        assert summary.poster == "/media/movies/new.jpg"

    @pytest.mark.asyncio
    async def test_missing_fields_are_reported_together(self, service, reference_data, passthrough_cache):
        with pytest.raises(ValidationError) as exc_info:
            await service.create(_draft(reference_data, title="  ", release_date=None))

        assert set(exc_info.value.errors) == {"title", "release_date"}
        passthrough_cache.evict.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_references_are_rejected(self, service, reference_data, mock_asset_store):
        draft = _draft(
            reference_data,
            genre_ids=[404],
            cast=[CastSelection(actor_id=500)],
            poster=AssetUpload("a.jpg", b"x"),
        )

        with pytest.raises(ValidationError) as exc_info:
            await service.create(draft)

        assert exc_info.value.errors["genre_ids"] == ["unknown ids: 404"]
        assert exc_info.value.errors["actors"] == ["unknown ids: 500"]
        mock_asset_store.store.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_poster_failure_aborts_creation(self, service, reference_data, mock_asset_store):
        mock_asset_store.store.side_effect = AssetStoreError("movies", "disk full")

        with pytest.raises(AssetStoreError):
            await service.create(_draft(reference_data, poster=AssetUpload("a.jpg", b"x")))

        assert (await service.get_landing()).upcoming == []

    @pytest.mark.asyncio
    async def test_commit_failure_deletes_stored_poster(self, session, reference_data, mock_asset_store, passthrough_cache):
        failing_repo = MagicMock(spec=SQLModelMovieRepository)
        failing_repo.save.side_effect = RuntimeError("commit failed")
        service = MovieService(
            movie_repo=failing_repo,
            genre_repo=SQLModelGenreRepository(session),
            actor_repo=SQLModelActorRepository(session),
            theater_repo=SQLModelTheaterRepository(session),
            projector=MovieQueryProjector(session),
            asset_store=mock_asset_store,
            cache=passthrough_cache,
        )

        with pytest.raises(RuntimeError):
            await service.create(_draft(reference_data, poster=AssetUpload("a.jpg", b"x")))

        mock_asset_store.delete.assert_awaited_once_with("/media/movies/new.jpg", POSTER_BUCKET)
        passthrough_cache.evict.assert_not_awaited()


class TestUpdate:
    """Tests pour update()."""

    @pytest.mark.asyncio
    async def test_update_unknown_movie(self, service, reference_data):
        with pytest.raises(NotFoundError):
            await service.update(999, _draft(reference_data))

    @pytest.mark.asyncio
    async def test_update_keeps_poster_without_upload(self, service, movie_repo, reference_data, mock_asset_store):
        created = await service.create(_draft(reference_data, poster=AssetUpload("a.jpg", b"x")))

        await service.update(created.id, _draft(reference_data, title="Dune: Part One"))

        saved = movie_repo.get_by_id(created.id)
        assert saved.title == "Dune: Part One"
        assert saved.poster == "/media/movies/new.jpg"
        mock_asset_store.replace.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_replaces_existing_poster(self, service, movie_repo, reference_data, mock_asset_store):
        mock_asset_store.store.side_effect = ["/media/movies/old.jpg", "/media/movies/new.jpg"]
        created = await service.create(_draft(reference_data, poster=AssetUpload("a.jpg", b"x")))
        new_poster = AssetUpload("b.jpg", b"y")

        await service.update(created.id, _draft(reference_data, poster=new_poster))

        mock_asset_store.store.assert_awaited_with(POSTER_BUCKET, new_poster)
        mock_asset_store.delete.assert_awaited_once_with("/media/movies/old.jpg", POSTER_BUCKET)
        assert movie_repo.get_by_id(created.id).poster == "/media/movies/new.jpg"

    @pytest.mark.asyncio
    async def test_commit_failure_keeps_previous_poster(self, session, movie_repo, reference_data, passthrough_cache, tmp_path):
        assets = LocalAssetStore(root_dir=tmp_path / "media")
        service = MovieService(
            movie_repo=movie_repo,
            genre_repo=SQLModelGenreRepository(session),
            actor_repo=SQLModelActorRepository(session),
            theater_repo=SQLModelTheaterRepository(session),
            projector=MovieQueryProjector(session),
            asset_store=assets,
            cache=passthrough_cache,
        )
        created = await service.create(_draft(reference_data, poster=AssetUpload("a.jpg", b"old")))

        with patch.object(movie_repo, "save", side_effect=RuntimeError("commit failed")):
            with pytest.raises(RuntimeError):
                await service.update(created.id, _draft(reference_data, poster=AssetUpload("b.jpg", b"new")))

        assert movie_repo.get_by_id(created.id).poster == created.poster
        stored = list((tmp_path / "media" / POSTER_BUCKET).iterdir())
        assert [f.read_bytes() for f in stored] == [b"old"]

    @pytest.mark.asyncio
    async def test_update_reorders_and_replaces_selections(self, service, movie_repo, reference_data, passthrough_cache):
        alice, bruno, chloe = reference_data["actors"]
        created = await service.create(_draft(reference_data))

        draft = _draft(
            reference_data,
            cast=[CastSelection(actor_id=alice, character="Chani"), CastSelection(actor_id=chloe)],
            theater_ids=[],
        )
        await service.update(created.id, draft)

        saved = movie_repo.get_by_id(created.id)
        assert [(m.actor_id, m.position) for m in saved.cast] == [(alice, 0), (chloe, 1)]
        assert saved.theater_ids == []
        assert passthrough_cache.evict.await_count == 2


class TestDelete:
    """Tests pour delete()."""

    @pytest.mark.asyncio
    async def test_delete_removes_movie_and_poster(self, service, movie_repo, reference_data, mock_asset_store):
        created = await service.create(_draft(reference_data, poster=AssetUpload("a.jpg", b"x")))

        await service.delete(created.id)

        assert movie_repo.get_by_id(created.id) is None
        mock_asset_store.delete.assert_awaited_once_with("/media/movies/new.jpg", POSTER_BUCKET)

    @pytest.mark.asyncio
    async def test_poster_failure_does_not_undo_delete(self, service, movie_repo, reference_data, mock_asset_store):
        created = await service.create(_draft(reference_data, poster=AssetUpload("a.jpg", b"x")))
        mock_asset_store.delete.side_effect = AssetStoreError("movies", "permission denied")

        await service.delete(created.id)

        assert movie_repo.get_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_movie(self, service):
        with pytest.raises(NotFoundError):
            await service.delete(999)


class TestReads:
    """Tests des lectures."""

    @pytest.mark.asyncio
    async def test_landing_uses_movies_tag(self, service, reference_data, passthrough_cache):
        await service.create(_draft(reference_data))

        landing = await service.get_landing()

        assert [m.title for m in landing.upcoming] == ["Dune"]
        assert [m.title for m in landing.now_showing] == ["Dune"]
        key, tag, _ = passthrough_cache.get_or_compute.await_args.args
        assert key == "landing:2024-06-01:6"
        assert tag == MOVIES_CACHE_TAG

    @pytest.mark.asyncio
    async def test_detail_unknown_movie(self, service):
        with pytest.raises(NotFoundError):
            await service.get_detail(999)

    @pytest.mark.asyncio
    async def test_detail_and_edit_context(self, service, reference_data):
        created = await service.create(_draft(reference_data))

        detail = await service.get_detail(created.id)
        context = service.get_edit_context(created.id)

        assert [c.character for c in detail.cast] == ["Paul", "Chani"]
        assert len(context.unselected_genres) == len(reference_data["genres"]) - 1

    def test_edit_context_unknown_movie(self, service):
        with pytest.raises(NotFoundError):
            service.get_edit_context(999)
