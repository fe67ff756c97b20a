"""
Tests unitaires pour LocalAssetStore.

Ces tests verifient:
- Enregistrement sous un nom aleatoire avec extension conservee
- Remplacement (nouvelle URL, ancien fichier supprime)
- Suppression tolerante (reference vide, fichier deja absent)
"""

from pathlib import Path

import pytest

from cinecatalog.adapters.storage.local_asset_store import LocalAssetStore
from cinecatalog.core.entities.catalog import AssetUpload
from cinecatalog.core.exceptions import AssetStoreError


@pytest.fixture
def store(tmp_path: Path) -> LocalAssetStore:
    return LocalAssetStore(root_dir=tmp_path / "media", base_url="/media/")


def _file_of(store: LocalAssetStore, url: str) -> Path:
    return store.root_dir / Path(url).relative_to("/media")


class TestLocalAssetStore:
    """Tests pour la classe LocalAssetStore."""

    @pytest.mark.asyncio
    async def test_store_writes_file_and_returns_url(self, store):
        url = await store.store("movies", AssetUpload("Poster.JPG", b"image"))

        assert url.startswith("/media/movies/")
        assert url.endswith(".jpg")
        assert _file_of(store, url).read_bytes() == b"image"

    @pytest.mark.asyncio
    async def test_two_uploads_get_distinct_urls(self, store):
        first = await store.store("movies", AssetUpload("a.png", b"1"))
        second = await store.store("movies", AssetUpload("a.png", b"2"))
        assert first != second

    @pytest.mark.asyncio
    async def test_unusual_extension_becomes_bin(self, store):
        url = await store.store("actors", AssetUpload("photo", b"x"))
        assert url.endswith(".bin")

    @pytest.mark.asyncio
    async def test_invalid_bucket_raises(self, store):
        with pytest.raises(AssetStoreError):
            await store.store("../etc", AssetUpload("a.png", b"x"))

    @pytest.mark.asyncio
    async def test_replace_removes_old_file(self, store):
        old = await store.store("movies", AssetUpload("a.png", b"old"))

        new = await store.replace(old, "movies", AssetUpload("b.png", b"new"))

        assert new != old
        assert not _file_of(store, old).exists()
        assert _file_of(store, new).read_bytes() == b"new"

    @pytest.mark.asyncio
    async def test_delete_is_tolerant(self, store):
        url = await store.store("movies", AssetUpload("a.png", b"x"))

        await store.delete(url, "movies")
        await store.delete(url, "movies")
        await store.delete(None, "movies")
        await store.delete("https://elsewhere.example/a.png", "movies")

        assert not _file_of(store, url).exists()
