"""
Stockage des fichiers sur le disque local.

Chaque fichier est enregistre sous media_dir/<bucket>/<uuid><extension>
et expose sous base_url/<bucket>/<uuid><extension>. Le nom aleatoire garantit
qu'une URL remplacee ne designe jamais le nouveau contenu.

Les operations disque sont executees via run_in_executor pour ne pas
bloquer la boucle d'evenements.
"""

import asyncio
import re
import uuid
from functools import partial
from pathlib import Path, PurePosixPath
from typing import Optional
from urllib.parse import urlparse

from loguru import logger

from cinecatalog.core.entities.catalog import AssetUpload
from cinecatalog.core.exceptions import AssetStoreError
from cinecatalog.core.ports.storage import IAssetStore

# Extensions acceptees telles quelles, les autres sont remplacees par ".bin"
_EXTENSION_PATTERN = re.compile(r"^\.[a-z0-9]{1,8}$")
_BUCKET_PATTERN = re.compile(r"^[a-z0-9_-]+$")


class LocalAssetStore(IAssetStore):
    """
    Implementation de IAssetStore sur le systeme de fichiers.

    Example:
        store = LocalAssetStore(root_dir=Path("media"), base_url="/media")
        url = await store.store("movies", AssetUpload("poster.jpg", data))
        # -> "/media/movies/3f2a...e1.jpg"
    """

    def __init__(self, root_dir: Path, base_url: str = "/media") -> None:
        """
        Initialise le stockage.

        Args:
            root_dir: Repertoire racine (cree si inexistant)
            base_url: Prefixe public des URLs retournees
        """
        self._root = Path(root_dir)
        self._base_url = base_url.rstrip("/")
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root_dir(self) -> Path:
        return self._root

    def _bucket_dir(self, bucket: str) -> Path:
        if not _BUCKET_PATTERN.match(bucket):
            raise AssetStoreError(bucket, "invalid bucket name")
        return self._root / bucket

    def _url_for(self, bucket: str, name: str) -> str:
        return f"{self._base_url}/{bucket}/{name}"

    def _path_for(self, reference: str, bucket: str) -> Optional[Path]:
        """Retrouve le fichier d'une URL emise par ce stockage, ou None."""
        path = PurePosixPath(urlparse(reference).path)
        prefix = PurePosixPath(urlparse(f"{self._base_url}/{bucket}").path)
        if path.parent != prefix or not path.name:
            return None
        return self._bucket_dir(bucket) / path.name

    def _write(self, bucket: str, upload: AssetUpload) -> str:
        extension = Path(upload.filename).suffix.lower()
        if not _EXTENSION_PATTERN.match(extension):
            extension = ".bin"
        name = f"{uuid.uuid4().hex}{extension}"
        directory = self._bucket_dir(bucket)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            (directory / name).write_bytes(upload.content)
        except OSError as e:
            raise AssetStoreError(bucket, str(e)) from e
        return self._url_for(bucket, name)

    def _remove(self, reference: str, bucket: str) -> None:
        path = self._path_for(reference, bucket)
        if path is None:
            logger.warning(f"Reference hors du stockage ignoree: {reference}")
            return
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise AssetStoreError(bucket, str(e), reference=reference) from e

    async def store(self, bucket: str, upload: AssetUpload) -> str:
        """Enregistre un fichier et retourne son URL."""
        loop = asyncio.get_running_loop()
        url = await loop.run_in_executor(None, partial(self._write, bucket, upload))
        logger.debug(f"Fichier enregistre: {url}")
        return url

    async def replace(self, reference: str, bucket: str, upload: AssetUpload) -> str:
        """
        Remplace un fichier : le nouveau est enregistre sous un nouveau nom,
        puis l'ancien est supprime. Si l'enregistrement echoue, l'ancien reste.

        Returns:
            La nouvelle URL
        """
        url = await self.store(bucket, upload)
        await self.delete(reference, bucket)
        return url

    async def delete(self, reference: Optional[str], bucket: str) -> None:
        """Supprime le fichier d'une URL. Une reference vide ou absente est ignoree."""
        if not reference:
            return
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, partial(self._remove, reference, bucket))
        logger.debug(f"Fichier supprime: {reference}")
