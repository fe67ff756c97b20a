"""
Interfaces ports pour le stockage des fichiers et le cache des réponses.

Ces interfaces abstraient les opérations d'entrée/sortie lentes,
exposées en asynchrone pour ne pas bloquer la boucle d'événements.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, TypeVar

from cinecatalog.core.entities.catalog import AssetUpload

T = TypeVar("T")


class IAssetStore(ABC):
    """
    Interface de stockage des fichiers (affiches, photos).

    Toute erreur est signalée par AssetStoreError.
    """

    @abstractmethod
    async def store(self, bucket: str, upload: AssetUpload) -> str:
        """Enregistre un fichier et retourne son URL durable."""
        ...

    @abstractmethod
    async def replace(self, reference: str, bucket: str, upload: AssetUpload) -> str:
        """
        Remplace un fichier existant.

        L'ancienne URL ne doit plus être résolvable après l'appel.

        Retourne :
            La nouvelle URL durable
        """
        ...

    @abstractmethod
    async def delete(self, reference: Optional[str], bucket: str) -> None:
        """Supprime un fichier. Une référence absente ou inconnue est ignorée."""
        ...


class IResponseCache(ABC):
    """
    Interface du cache des réponses, groupées par étiquette.

    L'invalidation est globale par étiquette.
    """

    @abstractmethod
    async def get_or_compute(
        self,
        key: str,
        tag: str,
        compute: Callable[[], T],
    ) -> T:
        """Retourne la valeur en cache ou la calcule et la stocke sous l'étiquette."""
        ...

    @abstractmethod
    async def evict(self, tag: str) -> int:
        """Invalide toutes les entrées de l'étiquette. Retourne le nombre d'entrées supprimées."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Supprime toutes les entrées du cache."""
        ...

    @abstractmethod
    async def get(self, key: str, tag: str) -> Optional[Any]:
        """Récupère une valeur de l'étiquette, ou None si absente."""
        ...
