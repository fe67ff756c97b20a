"""
Cache persistant des reponses de lecture, invalide par etiquette.

Le cache utilise diskcache (index des etiquettes active) pour partager les
entrees entre les workers et conserver les donnees entre les redemarrages.

Chaque etiquette porte un compteur de generation, incremente a chaque
invalidation et inclus dans toutes les cles : une valeur calculee avant
une invalidation est ecrite sous l'ancienne generation et n'est plus
jamais relue.
"""

import asyncio
from functools import partial
from typing import Any, Callable, Optional, TypeVar

from diskcache import Cache
from loguru import logger

from cinecatalog.core.ports.storage import IResponseCache

T = TypeVar("T")


class ResponseCache(IResponseCache):
    """
    Cache asynchrone avec TTL et invalidation par etiquette.

    Attributes:
        DEFAULT_TTL: Duree de vie par defaut des entrees (1h)

    Example:
        cache = ResponseCache(cache_dir=".cache/responses")
        landing = await cache.get_or_compute("landing", "movies", compute)
        await cache.evict("movies")
    """

    DEFAULT_TTL = 60 * 60  # 1 heure en secondes (3600)

    def __init__(self, cache_dir: str = ".cache/responses", ttl: int = DEFAULT_TTL) -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
            ttl: Duree de vie des entrees en secondes
        """
        self._cache = Cache(str(cache_dir), tag_index=True)
        self._ttl = ttl

    @staticmethod
    def _generation_key(tag: str) -> str:
        return f"generation:{tag}"

    def _full_key(self, key: str, tag: str) -> str:
        generation = self._cache.get(self._generation_key(tag), default=0)
        return f"{tag}:{generation}:{key}"

    def _get(self, key: str, tag: str) -> Optional[Any]:
        return self._cache.get(self._full_key(key, tag))

    def _set(self, key: str, tag: str, value: Any, full_key: Optional[str] = None) -> None:
        self._cache.set(full_key or self._full_key(key, tag), value, expire=self._ttl, tag=tag)

    def _evict(self, tag: str) -> int:
        self._cache.incr(self._generation_key(tag), default=0)
        return self._cache.evict(tag)

    async def get(self, key: str, tag: str) -> Optional[Any]:
        """
        Recupere une valeur du cache.

        Returns:
            La valeur stockee ou None si absente, expiree ou invalidee
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(self._get, key, tag))

    async def set(self, key: str, tag: str, value: Any) -> None:
        """Stocke une valeur sous l'etiquette avec le TTL du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, partial(self._set, key, tag, value))

    async def get_or_compute(self, key: str, tag: str, compute: Callable[[], T]) -> T:
        """
        Retourne la valeur en cache, ou la calcule et la stocke.

        La cle complete est figee avant le calcul : si l'etiquette est
        invalidee pendant le calcul, le resultat est stocke sous la
        generation perimee.
        """
        loop = asyncio.get_running_loop()
        full_key = await loop.run_in_executor(None, partial(self._full_key, key, tag))
        cached = await loop.run_in_executor(None, self._cache.get, full_key)
        if cached is not None:
            return cached

        value = compute()
        if value is not None:
            await loop.run_in_executor(None, partial(self._set, key, tag, value, full_key))
        return value

    async def evict(self, tag: str) -> int:
        """Invalide toutes les entrees de l'etiquette."""
        loop = asyncio.get_running_loop()
        removed = await loop.run_in_executor(None, partial(self._evict, tag))
        logger.debug(f"Cache invalide pour l'etiquette '{tag}' ({removed} entrees)")
        return removed

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()
