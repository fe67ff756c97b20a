"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- storage/ : Stockage des affiches et photos sur disque
- cache/ : Cache des réponses de lecture, invalidé par étiquette

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from cinecatalog.adapters.cache.response_cache import ResponseCache
from cinecatalog.adapters.storage.local_asset_store import LocalAssetStore

__all__ = [
    "LocalAssetStore",
    "ResponseCache",
]
