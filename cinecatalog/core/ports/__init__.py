"""
Ports (interfaces abstraites) du domaine.

Les adaptateurs de l'infrastructure implémentent ces contrats :
- repositories : persistance des films et des données de référence
- storage : stockage des fichiers et cache des réponses
"""

from cinecatalog.core.ports.repositories import (
    IActorRepository,
    IGenreRepository,
    IMovieRepository,
    IReferenceRepository,
    ITheaterRepository,
)
from cinecatalog.core.ports.storage import IAssetStore, IResponseCache

__all__ = [
    "IActorRepository",
    "IAssetStore",
    "IGenreRepository",
    "IMovieRepository",
    "IReferenceRepository",
    "IResponseCache",
    "ITheaterRepository",
]
