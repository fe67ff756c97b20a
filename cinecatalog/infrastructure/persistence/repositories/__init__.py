"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans cinecatalog/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel par requete
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from cinecatalog.infrastructure.persistence.repositories.actor_repository import (
    SQLModelActorRepository,
)
from cinecatalog.infrastructure.persistence.repositories.genre_repository import (
    SQLModelGenreRepository,
)
from cinecatalog.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)
from cinecatalog.infrastructure.persistence.repositories.theater_repository import (
    SQLModelTheaterRepository,
)

__all__ = [
    "SQLModelActorRepository",
    "SQLModelGenreRepository",
    "SQLModelMovieRepository",
    "SQLModelTheaterRepository",
]
