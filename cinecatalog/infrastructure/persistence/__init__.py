"""
Module de persistance SQLModel pour CineCatalog.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Conversion entre entites de domaine et modeles
- queries.py : Projections de lecture (accueil, detail, formulaire d'edition)

Usage:
    from cinecatalog.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    with next(get_session()) as session:
        session.add(GenreModel(name="Drame"))
        session.commit()
"""

from cinecatalog.infrastructure.persistence.database import (
    create_database_engine,
    get_engine,
    get_session,
    init_db,
)
from cinecatalog.infrastructure.persistence.models import (
    ActorModel,
    CastLinkModel,
    GenreLinkModel,
    GenreModel,
    MovieModel,
    TheaterLinkModel,
    TheaterModel,
)

__all__ = [
    "create_database_engine",
    "get_engine",
    "get_session",
    "init_db",
    "ActorModel",
    "CastLinkModel",
    "GenreLinkModel",
    "GenreModel",
    "MovieModel",
    "TheaterLinkModel",
    "TheaterModel",
]
