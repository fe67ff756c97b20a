"""
Configuration de la base de donnees pour CineCatalog.

Ce module fournit :
- Engine SQLAlchemy (SQLite par defaut) avec cles etrangeres actives
- Session factory (generateur utilisable comme dependance FastAPI)
- Fonction d'initialisation des tables

La base de donnees est configuree via CINECATALOG_DATABASE_URL (defaut: sqlite:///cinecatalog.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine, event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise par init_db() ou lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Active les contraintes de cles etrangeres (desactivees par defaut sous SQLite)."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database_engine(database_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Pour SQLite : cree le repertoire parent du fichier, autorise l'usage
    multi-thread et partage une connexion unique pour les bases en memoire.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    elif database_url.startswith("sqlite:///"):
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    engine = create_engine(database_url, echo=False, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_engine() -> Engine:
    """
    Retourne l'engine courant, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from cinecatalog.config import Settings

        _engine = create_database_engine(Settings().database_url)
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation comme dependance FastAPI :
        def route(session: Session = Depends(get_session)): ...

    Ou avec context manager :
        with Session(get_engine()) as session:
            # operations

    Yields:
        Session SQLModel connectee a l'engine courant
    """
    with Session(get_engine()) as session:
        yield session


def init_db(database_url: Optional[str] = None) -> Engine:
    """
    Initialise la base de donnees en creant toutes les tables.

    Si database_url est fourni, l'engine global est remplace par un engine
    sur cette URL (l'ancien est libere).

    Doit etre appelee une fois au demarrage de l'application.
    """
    global _engine
    # Import des modeles pour enregistrer leurs metadonnees
    from cinecatalog.infrastructure.persistence import models  # noqa: F401

    if database_url is not None:
        if _engine is not None:
            _engine.dispose()
        _engine = create_database_engine(database_url)

    engine = get_engine()
    SQLModel.metadata.create_all(engine)
    logger.debug("Base de donnees initialisee", url=str(engine.url))
    return engine
