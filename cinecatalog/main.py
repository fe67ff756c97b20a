"""
Point d'entrée CLI de CineCatalog.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import asyncio
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table
from sqlmodel import Session

from . import __version__
from .config import Settings
from .container import Container
from .infrastructure.persistence.repositories import (
    SQLModelActorRepository,
    SQLModelGenreRepository,
    SQLModelMovieRepository,
    SQLModelTheaterRepository,
)
from .logging_config import configure_logging

app = typer.Typer(
    name="cinecatalog",
    help="API de gestion d'un catalogue de films",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CineCatalog")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Fichiers : {config.media_dir} (servis sous {config.media_base_url})")
    typer.echo(f"Cache : {config.cache_dir} (TTL {config.cache_ttl_seconds}s)")
    typer.echo(f"Films par liste d'accueil : {config.landing_top}")
    typer.echo(f"Origines CORS : {', '.join(config.cors_origins)}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineCatalog v{__version__}")


@app.command(name="init-db")
def init_database() -> None:
    """Crée les tables manquantes de la base de données."""
    container.database.init()
    typer.echo(f"Base initialisée : {get_config().database_url}")


@app.command(name="clear-cache")
def clear_cache() -> None:
    """Vide le cache des réponses."""
    cache = container.response_cache()
    try:
        asyncio.run(cache.clear())
    finally:
        cache.close()
    typer.echo("Cache vidé")


@app.command()
def stats() -> None:
    """Affiche le nombre d'éléments du catalogue."""
    engine = container.database()
    with Session(engine) as session:
        counts = [
            ("Films", SQLModelMovieRepository(session).count()),
            ("Genres", SQLModelGenreRepository(session).count()),
            ("Acteurs", SQLModelActorRepository(session).count()),
            ("Cinémas", SQLModelTheaterRepository(session).count()),
        ]

    table = Table(title="Catalogue", show_header=True)
    table.add_column("Catégorie", style="cyan")
    table.add_column("Nombre", justify="right")
    for label, count in counts:
        table.add_row(label, str(count))
    console.print(table)


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur de l'API."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run(
        "cinecatalog.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de CineCatalog", version=__version__)

    app()


if __name__ == "__main__":
    main()
