"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Les services qui travaillent sur la base recoivent une session par requete :
les repositories sont construits a l'appel (voir web/deps.py).
"""

from dependency_injector import containers, providers

from .adapters.cache.response_cache import ResponseCache
from .adapters.storage.local_asset_store import LocalAssetStore
from .config import Settings
from .infrastructure.persistence.database import init_db
from .services.movie_assembler import MovieAssembler
from .services.movie_service import MovieService
from .services.reference_catalog import ActorService, GenreService, TheaterService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        service = container.movie_service(
            movie_repo=..., genre_repo=..., actor_repo=...,
            theater_repo=..., projector=...,
        )
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(
        init_db,
        database_url=config.provided.database_url,
    )

    # Stockage des fichiers et cache - Singletons partages entre requetes
    asset_store = providers.Singleton(
        LocalAssetStore,
        root_dir=config.provided.media_dir,
        base_url=config.provided.media_base_url,
    )
    response_cache = providers.Singleton(
        ResponseCache,
        cache_dir=config.provided.cache_dir,
        ttl=config.provided.cache_ttl_seconds,
    )

    # Assembleur sans etat - Singleton
    movie_assembler = providers.Singleton(MovieAssembler)

    # Services - Factory, les repositories (session par requete) sont passes a l'appel
    movie_service = providers.Factory(
        MovieService,
        asset_store=asset_store,
        cache=response_cache,
        assembler=movie_assembler,
        landing_top=config.provided.landing_top,
    )
    genre_service = providers.Factory(GenreService, cache=response_cache)
    theater_service = providers.Factory(TheaterService, cache=response_cache)
    actor_service = providers.Factory(
        ActorService,
        asset_store=asset_store,
        cache=response_cache,
    )
