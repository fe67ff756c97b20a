"""
Application FastAPI de CineCatalog.

Initialise l'application web avec le Container DI, configure le CORS pour
le front d'administration, expose les fichiers stockes et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from .deps import TOTAL_COUNT_HEADER
from .errors import register_error_handlers
from .routes import router as api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise la base au démarrage et libère les ressources à l'arrêt."""
    container: Container = app.state.container
    container.database.init()
    logger.info("API CineCatalog démarrée")
    yield
    container.response_cache().close()
    container.shutdown_resources()


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI à utiliser (un nouveau par défaut)
    """
    container = container or Container()
    settings = container.config()

    app = FastAPI(title="CineCatalog", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[TOTAL_COUNT_HEADER, "Location"],
    )

    # Fichiers stockés (affiches, photos)
    settings.media_dir.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.media_base_url,
        StaticFiles(directory=settings.media_dir),
        name="media",
    )

    register_error_handlers(app)
    app.include_router(api_router)
    return app

