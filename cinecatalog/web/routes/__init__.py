"""
Package routes de l'API : films et donnees de reference.

Regroupe les sous-modules : movies, genres, theaters, actors.
"""

from fastapi import APIRouter

from . import actors, genres, movies, theaters

router = APIRouter(prefix="/api")

router.include_router(movies.router)
router.include_router(genres.router)
router.include_router(theaters.router)
router.include_router(actors.router)
