"""
Dépendances partagées de l'application web.

Chaque requête reçoit sa propre session SQLModel ; les services sont
construits par le Container DI avec des repositories liés à cette session.
"""

from typing import Annotated

from fastapi import Depends, Query, Request
from sqlmodel import Session

from ..container import Container
from ..infrastructure.persistence.database import get_session
from ..infrastructure.persistence.queries import MovieQueryProjector
from ..infrastructure.persistence.repositories import (
    SQLModelActorRepository,
    SQLModelGenreRepository,
    SQLModelMovieRepository,
    SQLModelTheaterRepository,
)
from ..services.movie_service import MovieService
from ..services.reference_catalog import ActorService, GenreService, TheaterService

# En-tête portant le nombre total d'éléments d'une liste paginée
TOTAL_COUNT_HEADER = "total-records-count"


def get_container(request: Request) -> Container:
    """Retourne le Container DI attaché à l'application."""
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]
SessionDep = Annotated[Session, Depends(get_session)]


def get_movie_service(container: ContainerDep, session: SessionDep) -> MovieService:
    return container.movie_service(
        movie_repo=SQLModelMovieRepository(session),
        genre_repo=SQLModelGenreRepository(session),
        actor_repo=SQLModelActorRepository(session),
        theater_repo=SQLModelTheaterRepository(session),
        projector=MovieQueryProjector(session),
    )


def get_genre_service(container: ContainerDep, session: SessionDep) -> GenreService:
    return container.genre_service(repo=SQLModelGenreRepository(session))


def get_theater_service(container: ContainerDep, session: SessionDep) -> TheaterService:
    return container.theater_service(repo=SQLModelTheaterRepository(session))


def get_actor_service(container: ContainerDep, session: SessionDep) -> ActorService:
    return container.actor_service(repo=SQLModelActorRepository(session))


MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]
GenreServiceDep = Annotated[GenreService, Depends(get_genre_service)]
TheaterServiceDep = Annotated[TheaterService, Depends(get_theater_service)]
ActorServiceDep = Annotated[ActorService, Depends(get_actor_service)]


class Pagination:
    """Paramètres de pagination des listes (page commence à 1)."""

    def __init__(
        self,
        page: Annotated[int, Query(ge=1)] = 1,
        records_per_page: Annotated[int, Query(ge=1, le=50)] = 10,
    ) -> None:
        self.page = page
        self.records_per_page = records_per_page


PaginationDep = Annotated[Pagination, Depends(Pagination)]
