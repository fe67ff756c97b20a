"""
Routes des films.

Les routes statiques (landing, form-options) sont declarees avant
/{movie_id} pour ne pas etre capturees par le parametre.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from ...core.entities.catalog import MovieDraft
from ...core.entities.views import (
    LandingPage,
    MovieDetail,
    MovieEditContext,
    MovieFormOptions,
    MovieSummary,
)
from ..deps import MovieServiceDep
from ..schemas import movie_draft_form

router = APIRouter(prefix="/movies", tags=["movies"])

MovieDraftDep = Annotated[MovieDraft, Depends(movie_draft_form)]


@router.get("/landing", response_model=LandingPage)
async def get_landing(service: MovieServiceDep):
    """Films a l'affiche et prochaines sorties."""
    return await service.get_landing()


@router.get("/form-options", response_model=MovieFormOptions)
async def get_form_options(service: MovieServiceDep):
    """Genres et cinemas proposes dans le formulaire de creation."""
    return service.get_form_options()


@router.get("/{movie_id}", response_model=MovieDetail, name="get_movie")
async def get_movie(movie_id: int, service: MovieServiceDep):
    """Detail d'un film avec genres, cinemas et distribution ordonnee."""
    return await service.get_detail(movie_id)


@router.get("/{movie_id}/edit-context", response_model=MovieEditContext)
async def get_movie_edit_context(movie_id: int, service: MovieServiceDep):
    """Detail d'un film et choix disponibles pour le formulaire d'edition."""
    return service.get_edit_context(movie_id)


@router.post("", response_model=MovieSummary, status_code=status.HTTP_201_CREATED)
async def create_movie(
    draft: MovieDraftDep, service: MovieServiceDep, request: Request, response: Response
):
    """Cree un film ; l'en-tete Location designe sa fiche."""
    summary = await service.create(draft)
    response.headers["Location"] = str(request.url_for("get_movie", movie_id=summary.id))
    return summary


@router.put("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_movie(movie_id: int, draft: MovieDraftDep, service: MovieServiceDep):
    """Remplace les champs et selections d'un film (affiche conservee si absente)."""
    await service.update(movie_id, draft)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(movie_id: int, service: MovieServiceDep):
    """Supprime un film et tous ses liens."""
    await service.delete(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
