"""
Routes du catalogue des acteurs.

Creation et modification en multipart/form-data (photo jointe optionnelle).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from ...core.entities.catalog import Actor
from ..deps import TOTAL_COUNT_HEADER, ActorServiceDep, PaginationDep
from ..schemas import ActorForm, actor_form

router = APIRouter(prefix="/actors", tags=["actors"])

ActorFormDep = Annotated[ActorForm, Depends(actor_form)]


@router.get("", response_model=list[Actor])
async def list_actors(service: ActorServiceDep, pagination: PaginationDep, response: Response):
    """Page d'acteurs ; le total est dans l'en-tete total-records-count."""
    actors, total = await service.list_page(pagination.page, pagination.records_per_page)
    response.headers[TOTAL_COUNT_HEADER] = str(total)
    return actors


@router.get("/search", response_model=list[Actor])
async def search_actors(
    service: ActorServiceDep,
    name: Annotated[str, Query(min_length=1, max_length=150)],
    limit: Annotated[int, Query(ge=1, le=20)] = 5,
):
    """Autocompletion : acteurs dont le nom contient le texte."""
    return service.search(name, limit=limit)


@router.get("/{actor_id}", response_model=Actor)
async def get_actor(actor_id: int, service: ActorServiceDep):
    return service.get(actor_id)


@router.post("", response_model=Actor, status_code=status.HTTP_201_CREATED)
async def create_actor(form: ActorFormDep, service: ActorServiceDep):
    return await service.create(form.actor, photo=form.photo)


@router.put("/{actor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_actor(actor_id: int, form: ActorFormDep, service: ActorServiceDep):
    """Modifie un acteur ; sans photo jointe, la photo actuelle est conservee."""
    await service.update(actor_id, form.actor, photo=form.photo)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{actor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_actor(actor_id: int, service: ActorServiceDep):
    """Supprime un acteur, ses roles et sa photo."""
    await service.delete(actor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
