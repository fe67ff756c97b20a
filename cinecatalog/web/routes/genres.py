"""
Routes du catalogue des genres.
"""

from fastapi import APIRouter, Response, status

from ...core.entities.catalog import Genre
from ..deps import TOTAL_COUNT_HEADER, GenreServiceDep, PaginationDep
from ..schemas import GenreIn

router = APIRouter(prefix="/genres", tags=["genres"])


@router.get("", response_model=list[Genre])
async def list_genres(service: GenreServiceDep, pagination: PaginationDep, response: Response):
    """Page de genres ; le total est dans l'en-tete total-records-count."""
    genres, total = await service.list_page(pagination.page, pagination.records_per_page)
    response.headers[TOTAL_COUNT_HEADER] = str(total)
    return genres


@router.get("/all", response_model=list[Genre])
async def list_all_genres(service: GenreServiceDep):
    """Tous les genres, tries par nom."""
    return await service.list_all()


@router.get("/{genre_id}", response_model=Genre)
async def get_genre(genre_id: int, service: GenreServiceDep):
    return service.get(genre_id)


@router.post("", response_model=Genre, status_code=status.HTTP_201_CREATED)
async def create_genre(body: GenreIn, service: GenreServiceDep):
    return await service.create(body.to_entity())


@router.put("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_genre(genre_id: int, body: GenreIn, service: GenreServiceDep):
    await service.update(genre_id, body.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_genre(genre_id: int, service: GenreServiceDep):
    """Supprime un genre ; les films concernes perdent ce genre."""
    await service.delete(genre_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
