"""
Routes du catalogue des cinemas.
"""

from fastapi import APIRouter, Response, status

from ...core.entities.catalog import Theater
from ..deps import TOTAL_COUNT_HEADER, PaginationDep, TheaterServiceDep
from ..schemas import TheaterIn

router = APIRouter(prefix="/theaters", tags=["theaters"])


@router.get("", response_model=list[Theater])
async def list_theaters(service: TheaterServiceDep, pagination: PaginationDep, response: Response):
    """Page de cinemas ; le total est dans l'en-tete total-records-count."""
    theaters, total = await service.list_page(pagination.page, pagination.records_per_page)
    response.headers[TOTAL_COUNT_HEADER] = str(total)
    return theaters


@router.get("/all", response_model=list[Theater])
async def list_all_theaters(service: TheaterServiceDep):
    return await service.list_all()


@router.get("/{theater_id}", response_model=Theater)
async def get_theater(theater_id: int, service: TheaterServiceDep):
    return service.get(theater_id)


@router.post("", response_model=Theater, status_code=status.HTTP_201_CREATED)
async def create_theater(body: TheaterIn, service: TheaterServiceDep):
    return await service.create(body.to_entity())


@router.put("/{theater_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_theater(theater_id: int, body: TheaterIn, service: TheaterServiceDep):
    await service.update(theater_id, body.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{theater_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_theater(theater_id: int, service: TheaterServiceDep):
    """Supprime un cinema ; les films concernes n'y sont plus programmes."""
    await service.delete(theater_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
