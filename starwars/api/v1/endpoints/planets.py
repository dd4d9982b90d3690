from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from starwars.api.dependencies import PlanetServiceDep
from starwars.schemas import (
    PaginationSchema,
    PlanetCreate,
    PlanetListResponse,
    PlanetResponse,
    PlanetSchema,
)

router = APIRouter(prefix="/planets", tags=["planets"])


@router.post(
    "",
    response_model=PlanetResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a planet",
)
async def create_planet(payload: PlanetCreate, service: PlanetServiceDep):
    planet = await service.create_planet(payload)
    return PlanetResponse(data=PlanetSchema.model_validate(planet))


@router.get("", response_model=PlanetListResponse, summary="List planets")
async def list_planets(
    service: PlanetServiceDep,
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1),
    search: str | None = Query(default=None),
):
    result = await service.find_planets(page=page, limit=limit, search=search)
    return PlanetListResponse(
        data=[PlanetSchema.model_validate(item) for item in result.items],
        pagination=PaginationSchema.model_validate(result.pagination),
    )


@router.get("/{planet_id}", response_model=PlanetResponse, summary="Get a planet by id")
async def get_planet(planet_id: UUID, service: PlanetServiceDep):
    planet = await service.find_planet_by_id(planet_id)
    return PlanetResponse(data=PlanetSchema.model_validate(planet))


@router.delete(
    "/{planet_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a planet",
)
async def delete_planet(planet_id: UUID, service: PlanetServiceDep):
    await service.delete_planet(planet_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
