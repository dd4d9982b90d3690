from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from starwars.api.dependencies import CharacterServiceDep
from starwars.schemas import (
    CharacterCreate,
    CharacterListQuery,
    CharacterListResponse,
    CharacterResponse,
    CharacterSchema,
    CharacterUpdate,
    CharacterWithPlanetResponse,
    CharacterWithPlanetSchema,
    EpisodeCollectionResponse,
    EpisodeSchema,
    PaginationSchema,
)

router = APIRouter(prefix="/characters", tags=["characters"])


@router.post(
    "",
    response_model=CharacterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a character",
)
async def create_character(payload: CharacterCreate, service: CharacterServiceDep):
    character = await service.create_character(payload)
    return CharacterResponse(data=CharacterSchema.model_validate(character))


@router.get(
    "",
    response_model=CharacterListResponse,
    summary="List characters with pagination and filters",
)
async def list_characters(
    service: CharacterServiceDep,
    page: int | None = Query(default=None, ge=1, description="Page number, defaults to 1"),
    limit: int | None = Query(
        default=None,
        ge=1,
        description="Items per page, defaults to 10 and is capped at 100",
    ),
    search: str | None = Query(default=None, description="Case-insensitive name substring"),
    planet_id: UUID | None = Query(default=None, alias="planetId"),
):
    result = await service.find_characters(
        CharacterListQuery(page=page, limit=limit, search=search, planet_id=planet_id)
    )
    return CharacterListResponse(
        data=[CharacterSchema.model_validate(item) for item in result.items],
        pagination=PaginationSchema.model_validate(result.pagination),
    )


@router.get(
    "/{character_id}",
    response_model=CharacterResponse,
    summary="Get a character by id",
)
async def get_character(character_id: UUID, service: CharacterServiceDep):
    character = await service.find_character_by_id(character_id)
    return CharacterResponse(data=CharacterSchema.model_validate(character))


@router.get(
    "/{character_id}/with-planet",
    response_model=CharacterWithPlanetResponse,
    summary="Get a character with its planet",
)
async def get_character_with_planet(character_id: UUID, service: CharacterServiceDep):
    result = await service.find_character_with_planet(character_id)
    return CharacterWithPlanetResponse(data=CharacterWithPlanetSchema.model_validate(result))


@router.patch(
    "/{character_id}",
    response_model=CharacterResponse,
    summary="Partially update a character",
)
async def update_character(
    character_id: UUID,
    payload: CharacterUpdate,
    service: CharacterServiceDep,
):
    character = await service.update_character(character_id, payload)
    return CharacterResponse(data=CharacterSchema.model_validate(character))


@router.delete(
    "/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a character",
)
async def delete_character(character_id: UUID, service: CharacterServiceDep):
    await service.delete_character(character_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{character_id}/episodes",
    response_model=EpisodeCollectionResponse,
    summary="Episodes a character appears in",
)
async def list_character_episodes(character_id: UUID, service: CharacterServiceDep):
    episodes = await service.find_character_episodes(character_id)
    return EpisodeCollectionResponse(
        data=[EpisodeSchema.model_validate(episode) for episode in episodes]
    )


@router.put(
    "/{character_id}/episodes/{episode_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Link an episode to a character",
)
async def add_character_episode(
    character_id: UUID,
    episode_id: UUID,
    service: CharacterServiceDep,
):
    await service.add_character_episode(character_id, episode_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{character_id}/episodes/{episode_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Unlink an episode from a character",
)
async def remove_character_episode(
    character_id: UUID,
    episode_id: UUID,
    service: CharacterServiceDep,
):
    await service.remove_character_episode(character_id, episode_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
