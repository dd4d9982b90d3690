from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from starwars.api.dependencies import EpisodeServiceDep
from starwars.schemas import (
    EpisodeCreate,
    EpisodeListResponse,
    EpisodeResponse,
    EpisodeSchema,
    PaginationSchema,
)

router = APIRouter(prefix="/episodes", tags=["episodes"])


@router.post(
    "",
    response_model=EpisodeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an episode",
)
async def create_episode(payload: EpisodeCreate, service: EpisodeServiceDep):
    episode = await service.create_episode(payload)
    return EpisodeResponse(data=EpisodeSchema.model_validate(episode))


@router.get("", response_model=EpisodeListResponse, summary="List episodes")
async def list_episodes(
    service: EpisodeServiceDep,
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1),
    search: str | None = Query(default=None, description="Matches name or code"),
):
    result = await service.find_episodes(page=page, limit=limit, search=search)
    return EpisodeListResponse(
        data=[EpisodeSchema.model_validate(item) for item in result.items],
        pagination=PaginationSchema.model_validate(result.pagination),
    )


@router.get("/{episode_id}", response_model=EpisodeResponse, summary="Get an episode by id")
async def get_episode(episode_id: UUID, service: EpisodeServiceDep):
    episode = await service.find_episode_by_id(episode_id)
    return EpisodeResponse(data=EpisodeSchema.model_validate(episode))


@router.delete(
    "/{episode_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an episode",
)
async def delete_episode(episode_id: UUID, service: EpisodeServiceDep):
    await service.delete_episode(episode_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
