from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from starwars.core.constants import (
    MAX_EPISODE_CODE_LENGTH,
    MAX_NAME_LENGTH,
    MIN_EPISODE_CODE_LENGTH,
    MIN_NAME_LENGTH,
)
from starwars.schemas.common import CamelModel, PaginationSchema, RequestModel


class EpisodeCreate(RequestModel):
    name: str = Field(
        min_length=MIN_NAME_LENGTH,
        max_length=MAX_NAME_LENGTH,
        examples=["A New Hope"],
    )
    code: str = Field(
        min_length=MIN_EPISODE_CODE_LENGTH,
        max_length=MAX_EPISODE_CODE_LENGTH,
        examples=["NEWHOPE"],
    )
    release_date: date | None = Field(default=None, examples=["1977-05-25"])


class EpisodeSchema(CamelModel):
    id: UUID
    name: str
    code: str
    release_date: date | None
    created_at: datetime
    updated_at: datetime


class EpisodeResponse(CamelModel):
    data: EpisodeSchema


class EpisodeCollectionResponse(CamelModel):
    """Unpaginated list, e.g. the episodes of one character."""

    data: list[EpisodeSchema]


class EpisodeListResponse(CamelModel):
    data: list[EpisodeSchema]
    pagination: PaginationSchema
