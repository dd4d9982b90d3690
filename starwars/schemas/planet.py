from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from starwars.core.constants import MAX_NAME_LENGTH, MIN_NAME_LENGTH
from starwars.schemas.common import CamelModel, PaginationSchema, RequestModel


class PlanetCreate(RequestModel):
    name: str = Field(
        min_length=MIN_NAME_LENGTH,
        max_length=MAX_NAME_LENGTH,
        examples=["Tatooine"],
    )


class PlanetSchema(CamelModel):
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime


class PlanetResponse(CamelModel):
    data: PlanetSchema


class PlanetListResponse(CamelModel):
    data: list[PlanetSchema]
    pagination: PaginationSchema
