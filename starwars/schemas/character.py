from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field, model_validator

from starwars.core.constants import MAX_NAME_LENGTH, MIN_NAME_LENGTH
from starwars.schemas.common import CamelModel, PaginationSchema, RequestModel


class CharacterCreate(RequestModel):
    name: str = Field(
        min_length=MIN_NAME_LENGTH,
        max_length=MAX_NAME_LENGTH,
        description="Character name",
        examples=["Luke Skywalker"],
    )
    planet_id: UUID | None = Field(
        default=None,
        description="UUID of the planet this character is from",
    )


class CharacterUpdate(RequestModel):
    """Partial update. Only keys present in the body are written.

    `planetId: null` clears the planet reference; `name` may be omitted but
    never null.
    """

    name: str | None = Field(
        default=None,
        min_length=MIN_NAME_LENGTH,
        max_length=MAX_NAME_LENGTH,
        examples=["Darth Vader"],
    )
    planet_id: UUID | None = None

    @model_validator(mode="after")
    def _name_not_null(self) -> CharacterUpdate:
        if "name" in self.model_fields_set and self.name is None:
            raise ValueError("name must not be null")
        return self


class CharacterListQuery(CamelModel):
    """Raw list parameters; the service applies defaults and the clamp."""

    page: int | None = None
    limit: int | None = None
    search: str | None = None
    planet_id: UUID | None = None


class CharacterSchema(CamelModel):
    id: UUID
    name: str
    planet_id: UUID | None
    created_at: datetime
    updated_at: datetime


class PlanetRefSchema(CamelModel):
    id: UUID
    name: str


class CharacterWithPlanetSchema(CharacterSchema):
    planet: PlanetRefSchema | None


class CharacterResponse(CamelModel):
    data: CharacterSchema


class CharacterWithPlanetResponse(CamelModel):
    data: CharacterWithPlanetSchema


class CharacterListResponse(CamelModel):
    data: list[CharacterSchema]
    pagination: PaginationSchema
