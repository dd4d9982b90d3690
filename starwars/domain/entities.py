"""In-memory records returned by repositories.

Repositories translate ORM rows into these frozen dataclasses so services
and the HTTP layer never hold a live, session-bound object.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Character:
    id: UUID
    name: str
    planet_id: UUID | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class PlanetRef:
    """The slice of a planet embedded in a joined character read."""

    id: UUID
    name: str


@dataclass(frozen=True, slots=True)
class CharacterWithPlanet:
    """A character found by id together with its planet.

    `planet` is None when the character has no planet reference, or the
    reference does not resolve. A missing character is represented by the
    repository returning None instead of an instance.
    """

    id: UUID
    name: str
    planet_id: UUID | None
    created_at: datetime
    updated_at: datetime
    planet: PlanetRef | None = None


@dataclass(frozen=True, slots=True)
class Planet:
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class Episode:
    id: UUID
    name: str
    code: str
    release_date: date | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One page of records plus the numbers needed to fetch the others."""

    items: Sequence[T]
    pagination: Pagination
