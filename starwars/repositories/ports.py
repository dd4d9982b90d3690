"""Repository ports.

Services depend on these abstract classes only; the SQLAlchemy adapters in
this package implement them. Every read returns domain records, and absence
is returned as None (or an empty list), never raised.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Sequence
from uuid import UUID

from starwars.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from starwars.domain import Character, CharacterWithPlanet, Episode, Planet


@dataclass(frozen=True, slots=True)
class CharacterFilters:
    search: str | None = None
    planet_id: UUID | None = None


@dataclass(frozen=True, slots=True)
class CharacterQueryOptions:
    """Pagination plus filters. Callers pass already-normalized values."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE
    search: str | None = None
    planet_id: UUID | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def filters(self) -> CharacterFilters:
        return CharacterFilters(search=self.search, planet_id=self.planet_id)


@dataclass(frozen=True, slots=True)
class SearchQueryOptions:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE
    search: str | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True, slots=True)
class CharacterCreateData:
    name: str
    planet_id: UUID | None = None


@dataclass(frozen=True, slots=True)
class EpisodeCreateData:
    name: str
    code: str
    release_date: date | None = None


class CharacterRepository(ABC):
    """Persistence port for the character aggregate."""

    @abstractmethod
    async def find_by_id(self, character_id: UUID) -> Character | None: ...

    @abstractmethod
    async def find_many(self, options: CharacterQueryOptions) -> Sequence[Character]: ...

    @abstractmethod
    async def count_total(self, filters: CharacterFilters) -> int: ...

    @abstractmethod
    async def find_with_planet(self, character_id: UUID) -> CharacterWithPlanet | None: ...

    @abstractmethod
    async def create(self, data: CharacterCreateData) -> Character | None: ...

    @abstractmethod
    async def update(
        self, character_id: UUID, changes: Mapping[str, Any]
    ) -> Character | None:
        """Apply `changes` and refresh `updated_at`. None when no row matched."""

    @abstractmethod
    async def delete(self, character_id: UUID) -> None: ...

    @abstractmethod
    async def list_episodes(self, character_id: UUID) -> Sequence[Episode]: ...

    @abstractmethod
    async def link_episode(self, character_id: UUID, episode_id: UUID) -> None: ...

    @abstractmethod
    async def unlink_episode(self, character_id: UUID, episode_id: UUID) -> None: ...


class PlanetRepository(ABC):
    """Persistence port for planets."""

    @abstractmethod
    async def find_by_id(self, planet_id: UUID) -> Planet | None: ...

    @abstractmethod
    async def find_many(self, options: SearchQueryOptions) -> Sequence[Planet]: ...

    @abstractmethod
    async def count_total(self, search: str | None = None) -> int: ...

    @abstractmethod
    async def create(self, name: str) -> Planet | None: ...

    @abstractmethod
    async def delete(self, planet_id: UUID) -> None: ...


class EpisodeRepository(ABC):
    """Persistence port for episodes."""

    @abstractmethod
    async def find_by_id(self, episode_id: UUID) -> Episode | None: ...

    @abstractmethod
    async def find_many(self, options: SearchQueryOptions) -> Sequence[Episode]: ...

    @abstractmethod
    async def count_total(self, search: str | None = None) -> int: ...

    @abstractmethod
    async def create(self, data: EpisodeCreateData) -> Episode | None: ...

    @abstractmethod
    async def delete(self, episode_id: UUID) -> None: ...
