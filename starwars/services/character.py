from __future__ import annotations

import asyncio
import logging
from typing import Sequence
from uuid import UUID

from starwars.domain import Character, CharacterWithPlanet, Episode, Page
from starwars.exceptions import (
    CharacterCreateFailedError,
    CharacterNotFoundError,
    CharacterUpdateFailedError,
    EpisodeNotFoundError,
)
from starwars.metrics import CATALOG_QUERY_SECONDS, CHARACTER_WRITES_TOTAL
from starwars.repositories import (
    CharacterCreateData,
    CharacterQueryOptions,
    CharacterRepository,
    EpisodeRepository,
)
from starwars.schemas.character import CharacterCreate, CharacterListQuery, CharacterUpdate
from starwars.services.pagination import build_pagination, normalize_limit, normalize_page

logger = logging.getLogger(__name__)


class CharacterService:
    """Business rules for the character aggregate.

    The only layer that turns absence into CharacterNotFoundError. Storage
    errors from the repository propagate unchanged.
    """

    def __init__(
        self,
        character_repo: CharacterRepository,
        episode_repo: EpisodeRepository,
    ) -> None:
        self.character_repo = character_repo
        self.episode_repo = episode_repo

    async def create_character(self, payload: CharacterCreate) -> Character:
        character = await self.character_repo.create(
            CharacterCreateData(name=payload.name, planet_id=payload.planet_id or None)
        )
        if character is None:
            CHARACTER_WRITES_TOTAL.labels(operation="create", status="failed").inc()
            logger.error("Character insert returned no row", extra={"character_name": payload.name})
            raise CharacterCreateFailedError()

        CHARACTER_WRITES_TOTAL.labels(operation="create", status="success").inc()
        logger.info("Character created", extra={"character_id": str(character.id)})
        return character

    async def find_characters(self, params: CharacterListQuery | None = None) -> Page[Character]:
        """List one page of characters.

        `page` defaults to 1; `limit` defaults to 10 and is clamped to 100
        before either query is issued. The page read and the count run
        concurrently with the same filters.
        """
        params = params or CharacterListQuery()
        options = CharacterQueryOptions(
            page=normalize_page(params.page),
            limit=normalize_limit(params.limit),
            search=params.search,
            planet_id=params.planet_id,
        )

        with CATALOG_QUERY_SECONDS.labels(resource="characters").time():
            characters, total = await asyncio.gather(
                self.character_repo.find_many(options),
                self.character_repo.count_total(options.filters),
            )

        return Page(
            items=list(characters),
            pagination=build_pagination(options.page, options.limit, total),
        )

    async def find_character_by_id(self, character_id: UUID) -> Character:
        character = await self.character_repo.find_by_id(character_id)
        if character is None:
            logger.info("Character not found", extra={"character_id": str(character_id)})
            raise CharacterNotFoundError(character_id)
        return character

    async def find_character_with_planet(self, character_id: UUID) -> CharacterWithPlanet:
        result = await self.character_repo.find_with_planet(character_id)
        if result is None:
            logger.info("Character not found", extra={"character_id": str(character_id)})
            raise CharacterNotFoundError(character_id)
        return result

    async def update_character(self, character_id: UUID, payload: CharacterUpdate) -> Character:
        await self.find_character_by_id(character_id)

        changes = payload.model_dump(exclude_unset=True)
        updated = await self.character_repo.update(character_id, changes)
        if updated is None:
            # Row vanished between the existence check and the write
            CHARACTER_WRITES_TOTAL.labels(operation="update", status="failed").inc()
            logger.error(
                "Character update matched no row",
                extra={"character_id": str(character_id)},
            )
            raise CharacterUpdateFailedError(character_id)

        CHARACTER_WRITES_TOTAL.labels(operation="update", status="success").inc()
        logger.info(
            "Character updated",
            extra={"character_id": str(character_id), "fields": sorted(changes)},
        )
        return updated

    async def delete_character(self, character_id: UUID) -> None:
        await self.find_character_by_id(character_id)
        await self.character_repo.delete(character_id)
        CHARACTER_WRITES_TOTAL.labels(operation="delete", status="success").inc()
        logger.info("Character deleted", extra={"character_id": str(character_id)})

    async def find_character_episodes(self, character_id: UUID) -> Sequence[Episode]:
        await self.find_character_by_id(character_id)
        return await self.character_repo.list_episodes(character_id)

    async def add_character_episode(self, character_id: UUID, episode_id: UUID) -> None:
        await self.find_character_by_id(character_id)
        if await self.episode_repo.find_by_id(episode_id) is None:
            raise EpisodeNotFoundError(episode_id)

        await self.character_repo.link_episode(character_id, episode_id)
        logger.info(
            "Episode linked to character",
            extra={"character_id": str(character_id), "episode_id": str(episode_id)},
        )

    async def remove_character_episode(self, character_id: UUID, episode_id: UUID) -> None:
        await self.find_character_by_id(character_id)
        await self.character_repo.unlink_episode(character_id, episode_id)
        logger.info(
            "Episode unlinked from character",
            extra={"character_id": str(character_id), "episode_id": str(episode_id)},
        )
