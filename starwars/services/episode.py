from __future__ import annotations

import asyncio
import logging
from uuid import UUID

from starwars.domain import Episode, Page
from starwars.exceptions import EpisodeCreateFailedError, EpisodeNotFoundError
from starwars.metrics import CATALOG_QUERY_SECONDS
from starwars.repositories import EpisodeCreateData, EpisodeRepository, SearchQueryOptions
from starwars.schemas.episode import EpisodeCreate
from starwars.services.pagination import build_pagination, normalize_limit, normalize_page

logger = logging.getLogger(__name__)


class EpisodeService:
    def __init__(self, episode_repo: EpisodeRepository) -> None:
        self.episode_repo = episode_repo

    async def create_episode(self, payload: EpisodeCreate) -> Episode:
        episode = await self.episode_repo.create(
            EpisodeCreateData(
                name=payload.name,
                code=payload.code,
                release_date=payload.release_date,
            )
        )
        if episode is None:
            raise EpisodeCreateFailedError()
        logger.info("Episode created", extra={"episode_id": str(episode.id)})
        return episode

    async def find_episodes(
        self,
        page: int | None = None,
        limit: int | None = None,
        search: str | None = None,
    ) -> Page[Episode]:
        options = SearchQueryOptions(
            page=normalize_page(page),
            limit=normalize_limit(limit),
            search=search,
        )
        with CATALOG_QUERY_SECONDS.labels(resource="episodes").time():
            episodes, total = await asyncio.gather(
                self.episode_repo.find_many(options),
                self.episode_repo.count_total(options.search),
            )
        return Page(
            items=list(episodes),
            pagination=build_pagination(options.page, options.limit, total),
        )

    async def find_episode_by_id(self, episode_id: UUID) -> Episode:
        episode = await self.episode_repo.find_by_id(episode_id)
        if episode is None:
            logger.info("Episode not found", extra={"episode_id": str(episode_id)})
            raise EpisodeNotFoundError(episode_id)
        return episode

    async def delete_episode(self, episode_id: UUID) -> None:
        await self.find_episode_by_id(episode_id)
        await self.episode_repo.delete(episode_id)
        logger.info("Episode deleted", extra={"episode_id": str(episode_id)})
