from __future__ import annotations

import asyncio
import logging
from uuid import UUID

from starwars.domain import Page, Planet
from starwars.exceptions import PlanetCreateFailedError, PlanetNotFoundError
from starwars.metrics import CATALOG_QUERY_SECONDS
from starwars.repositories import PlanetRepository, SearchQueryOptions
from starwars.schemas.planet import PlanetCreate
from starwars.services.pagination import build_pagination, normalize_limit, normalize_page

logger = logging.getLogger(__name__)


class PlanetService:
    def __init__(self, planet_repo: PlanetRepository) -> None:
        self.planet_repo = planet_repo

    async def create_planet(self, payload: PlanetCreate) -> Planet:
        planet = await self.planet_repo.create(payload.name)
        if planet is None:
            raise PlanetCreateFailedError()
        logger.info("Planet created", extra={"planet_id": str(planet.id)})
        return planet

    async def find_planets(
        self,
        page: int | None = None,
        limit: int | None = None,
        search: str | None = None,
    ) -> Page[Planet]:
        options = SearchQueryOptions(
            page=normalize_page(page),
            limit=normalize_limit(limit),
            search=search,
        )
        with CATALOG_QUERY_SECONDS.labels(resource="planets").time():
            planets, total = await asyncio.gather(
                self.planet_repo.find_many(options),
                self.planet_repo.count_total(options.search),
            )
        return Page(
            items=list(planets),
            pagination=build_pagination(options.page, options.limit, total),
        )

    async def find_planet_by_id(self, planet_id: UUID) -> Planet:
        planet = await self.planet_repo.find_by_id(planet_id)
        if planet is None:
            logger.info("Planet not found", extra={"planet_id": str(planet_id)})
            raise PlanetNotFoundError(planet_id)
        return planet

    async def delete_planet(self, planet_id: UUID) -> None:
        """Delete a planet; its characters keep existing without a planet."""
        await self.find_planet_by_id(planet_id)
        await self.planet_repo.delete(planet_id)
        logger.info("Planet deleted", extra={"planet_id": str(planet_id)})
