"""Tests for PlanetService and EpisodeService."""

from __future__ import annotations

from datetime import date
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from starwars.exceptions import (
    EpisodeCreateFailedError,
    EpisodeNotFoundError,
    PlanetCreateFailedError,
    PlanetNotFoundError,
)
from starwars.repositories import EpisodeRepository, PlanetRepository
from starwars.schemas import EpisodeCreate, PlanetCreate
from starwars.services import EpisodeService, PlanetService


@pytest.fixture
def planet_repo():
    return AsyncMock(spec=PlanetRepository)


@pytest.fixture
def episode_repo():
    return AsyncMock(spec=EpisodeRepository)


class TestPlanetService:
    @pytest.mark.asyncio
    async def test_find_planets_applies_defaults(self, planet_repo, planet_entity):
        planet_repo.find_many.return_value = [planet_entity()]
        planet_repo.count_total.return_value = 1

        page = await PlanetService(planet_repo).find_planets()

        options = planet_repo.find_many.await_args.args[0]
        assert (options.page, options.limit) == (1, 10)
        assert page.pagination.total_pages == 1

    @pytest.mark.asyncio
    async def test_find_planets_clamps_limit_and_shares_search(self, planet_repo):
        planet_repo.find_many.return_value = []
        planet_repo.count_total.return_value = 0

        page = await PlanetService(planet_repo).find_planets(limit=1000, search="too")

        assert planet_repo.find_many.await_args.args[0].limit == 100
        planet_repo.count_total.assert_awaited_once_with("too")
        assert page.pagination.limit == 100

    @pytest.mark.asyncio
    async def test_create_failure(self, planet_repo):
        planet_repo.create.return_value = None

        with pytest.raises(PlanetCreateFailedError):
            await PlanetService(planet_repo).create_planet(PlanetCreate(name="Hoth"))

    @pytest.mark.asyncio
    async def test_not_found(self, planet_repo):
        planet_repo.find_by_id.return_value = None

        with pytest.raises(PlanetNotFoundError):
            await PlanetService(planet_repo).find_planet_by_id(uuid4())

    @pytest.mark.asyncio
    async def test_delete_checks_existence(self, planet_repo):
        planet_repo.find_by_id.return_value = None

        with pytest.raises(PlanetNotFoundError):
            await PlanetService(planet_repo).delete_planet(uuid4())

        planet_repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete(self, planet_repo, planet_entity):
        planet = planet_entity()
        planet_repo.find_by_id.return_value = planet

        await PlanetService(planet_repo).delete_planet(planet.id)

        planet_repo.delete.assert_awaited_once_with(planet.id)


class TestEpisodeService:
    @pytest.mark.asyncio
    async def test_create_forwards_fields(self, episode_repo, episode_entity):
        episode_repo.create.return_value = episode_entity()

        await EpisodeService(episode_repo).create_episode(
            EpisodeCreate(name="A New Hope", code="NEWHOPE", release_date=date(1977, 5, 25))
        )

        data = episode_repo.create.await_args.args[0]
        assert data.code == "NEWHOPE"
        assert data.release_date == date(1977, 5, 25)

    @pytest.mark.asyncio
    async def test_create_failure(self, episode_repo):
        episode_repo.create.return_value = None

        with pytest.raises(EpisodeCreateFailedError):
            await EpisodeService(episode_repo).create_episode(
                EpisodeCreate(name="A New Hope", code="NEWHOPE")
            )

    @pytest.mark.asyncio
    async def test_find_episodes_pagination(self, episode_repo, episode_entity):
        episode_repo.find_many.return_value = [episode_entity()]
        episode_repo.count_total.return_value = 9

        page = await EpisodeService(episode_repo).find_episodes(page=2, limit=4)

        assert page.pagination.page == 2
        assert page.pagination.total_pages == 3
        assert episode_repo.find_many.await_args.args[0].offset == 4

    @pytest.mark.asyncio
    async def test_delete_missing(self, episode_repo):
        episode_repo.find_by_id.return_value = None

        with pytest.raises(EpisodeNotFoundError):
            await EpisodeService(episode_repo).delete_episode(uuid4())

        episode_repo.delete.assert_not_awaited()
