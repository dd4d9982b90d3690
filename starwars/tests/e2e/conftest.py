"""Pytest configuration for E2E tests.

The FastAPI app runs in-process behind httpx.ASGITransport; service
dependencies are replaced with AsyncMocks so no database is needed.

Run:
    pytest starwars/tests/e2e/ -v
"""

from __future__ import annotations

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

pytest_asyncio = pytest.importorskip("pytest_asyncio")

os.environ["STARWARS_OTEL_ENABLED"] = "false"


@pytest.fixture
def mock_character_service():
    from starwars.services import CharacterService

    return AsyncMock(spec=CharacterService)


@pytest.fixture
def mock_planet_service():
    from starwars.services import PlanetService

    return AsyncMock(spec=PlanetService)


@pytest.fixture
def mock_episode_service():
    from starwars.services import EpisodeService

    return AsyncMock(spec=EpisodeService)


@pytest.fixture
def mock_db_session():
    session = MagicMock()
    session.execute = AsyncMock()
    return session


@pytest_asyncio.fixture
async def app(mock_character_service, mock_planet_service, mock_episode_service, mock_db_session):
    """Create FastAPI app for E2E testing."""
    from starwars.api.dependencies import (
        get_character_service,
        get_episode_service,
        get_planet_service,
    )
    from starwars.database.session import get_db_session
    from starwars.main import create_app

    async def _db_session():
        yield mock_db_session

    test_app = create_app()
    test_app.dependency_overrides[get_character_service] = lambda: mock_character_service
    test_app.dependency_overrides[get_planet_service] = lambda: mock_planet_service
    test_app.dependency_overrides[get_episode_service] = lambda: mock_episode_service
    test_app.dependency_overrides[get_db_session] = _db_session
    yield test_app
    test_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    """Async HTTP client for E2E tests."""
    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
