"""Pytest configuration for the catalog service tests."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID, uuid4

import pytest

# Disable tracing for tests
os.environ["STARWARS_OTEL_ENABLED"] = "false"
os.environ.setdefault("LOG_FORMAT", "text")

FIXED_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeSessionFactory:
    """Stands in for async_sessionmaker; every call yields the same mock session."""

    def __init__(self, result=None) -> None:
        self.session = MagicMock()
        self.session.execute = AsyncMock(
            return_value=result if result is not None else MagicMock()
        )
        self.session.commit = AsyncMock()
        self.opened = 0

    def __call__(self):
        self.opened += 1
        return self

    async def __aenter__(self):
        return self.session

    async def __aexit__(self, exc_type, exc, tb):
        return False

    @property
    def statement(self):
        """The last statement passed to session.execute."""
        return self.session.execute.call_args.args[0]


@pytest.fixture
def session_factory() -> FakeSessionFactory:
    return FakeSessionFactory()


@pytest.fixture
def character_row():
    """Factory for ORM-like character rows."""

    def _create(name: str = "Luke Skywalker", planet_id: UUID | None = None):
        return SimpleNamespace(
            id=uuid4(),
            name=name,
            planet_id=planet_id,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )

    return _create


@pytest.fixture
def character_entity():
    """Factory for domain Character records."""
    from starwars.domain import Character

    def _create(name: str = "Luke Skywalker", planet_id: UUID | None = None, **kwargs):
        return Character(
            id=kwargs.get("id", uuid4()),
            name=name,
            planet_id=planet_id,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )

    return _create


@pytest.fixture
def planet_entity():
    from starwars.domain import Planet

    def _create(name: str = "Tatooine"):
        return Planet(id=uuid4(), name=name, created_at=FIXED_NOW, updated_at=FIXED_NOW)

    return _create


@pytest.fixture
def episode_entity():
    from starwars.domain import Episode

    def _create(name: str = "A New Hope", code: str = "NEWHOPE", release_date=None):
        return Episode(
            id=uuid4(),
            name=name,
            code=code,
            release_date=release_date,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )

    return _create


# Note: E2E fixtures are in tests/e2e/conftest.py
