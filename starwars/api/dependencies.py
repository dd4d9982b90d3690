"""Dependency injection for the HTTP layer.

Repositories receive the shared session factory, not a request-scoped
session: each repository call opens its own session so a service may run
reads concurrently.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from starwars.database.session import async_session_factory
from starwars.repositories import (
    CharacterRepository,
    EpisodeRepository,
    PlanetRepository,
    SqlaCharacterRepository,
    SqlaEpisodeRepository,
    SqlaPlanetRepository,
)
from starwars.services import CharacterService, EpisodeService, PlanetService


def get_character_repository() -> CharacterRepository:
    return SqlaCharacterRepository(async_session_factory)


def get_planet_repository() -> PlanetRepository:
    return SqlaPlanetRepository(async_session_factory)


def get_episode_repository() -> EpisodeRepository:
    return SqlaEpisodeRepository(async_session_factory)


def get_character_service(
    character_repo: Annotated[CharacterRepository, Depends(get_character_repository)],
    episode_repo: Annotated[EpisodeRepository, Depends(get_episode_repository)],
) -> CharacterService:
    return CharacterService(character_repo, episode_repo)


def get_planet_service(
    planet_repo: Annotated[PlanetRepository, Depends(get_planet_repository)],
) -> PlanetService:
    return PlanetService(planet_repo)


def get_episode_service(
    episode_repo: Annotated[EpisodeRepository, Depends(get_episode_repository)],
) -> EpisodeService:
    return EpisodeService(episode_repo)


CharacterServiceDep = Annotated[CharacterService, Depends(get_character_service)]
PlanetServiceDep = Annotated[PlanetService, Depends(get_planet_service)]
EpisodeServiceDep = Annotated[EpisodeService, Depends(get_episode_service)]
