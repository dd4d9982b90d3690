from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, delete, func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from starwars.domain import Character, CharacterWithPlanet, Episode, PlanetRef
from starwars.models import Character as CharacterModel
from starwars.models import CharacterEpisode
from starwars.models import Episode as EpisodeModel
from starwars.models import Planet as PlanetModel
from starwars.repositories.mappers import character_model_to_entity, episode_model_to_entity
from starwars.repositories.ports import (
    CharacterCreateData,
    CharacterFilters,
    CharacterQueryOptions,
    CharacterRepository,
)
from starwars.repositories.predicates import PredicateBuilder

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"name", "planet_id"})


class SqlaCharacterRepository(CharacterRepository):
    """SQLAlchemy adapter for the character port.

    Each call opens a short-lived session from the shared factory, so two
    reads issued together (page + count) run on separate connections.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @staticmethod
    def _filter_predicate(filters: CharacterFilters) -> ColumnElement[bool]:
        return (
            PredicateBuilder()
            .contains(CharacterModel.name, term=filters.search)
            .equals(CharacterModel.planet_id, filters.planet_id)
            .build()
        )

    async def find_by_id(self, character_id: UUID) -> Character | None:
        stmt = select(CharacterModel).where(CharacterModel.id == character_id).limit(1)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
        return character_model_to_entity(model) if model else None

    async def find_many(self, options: CharacterQueryOptions) -> Sequence[Character]:
        stmt = (
            select(CharacterModel)
            .where(self._filter_predicate(options.filters))
            .order_by(CharacterModel.created_at, CharacterModel.id)
            .limit(options.limit)
            .offset(options.offset)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()
        return [character_model_to_entity(model) for model in models]

    async def count_total(self, filters: CharacterFilters) -> int:
        stmt = (
            select(func.count())
            .select_from(CharacterModel)
            .where(self._filter_predicate(filters))
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            total = result.scalar_one_or_none()
        return int(total or 0)

    async def find_with_planet(self, character_id: UUID) -> CharacterWithPlanet | None:
        stmt = (
            select(
                CharacterModel,
                PlanetModel.id.label("planet_ref_id"),
                PlanetModel.name.label("planet_ref_name"),
            )
            .outerjoin(PlanetModel, CharacterModel.planet_id == PlanetModel.id)
            .where(CharacterModel.id == character_id)
            .limit(1)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            row = result.first()

        if row is None:
            return None

        model, planet_ref_id, planet_ref_name = row
        planet = (
            PlanetRef(id=planet_ref_id, name=planet_ref_name)
            if planet_ref_id is not None
            else None
        )
        return CharacterWithPlanet(
            id=model.id,
            name=model.name,
            planet_id=model.planet_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            planet=planet,
        )

    async def create(self, data: CharacterCreateData) -> Character | None:
        stmt = (
            insert(CharacterModel)
            .values(name=data.name, planet_id=data.planet_id)
            .returning(CharacterModel)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            await session.commit()

        if model is None:
            return None
        logger.debug("Inserted character", extra={"character_id": str(model.id)})
        return character_model_to_entity(model)

    async def update(
        self, character_id: UUID, changes: Mapping[str, Any]
    ) -> Character | None:
        values = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
        stmt = (
            update(CharacterModel)
            .where(CharacterModel.id == character_id)
            .values(**values, updated_at=func.now())
            .returning(CharacterModel)
            .execution_options(synchronize_session=False)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            await session.commit()

        if model is None:
            return None
        logger.debug(
            "Updated character",
            extra={"character_id": str(character_id), "fields": sorted(values)},
        )
        return character_model_to_entity(model)

    async def delete(self, character_id: UUID) -> None:
        stmt = delete(CharacterModel).where(CharacterModel.id == character_id)
        async with self._session_factory() as session:
            await session.execute(stmt)
            await session.commit()
        logger.debug("Deleted character", extra={"character_id": str(character_id)})

    async def list_episodes(self, character_id: UUID) -> Sequence[Episode]:
        stmt = (
            select(EpisodeModel)
            .join(CharacterEpisode, CharacterEpisode.episode_id == EpisodeModel.id)
            .where(CharacterEpisode.character_id == character_id)
            .order_by(EpisodeModel.release_date.asc().nulls_last(), EpisodeModel.name)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()
        return [episode_model_to_entity(model) for model in models]

    async def link_episode(self, character_id: UUID, episode_id: UUID) -> None:
        stmt = (
            pg_insert(CharacterEpisode)
            .values(character_id=character_id, episode_id=episode_id)
            .on_conflict_do_nothing(
                index_elements=[CharacterEpisode.character_id, CharacterEpisode.episode_id]
            )
        )
        async with self._session_factory() as session:
            await session.execute(stmt)
            await session.commit()

    async def unlink_episode(self, character_id: UUID, episode_id: UUID) -> None:
        stmt = delete(CharacterEpisode).where(
            CharacterEpisode.character_id == character_id,
            CharacterEpisode.episode_id == episode_id,
        )
        async with self._session_factory() as session:
            await session.execute(stmt)
            await session.commit()
