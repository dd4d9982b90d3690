from __future__ import annotations

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from starwars.domain import Episode
from starwars.models import Episode as EpisodeModel
from starwars.repositories.mappers import episode_model_to_entity
from starwars.repositories.ports import (
    EpisodeCreateData,
    EpisodeRepository,
    SearchQueryOptions,
)
from starwars.repositories.predicates import PredicateBuilder

logger = logging.getLogger(__name__)


class SqlaEpisodeRepository(EpisodeRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @staticmethod
    def _filter_predicate(search: str | None) -> ColumnElement[bool]:
        # name OR code, so "jedi" finds both titles and codes
        return (
            PredicateBuilder()
            .contains(EpisodeModel.name, EpisodeModel.code, term=search)
            .build()
        )

    async def find_by_id(self, episode_id: UUID) -> Episode | None:
        stmt = select(EpisodeModel).where(EpisodeModel.id == episode_id).limit(1)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
        return episode_model_to_entity(model) if model else None

    async def find_many(self, options: SearchQueryOptions) -> Sequence[Episode]:
        stmt = (
            select(EpisodeModel)
            .where(self._filter_predicate(options.search))
            .order_by(EpisodeModel.release_date.asc().nulls_last(), EpisodeModel.id)
            .limit(options.limit)
            .offset(options.offset)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()
        return [episode_model_to_entity(model) for model in models]

    async def count_total(self, search: str | None = None) -> int:
        stmt = (
            select(func.count())
            .select_from(EpisodeModel)
            .where(self._filter_predicate(search))
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            total = result.scalar_one_or_none()
        return int(total or 0)

    async def create(self, data: EpisodeCreateData) -> Episode | None:
        stmt = (
            insert(EpisodeModel)
            .values(name=data.name, code=data.code, release_date=data.release_date)
            .returning(EpisodeModel)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            await session.commit()

        if model is None:
            return None
        logger.debug("Inserted episode", extra={"episode_id": str(model.id)})
        return episode_model_to_entity(model)

    async def delete(self, episode_id: UUID) -> None:
        stmt = delete(EpisodeModel).where(EpisodeModel.id == episode_id)
        async with self._session_factory() as session:
            await session.execute(stmt)
            await session.commit()
