from __future__ import annotations

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from starwars.domain import Planet
from starwars.models import Planet as PlanetModel
from starwars.repositories.mappers import planet_model_to_entity
from starwars.repositories.ports import PlanetRepository, SearchQueryOptions
from starwars.repositories.predicates import PredicateBuilder

logger = logging.getLogger(__name__)


class SqlaPlanetRepository(PlanetRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @staticmethod
    def _filter_predicate(search: str | None) -> ColumnElement[bool]:
        return PredicateBuilder().contains(PlanetModel.name, term=search).build()

    async def find_by_id(self, planet_id: UUID) -> Planet | None:
        stmt = select(PlanetModel).where(PlanetModel.id == planet_id).limit(1)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
        return planet_model_to_entity(model) if model else None

    async def find_many(self, options: SearchQueryOptions) -> Sequence[Planet]:
        stmt = (
            select(PlanetModel)
            .where(self._filter_predicate(options.search))
            .order_by(PlanetModel.name, PlanetModel.id)
            .limit(options.limit)
            .offset(options.offset)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()
        return [planet_model_to_entity(model) for model in models]

    async def count_total(self, search: str | None = None) -> int:
        stmt = select(func.count()).select_from(PlanetModel).where(self._filter_predicate(search))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            total = result.scalar_one_or_none()
        return int(total or 0)

    async def create(self, name: str) -> Planet | None:
        stmt = insert(PlanetModel).values(name=name).returning(PlanetModel)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            await session.commit()

        if model is None:
            return None
        logger.debug("Inserted planet", extra={"planet_id": str(model.id)})
        return planet_model_to_entity(model)

    async def delete(self, planet_id: UUID) -> None:
        stmt = delete(PlanetModel).where(PlanetModel.id == planet_id)
        async with self._session_factory() as session:
            await session.execute(stmt)
            await session.commit()
