from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from starwars.core import get_settings
from starwars.core.tracing import instrument_sqlalchemy

logger = logging.getLogger(__name__)

settings = get_settings()

engine = create_async_engine(
    settings.database_url,
    **settings.get_engine_kwargs(),
)

logger.info(
    "Database engine created",
    extra={"database_url": settings.database_url, "pool_size": settings.db_pool_size},
)

# One span per statement when tracing is on
instrument_sqlalchemy(engine.sync_engine)

async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    async with async_session_factory() as session:
        yield session


async def dispose_engine() -> None:
    await engine.dispose()
