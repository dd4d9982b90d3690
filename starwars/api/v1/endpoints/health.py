"""Health and readiness endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from starwars.core.constants import SERVICE_NAME
from starwars.database.session import get_db_session

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness(session: Annotated[AsyncSession, Depends(get_db_session)]) -> dict[str, str]:
    """Ready once the database answers."""
    await session.execute(text("SELECT 1"))
    return {"status": "ready", "service": SERVICE_NAME}
