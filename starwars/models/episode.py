from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, String, func, text
from sqlalchemy.orm import Mapped, mapped_column

from starwars.core.constants import MAX_EPISODE_CODE_LENGTH, MAX_NAME_LENGTH
from starwars.database.base import Base


class Episode(Base):
    """A film in the saga."""

    __tablename__ = "episodes"

    id: Mapped[UUID] = mapped_column(
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    )
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), unique=True, nullable=False)
    code: Mapped[str] = mapped_column(
        String(MAX_EPISODE_CODE_LENGTH), unique=True, nullable=False
    )
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class CharacterEpisode(Base):
    """Association row: a character appears in an episode.

    The pair is the primary key, so a character is linked to an episode at
    most once.
    """

    __tablename__ = "character_episodes"

    character_id: Mapped[UUID] = mapped_column(
        ForeignKey("characters.id", ondelete="CASCADE"),
        primary_key=True,
    )
    episode_id: Mapped[UUID] = mapped_column(
        ForeignKey("episodes.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
