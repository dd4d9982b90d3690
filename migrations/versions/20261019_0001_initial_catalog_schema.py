"""Initial catalog schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

Tables: planets, episodes, characters, character_episodes
"""

from typing import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "planets",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_planets"),
        sa.UniqueConstraint("name", name="uq_planets_name"),
    )

    op.create_table(
        "episodes",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("release_date", sa.Date(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_episodes"),
        sa.UniqueConstraint("name", name="uq_episodes_name"),
        sa.UniqueConstraint("code", name="uq_episodes_code"),
    )

    op.create_table(
        "characters",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("planet_id", postgresql.UUID(as_uuid=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_characters"),
        sa.UniqueConstraint("name", name="uq_characters_name"),
        sa.ForeignKeyConstraint(
            ["planet_id"],
            ["planets.id"],
            name="fk_characters_planet_id_planets",
            ondelete="SET NULL",
        ),
    )
    op.create_index("ix_characters_planet_id", "characters", ["planet_id"])

    op.create_table(
        "character_episodes",
        sa.Column("character_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("episode_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.PrimaryKeyConstraint("character_id", "episode_id", name="pk_character_episodes"),
        sa.ForeignKeyConstraint(
            ["character_id"],
            ["characters.id"],
            name="fk_character_episodes_character_id_characters",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["episode_id"],
            ["episodes.id"],
            name="fk_character_episodes_episode_id_episodes",
            ondelete="CASCADE",
        ),
    )
    op.create_index(
        "ix_character_episodes_episode_id",
        "character_episodes",
        ["episode_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_character_episodes_episode_id", table_name="character_episodes")
    op.drop_table("character_episodes")
    op.drop_index("ix_characters_planet_id", table_name="characters")
    op.drop_table("characters")
    op.drop_table("episodes")
    op.drop_table("planets")
