"""Alembic environment for the Star Wars catalog.

Usage:
    alembic upgrade head
    alembic revision --autogenerate -m "add column"
    alembic downgrade -1
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from starwars.core.config import get_settings
from starwars.database.base import Base
from starwars.models import Character, CharacterEpisode, Episode, Planet

# Register every table on Base.metadata
_ = Character, CharacterEpisode, Episode, Planet

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def get_url() -> str:
    """Database URL with the sync driver; Alembic runs synchronously."""
    url = get_settings().database_url
    if url.startswith("postgresql+asyncpg://"):
        url = url.replace("postgresql+asyncpg://", "postgresql://")
    return url


def run_migrations_offline() -> None:
    """Emit SQL without a database connection."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(get_url(), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            compare_server_default=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
