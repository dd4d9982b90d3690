"""Seed the catalog with Star Wars planets, episodes and characters.

    python -m starwars.jobs.seed_database [--database-url URL] [--reset]

Rows are upserted by their unique name (episodes by code), so running the
job twice leaves the same data behind. Character planets and episode links
that name an unknown planet or episode are skipped.
"""

from __future__ import annotations

import argparse
import asyncio
from datetime import date
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine

from starwars.core.config import get_settings
from starwars.models import Character, CharacterEpisode, Episode, Planet

PLANETS = [
    "Tatooine",
    "Alderaan",
    "Coruscant",
    "Hoth",
    "Endor",
    "Naboo",
    "Kamino",
    "Geonosis",
    "Mustafar",
    "Dagobah",
]

EPISODES = [
    ("The Phantom Menace", "PHANTOM", date(1999, 5, 19)),
    ("Attack of the Clones", "CLONES", date(2002, 5, 16)),
    ("Revenge of the Sith", "SITH", date(2005, 5, 19)),
    ("A New Hope", "NEWHOPE", date(1977, 5, 25)),
    ("The Empire Strikes Back", "EMPIRE", date(1980, 5, 21)),
    ("Return of the Jedi", "JEDI", date(1983, 5, 25)),
    ("The Force Awakens", "AWAKENS", date(2015, 12, 18)),
    ("The Last Jedi", "LASTJEDI", date(2017, 12, 15)),
    ("The Rise of Skywalker", "SKYWALKER", date(2019, 12, 20)),
]

# (character name, home planet name or None)
CHARACTERS = [
    ("Luke Skywalker", "Tatooine"),
    ("Darth Vader", "Tatooine"),
    ("Han Solo", "Corellia"),
    ("Leia Organa", "Alderaan"),
    ("Wilhuff Tarkin", None),
    ("C-3PO", "Tatooine"),
    ("R2-D2", "Naboo"),
    ("Obi-Wan Kenobi", "Coruscant"),
    ("Padmé Amidala", "Naboo"),
    ("Anakin Skywalker", "Tatooine"),
]

ORIGINAL_TRILOGY = ("NEWHOPE", "EMPIRE", "JEDI")
PREQUEL_TRILOGY = ("PHANTOM", "CLONES", "SITH")

APPEARANCES = {
    "Luke Skywalker": ORIGINAL_TRILOGY,
    "Darth Vader": ("SITH", *ORIGINAL_TRILOGY),
    "Han Solo": ORIGINAL_TRILOGY,
    "Leia Organa": ORIGINAL_TRILOGY,
    "Wilhuff Tarkin": ("NEWHOPE",),
    "C-3PO": PREQUEL_TRILOGY + ORIGINAL_TRILOGY,
    "R2-D2": PREQUEL_TRILOGY + ORIGINAL_TRILOGY,
    "Obi-Wan Kenobi": (*PREQUEL_TRILOGY, "NEWHOPE"),
    "Padmé Amidala": PREQUEL_TRILOGY,
    "Anakin Skywalker": PREQUEL_TRILOGY,
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed the Star Wars catalog into Postgres",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--database-url",
        help="Override STARWARS_DATABASE_URL",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete all catalog rows before seeding",
    )
    return parser.parse_args()


def build_character_rows(planet_ids: dict[str, UUID]) -> list[dict]:
    return [
        {"name": name, "planet_id": planet_ids.get(planet) if planet else None}
        for name, planet in CHARACTERS
    ]


def build_link_rows(
    character_ids: dict[str, UUID],
    episode_ids: dict[str, UUID],
) -> list[dict]:
    rows = []
    for character_name, codes in APPEARANCES.items():
        character_id = character_ids.get(character_name)
        if character_id is None:
            continue
        for code in codes:
            episode_id = episode_ids.get(code)
            if episode_id is not None:
                rows.append({"character_id": character_id, "episode_id": episode_id})
    return rows


async def reset_catalog(conn: AsyncConnection) -> None:
    for model in (CharacterEpisode, Character, Planet, Episode):
        await conn.execute(delete(model))


async def _lookup(conn: AsyncConnection, model, key_column, names) -> dict[str, UUID]:
    result = await conn.execute(select(key_column, model.id).where(key_column.in_(names)))
    return {key: row_id for key, row_id in result.all()}


async def seed(conn: AsyncConnection) -> dict[str, int]:
    await conn.execute(
        insert(Planet)
        .values([{"name": name} for name in PLANETS])
        .on_conflict_do_nothing(index_elements=[Planet.name])
    )
    planet_ids = await _lookup(conn, Planet, Planet.name, PLANETS)

    await conn.execute(
        insert(Episode)
        .values(
            [
                {"name": name, "code": code, "release_date": release_date}
                for name, code, release_date in EPISODES
            ]
        )
        .on_conflict_do_nothing(index_elements=[Episode.code])
    )
    episode_ids = await _lookup(conn, Episode, Episode.code, [code for _, code, _ in EPISODES])

    character_rows = build_character_rows(planet_ids)
    stmt = insert(Character).values(character_rows)
    await conn.execute(
        stmt.on_conflict_do_update(
            index_elements=[Character.name],
            set_={"planet_id": stmt.excluded.planet_id},
        )
    )
    character_ids = await _lookup(conn, Character, Character.name, [name for name, _ in CHARACTERS])

    link_rows = build_link_rows(character_ids, episode_ids)
    if link_rows:
        await conn.execute(insert(CharacterEpisode).values(link_rows).on_conflict_do_nothing())

    return {
        "planets": len(planet_ids),
        "episodes": len(episode_ids),
        "characters": len(character_ids),
        "links": len(link_rows),
    }


async def main() -> None:
    args = parse_args()
    database_url = args.database_url or get_settings().database_url

    engine = create_async_engine(database_url, echo=False, pool_pre_ping=True)
    try:
        async with engine.begin() as conn:
            if args.reset:
                await reset_catalog(conn)
                print("Cleared existing catalog rows")
            summary = await seed(conn)
    finally:
        await engine.dispose()

    print(
        "Seeded {planets} planets, {episodes} episodes, {characters} characters, "
        "{links} character-episode links".format(**summary)
    )


if __name__ == "__main__":
    asyncio.run(main())
