"""Integration tests for the SQLAlchemy repositories on real PostgreSQL."""

from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from starwars.exceptions import CharacterNotFoundError
from starwars.repositories import (
    CharacterCreateData,
    CharacterFilters,
    CharacterQueryOptions,
    EpisodeCreateData,
    SearchQueryOptions,
)
from starwars.schemas import CharacterCreate, CharacterListQuery, CharacterUpdate

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_create_and_find_character(repositories):
    character_repo, planet_repo, _ = repositories
    planet = await planet_repo.create("Tatooine")

    created = await character_repo.create(
        CharacterCreateData(name="Luke Skywalker", planet_id=planet.id)
    )
    found = await character_repo.find_by_id(created.id)

    assert found == created
    assert found.planet_id == planet.id
    assert found.created_at is not None


async def test_duplicate_name_raises_integrity_error(repositories):
    character_repo, _, _ = repositories
    await character_repo.create(CharacterCreateData(name="Han Solo"))

    with pytest.raises(IntegrityError):
        await character_repo.create(CharacterCreateData(name="Han Solo"))


async def test_unknown_planet_raises_integrity_error(repositories):
    character_repo, _, _ = repositories

    with pytest.raises(IntegrityError):
        await character_repo.create(CharacterCreateData(name="Rey", planet_id=uuid4()))


async def test_search_is_case_insensitive_and_literal(repositories):
    character_repo, _, _ = repositories
    for name in ("Luke Skywalker", "Anakin Skywalker", "Leia Organa", "R2_D2"):
        await character_repo.create(CharacterCreateData(name=name))

    skywalkers = await character_repo.find_many(CharacterQueryOptions(search="SKY"))
    underscore = await character_repo.find_many(CharacterQueryOptions(search="_"))

    assert {c.name for c in skywalkers} == {"Luke Skywalker", "Anakin Skywalker"}
    assert [c.name for c in underscore] == ["R2_D2"]
    assert await character_repo.count_total(CharacterFilters(search="sky")) == 2


async def test_planet_filter_and_pagination(repositories):
    character_repo, planet_repo, _ = repositories
    naboo = await planet_repo.create("Naboo")
    for index in range(5):
        await character_repo.create(
            CharacterCreateData(name=f"Gungan {index}", planet_id=naboo.id)
        )
    await character_repo.create(CharacterCreateData(name="Wilhuff Tarkin"))

    first = await character_repo.find_many(
        CharacterQueryOptions(page=1, limit=2, planet_id=naboo.id)
    )
    third = await character_repo.find_many(
        CharacterQueryOptions(page=3, limit=2, planet_id=naboo.id)
    )

    assert len(first) == 2
    assert len(third) == 1
    assert await character_repo.count_total(CharacterFilters(planet_id=naboo.id)) == 5
    assert await character_repo.count_total(CharacterFilters()) == 6


async def test_find_with_planet_outcomes(repositories):
    character_repo, planet_repo, _ = repositories
    alderaan = await planet_repo.create("Alderaan")
    leia = await character_repo.create(CharacterCreateData(name="Leia", planet_id=alderaan.id))
    tarkin = await character_repo.create(CharacterCreateData(name="Tarkin"))

    with_planet = await character_repo.find_with_planet(leia.id)
    without_planet = await character_repo.find_with_planet(tarkin.id)

    assert with_planet.planet.name == "Alderaan"
    assert without_planet is not None
    assert without_planet.planet is None
    assert await character_repo.find_with_planet(uuid4()) is None


async def test_update_refreshes_timestamp_and_clears_planet(repositories):
    character_repo, planet_repo, _ = repositories
    hoth = await planet_repo.create("Hoth")
    luke = await character_repo.create(CharacterCreateData(name="Luke", planet_id=hoth.id))

    updated = await character_repo.update(luke.id, {"planet_id": None})

    assert updated.name == "Luke"
    assert updated.planet_id is None
    assert updated.created_at == luke.created_at
    assert updated.updated_at > luke.updated_at
    assert await character_repo.update(uuid4(), {"name": "Nobody"}) is None


async def test_name_only_update_keeps_planet_and_created_at(repositories):
    character_repo, planet_repo, _ = repositories
    endor = await planet_repo.create("Endor")
    wicket = await character_repo.create(CharacterCreateData(name="Wicket", planet_id=endor.id))

    renamed = await character_repo.update(wicket.id, {"name": "Wicket W. Warrick"})
    reloaded = await character_repo.find_by_id(wicket.id)

    assert renamed.name == "Wicket W. Warrick"
    assert renamed.planet_id == endor.id
    assert renamed.created_at == wicket.created_at
    assert renamed.updated_at > wicket.updated_at
    assert reloaded == renamed


async def test_deleting_planet_orphans_characters(repositories):
    character_repo, planet_repo, _ = repositories
    mustafar = await planet_repo.create("Mustafar")
    vader = await character_repo.create(CharacterCreateData(name="Vader", planet_id=mustafar.id))

    await planet_repo.delete(mustafar.id)

    assert (await character_repo.find_by_id(vader.id)).planet_id is None


async def test_episode_links_are_idempotent(repositories):
    character_repo, _, episode_repo = repositories
    luke = await character_repo.create(CharacterCreateData(name="Luke"))
    empire = await episode_repo.create(
        EpisodeCreateData(
            name="The Empire Strikes Back", code="EMPIRE", release_date=date(1980, 5, 21)
        )
    )
    hope = await episode_repo.create(
        EpisodeCreateData(name="A New Hope", code="NEWHOPE", release_date=date(1977, 5, 25))
    )

    await character_repo.link_episode(luke.id, empire.id)
    await character_repo.link_episode(luke.id, hope.id)
    await character_repo.link_episode(luke.id, hope.id)

    episodes = await character_repo.list_episodes(luke.id)
    assert [e.code for e in episodes] == ["NEWHOPE", "EMPIRE"]

    await character_repo.unlink_episode(luke.id, hope.id)
    await character_repo.unlink_episode(luke.id, hope.id)
    assert [e.code for e in await character_repo.list_episodes(luke.id)] == ["EMPIRE"]


async def test_episode_search_matches_code(repositories):
    _, _, episode_repo = repositories
    await episode_repo.create(EpisodeCreateData(name="Return of the Jedi", code="JEDI"))
    await episode_repo.create(EpisodeCreateData(name="The Phantom Menace", code="PHANTOM"))

    found = await episode_repo.find_many(SearchQueryOptions(search="phant"))

    assert [e.name for e in found] == ["The Phantom Menace"]
    assert await episode_repo.count_total("jedi") == 1


async def test_service_flow(character_service):
    created = await character_service.create_character(CharacterCreate(name="Yoda"))

    page = await character_service.find_characters(CharacterListQuery(limit=500))
    assert page.pagination.limit == 100
    assert page.pagination.total == 1

    renamed = await character_service.update_character(
        created.id, CharacterUpdate(name="Master Yoda")
    )
    assert renamed.name == "Master Yoda"

    await character_service.delete_character(created.id)
    with pytest.raises(CharacterNotFoundError):
        await character_service.find_character_by_id(created.id)
