"""ORM row → domain record conversions."""

from starwars.domain import Character, Episode, Planet
from starwars.models import Character as CharacterModel
from starwars.models import Episode as EpisodeModel
from starwars.models import Planet as PlanetModel


def character_model_to_entity(model: CharacterModel) -> Character:
    return Character(
        id=model.id,
        name=model.name,
        planet_id=model.planet_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def planet_model_to_entity(model: PlanetModel) -> Planet:
    return Planet(
        id=model.id,
        name=model.name,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def episode_model_to_entity(model: EpisodeModel) -> Episode:
    return Episode(
        id=model.id,
        name=model.name,
        code=model.code,
        release_date=model.release_date,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
