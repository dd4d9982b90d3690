from starwars.repositories.character_repository import SqlaCharacterRepository
from starwars.repositories.episode_repository import SqlaEpisodeRepository
from starwars.repositories.planet_repository import SqlaPlanetRepository
from starwars.repositories.ports import (
    CharacterCreateData,
    CharacterFilters,
    CharacterQueryOptions,
    CharacterRepository,
    EpisodeCreateData,
    EpisodeRepository,
    PlanetRepository,
    SearchQueryOptions,
)

__all__ = [
    "CharacterCreateData",
    "CharacterFilters",
    "CharacterQueryOptions",
    "CharacterRepository",
    "EpisodeCreateData",
    "EpisodeRepository",
    "PlanetRepository",
    "SearchQueryOptions",
    "SqlaCharacterRepository",
    "SqlaEpisodeRepository",
    "SqlaPlanetRepository",
]
