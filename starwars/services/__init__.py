from starwars.services.character import CharacterService
from starwars.services.episode import EpisodeService
from starwars.services.planet import PlanetService

__all__ = ["CharacterService", "EpisodeService", "PlanetService"]
