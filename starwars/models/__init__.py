from starwars.models.character import Character
from starwars.models.episode import CharacterEpisode, Episode
from starwars.models.planet import Planet

__all__ = ["Character", "CharacterEpisode", "Episode", "Planet"]
