from starwars.domain.entities import (
    Character,
    CharacterWithPlanet,
    Episode,
    Page,
    Pagination,
    Planet,
    PlanetRef,
)

__all__ = [
    "Character",
    "CharacterWithPlanet",
    "Episode",
    "Page",
    "Pagination",
    "Planet",
    "PlanetRef",
]
