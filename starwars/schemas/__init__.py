"""Pydantic schemas for the HTTP layer."""

from .character import (
    CharacterCreate,
    CharacterListQuery,
    CharacterListResponse,
    CharacterResponse,
    CharacterSchema,
    CharacterUpdate,
    CharacterWithPlanetResponse,
    CharacterWithPlanetSchema,
    PlanetRefSchema,
)
from .common import PaginationSchema
from .episode import (
    EpisodeCollectionResponse,
    EpisodeCreate,
    EpisodeListResponse,
    EpisodeResponse,
    EpisodeSchema,
)
from .planet import PlanetCreate, PlanetListResponse, PlanetResponse, PlanetSchema

__all__ = [
    "CharacterCreate",
    "CharacterListQuery",
    "CharacterListResponse",
    "CharacterResponse",
    "CharacterSchema",
    "CharacterUpdate",
    "CharacterWithPlanetResponse",
    "CharacterWithPlanetSchema",
    "EpisodeCollectionResponse",
    "EpisodeCreate",
    "EpisodeListResponse",
    "EpisodeResponse",
    "EpisodeSchema",
    "PaginationSchema",
    "PlanetCreate",
    "PlanetListResponse",
    "PlanetRefSchema",
    "PlanetResponse",
    "PlanetSchema",
]
