"""Custom exceptions for the Star Wars catalog service."""

from uuid import UUID


class StarWarsServiceError(Exception):
    """Base exception for the catalog service."""

    pass


class ResourceNotFoundError(StarWarsServiceError):
    """Raised by services when an entity is absent for the given id."""

    resource = "Resource"

    def __init__(self, resource_id: UUID | str) -> None:
        self.resource_id = resource_id
        super().__init__(f'{self.resource} with ID "{resource_id}" not found')


class CharacterNotFoundError(ResourceNotFoundError):
    resource = "Character"


class PlanetNotFoundError(ResourceNotFoundError):
    resource = "Planet"


class EpisodeNotFoundError(ResourceNotFoundError):
    resource = "Episode"


class WriteFailedError(StarWarsServiceError):
    """Raised when a write returned no row although its precondition held."""


class CharacterCreateFailedError(WriteFailedError):
    def __init__(self) -> None:
        super().__init__("Failed to create character")


class CharacterUpdateFailedError(WriteFailedError):
    def __init__(self, character_id: UUID) -> None:
        self.character_id = character_id
        super().__init__("Failed to update character")


class PlanetCreateFailedError(WriteFailedError):
    def __init__(self) -> None:
        super().__init__("Failed to create planet")


class EpisodeCreateFailedError(WriteFailedError):
    def __init__(self) -> None:
        super().__init__("Failed to create episode")
