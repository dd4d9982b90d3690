from fastapi import APIRouter

from starwars.api.v1.endpoints import characters, episodes, health, planets

api_router = APIRouter()
api_router.include_router(characters.router)
api_router.include_router(planets.router)
api_router.include_router(episodes.router)

health_router = APIRouter()
health_router.include_router(health.router)

__all__ = ["api_router", "health_router"]
