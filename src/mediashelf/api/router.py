"""Main API router that aggregates all route modules."""

from fastapi import APIRouter

from mediashelf.api import clips, debug, games, health, songs

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(games.router, prefix="/games", tags=["games"])
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(clips.router, prefix="/clips", tags=["clips"])

# Admin endpoints
api_router.include_router(debug.router, prefix="/debug", tags=["admin"])
