"""Debug introspection of the record store."""

from fastapi import APIRouter, HTTPException, status

from mediashelf.api.deps import StoreDep
from mediashelf.config import settings

router = APIRouter()


@router.get("")
async def debug_store(store: StoreDep):
    """Describe where records are stored and what the store currently holds.

    Only available when debug mode is enabled.
    """
    if not settings.debug_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    info = await store.describe()
    return {
        "backend": info.backend,
        "location": info.location,
        "exists": info.exists,
        "data": info.counts,
        "sampleGames": info.sample_games,
        "sampleSongs": info.sample_songs,
    }
