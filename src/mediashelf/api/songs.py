"""Song CRUD endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from mediashelf.api.deps import StoreDep
from mediashelf.api.utils import parse_record_id
from mediashelf.config import settings
from mediashelf.models import Song, SongPayload
from mediashelf.schemas import PageParams, PaginatedResponse, total_pages
from mediashelf.services.ids import next_id
from mediashelf.services.records import merge_song, new_song
from mediashelf.store import Collection

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Song not found"


@router.get("", response_model=PaginatedResponse[Song])
async def list_songs(
    store: StoreDep,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1)] = None,
):
    """List songs in stored order, one page at a time."""
    params = PageParams(page=page, limit=limit or settings.songs_page_size)
    result = await store.list(Collection.SONGS, params.offset, params.limit)

    return PaginatedResponse[Song](
        items=[Song.model_validate(item) for item in result.items],
        total=result.total,
        total_pages=total_pages(result.total, params.limit),
        page=params.page,
        limit=params.limit,
    )


@router.get("/{song_id}", response_model=Song)
async def get_song(song_id: str, store: StoreDep):
    """Get a song by ID."""
    record = await store.get(Collection.SONGS, parse_record_id(song_id, NOT_FOUND))
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Song.model_validate(record)


@router.post("", response_model=Song, status_code=status.HTTP_201_CREATED)
async def create_song(payload: SongPayload, store: StoreDep):
    """Create a song from a JSON body."""
    song = new_song(next_id(), payload)
    await store.create(Collection.SONGS, song.to_document())
    logger.info("Created song %s (%r)", song.id, song.title)
    return song


@router.put("/{song_id}", response_model=Song)
async def update_song(song_id: str, payload: SongPayload, store: StoreDep):
    """Update a song. Blank fields keep their current value."""
    record_id = parse_record_id(song_id, NOT_FOUND)
    record = await store.get(Collection.SONGS, record_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    song = merge_song(Song.model_validate(record), payload)
    if await store.update(Collection.SONGS, record_id, song.to_document()) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    logger.info("Updated song %s", record_id)
    return song


@router.delete("/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_song(song_id: str, store: StoreDep):
    """Delete a song."""
    record_id = parse_record_id(song_id, NOT_FOUND)
    if not await store.delete(Collection.SONGS, record_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    logger.info("Deleted song %s", record_id)
