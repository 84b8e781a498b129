"""Clip CRUD endpoints.

Clips are not paginated. The video file field is ``video``; ``clip`` is also
accepted for older clients.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from mediashelf.api.deps import StoreDep
from mediashelf.api.utils import has_file, parse_record_id, save_upload
from mediashelf.models import Clip, ClipCollection
from mediashelf.services.ids import next_id
from mediashelf.services.records import ClipForm, merge_clip, new_clip
from mediashelf.services.storage import CLIP_THUMBNAILS, CLIP_VIDEOS
from mediashelf.store import Collection

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Clip not found"

MediaFile = Annotated[UploadFile | None, File()]


async def _store_media(
    thumbnail: UploadFile | None,
    video: UploadFile | None,
    clip: UploadFile | None,
) -> tuple[str | None, str | None]:
    thumbnail_url = await save_upload(thumbnail, CLIP_THUMBNAILS)
    video_url = await save_upload(video if has_file(video) else clip, CLIP_VIDEOS)
    return thumbnail_url, video_url


@router.get("", response_model=ClipCollection)
async def list_clips(store: StoreDep):
    """List every clip in stored order."""
    result = await store.list(Collection.CLIPS)
    return ClipCollection(clips=[Clip.model_validate(item) for item in result.items])


@router.get("/{clip_id}", response_model=Clip)
async def get_clip(clip_id: str, store: StoreDep):
    """Get a clip by ID."""
    record = await store.get(Collection.CLIPS, parse_record_id(clip_id, NOT_FOUND))
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Clip.model_validate(record)


@router.post("", response_model=Clip, status_code=status.HTTP_201_CREATED)
async def create_clip(
    store: StoreDep,
    title: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    thumbnail: MediaFile = None,
    video: MediaFile = None,
    clip: MediaFile = None,
):
    """Create a clip from a multipart form with optional thumbnail and video files."""
    thumbnail_url, video_url = await _store_media(thumbnail, video, clip)

    form = ClipForm(title=title, description=description)
    record = new_clip(next_id(), form, thumbnail_url, video_url)
    await store.create(Collection.CLIPS, record.to_document())
    logger.info("Created clip %s (%r)", record.id, record.title)
    return record


@router.put("/{clip_id}", response_model=Clip)
async def update_clip(
    clip_id: str,
    store: StoreDep,
    title: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    thumbnail: MediaFile = None,
    video: MediaFile = None,
    clip: MediaFile = None,
):
    """Update a clip. Files are replaced only when new ones are attached."""
    record_id = parse_record_id(clip_id, NOT_FOUND)
    existing = await store.get(Collection.CLIPS, record_id)
    if existing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    thumbnail_url, video_url = await _store_media(thumbnail, video, clip)

    record = merge_clip(
        Clip.model_validate(existing),
        ClipForm(title=title, description=description),
        thumbnail_url,
        video_url,
    )
    if await store.update(Collection.CLIPS, record_id, record.to_document()) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    logger.info("Updated clip %s", record_id)
    return record


@router.delete("/{clip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_clip(clip_id: str, store: StoreDep):
    """Delete a clip."""
    record_id = parse_record_id(clip_id, NOT_FOUND)
    if not await store.delete(Collection.CLIPS, record_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    logger.info("Deleted clip %s", record_id)
