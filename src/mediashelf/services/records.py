"""Building new records and merging updates into existing ones.

Updates follow the catalog's merge rule: an incoming value replaces the stored
one only when it is truthy. Omitted fields, empty strings and zero all keep the
previous value, so an update can never clear a field.
"""

import math
from dataclasses import dataclass
from typing import Any

from mediashelf.models import Clip, Game, GameStatus, Song, SongPayload
from mediashelf.models.base import CatalogModel


@dataclass
class GameForm:
    """Text fields of the game form, as submitted."""

    title: str | None = None
    status: str | None = None
    rating: str | None = None
    notes: str | None = None
    trailer_url: str | None = None
    launch_date: str | None = None
    image_url: str | None = None


@dataclass
class ClipForm:
    """Text fields of the clip form, as submitted."""

    title: str | None = None
    description: str | None = None


def parse_rating(raw: str | float | None) -> float | None:
    """Parse a submitted rating. Blank or non-numeric input gives None."""
    if raw is None or raw == "":
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def merge_fields[M: CatalogModel](existing: M, changes: dict[str, Any]) -> M:
    """Apply ``changes`` over ``existing``, keeping stored values for falsy input."""
    update = {name: value or getattr(existing, name) for name, value in changes.items()}
    return existing.model_copy(update=update)


def new_game(record_id: int, form: GameForm, uploaded_image: str | None = None) -> Game:
    """Create a game. An uploaded image takes precedence over ``form.image_url``."""
    return Game(
        id=record_id,
        title=form.title,
        status=form.status or GameStatus.PLAYING.value,
        rating=parse_rating(form.rating),
        notes=form.notes or "",
        trailer_url=form.trailer_url or "",
        launch_date=form.launch_date or None,
        image_url=uploaded_image or form.image_url or "",
    )


def merge_game(existing: Game, form: GameForm, uploaded_image: str | None = None) -> Game:
    return merge_fields(
        existing,
        {
            "title": form.title,
            "status": form.status,
            "rating": parse_rating(form.rating),
            "notes": form.notes,
            "trailer_url": form.trailer_url,
            "launch_date": form.launch_date,
            "image_url": uploaded_image or form.image_url,
        },
    )


def new_song(record_id: int, payload: SongPayload) -> Song:
    return Song(
        id=record_id,
        title=payload.title,
        artist=payload.artist or "",
        youtube_url=payload.youtube_url,
        cover_image_url=payload.cover_image_url or "",
    )


def merge_song(existing: Song, payload: SongPayload) -> Song:
    return merge_fields(
        existing,
        {
            "title": payload.title,
            "artist": payload.artist,
            "youtube_url": payload.youtube_url,
            "cover_image_url": payload.cover_image_url,
        },
    )


def new_clip(
    record_id: int,
    form: ClipForm,
    thumbnail_url: str | None = None,
    video_url: str | None = None,
) -> Clip:
    return Clip(
        id=record_id,
        title=form.title,
        description=form.description or "",
        thumbnail_url=thumbnail_url or "",
        video_url=video_url or "",
    )


def merge_clip(
    existing: Clip,
    form: ClipForm,
    thumbnail_url: str | None = None,
    video_url: str | None = None,
) -> Clip:
    """Merge a clip update. Files are replaced only when a new upload is given."""
    return merge_fields(
        existing,
        {
            "title": form.title,
            "description": form.description,
            "thumbnail_url": thumbnail_url,
            "video_url": video_url,
        },
    )
