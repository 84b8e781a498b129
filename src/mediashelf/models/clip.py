"""Clip model."""

from pydantic import BaseModel

from mediashelf.models.base import CatalogModel


class Clip(CatalogModel):
    """Short uploaded video with an optional thumbnail."""

    id: int
    title: str | None = None
    description: str | None = ""
    thumbnail_url: str | None = ""
    video_url: str | None = ""


class ClipCollection(BaseModel):
    """Clips list response. Clips are not paginated."""

    clips: list[Clip]
