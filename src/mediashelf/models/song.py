"""Song model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from mediashelf.models.base import CatalogModel


class Song(CatalogModel):
    """Song linked to a YouTube video."""

    id: int
    title: str | None = None
    artist: str | None = ""
    youtube_url: str | None = None
    cover_image_url: str | None = ""


class SongPayload(BaseModel):
    """JSON body accepted by create and update."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    title: str | None = None
    artist: str | None = None
    youtube_url: str | None = None
    cover_image_url: str | None = None
