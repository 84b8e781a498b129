"""Game model."""

from enum import StrEnum

from mediashelf.models.base import CatalogModel


class GameStatus(StrEnum):
    """Play status offered by the management form."""

    PLAYING = "Playing"
    COMPLETED = "Completed"
    PENDING = "Pending"
    ABANDONED = "Abandoned"


class Game(CatalogModel):
    """Game in the collection.

    ``status`` is plain text so that values written by older clients survive.
    """

    id: int
    title: str | None = None
    status: str | None = GameStatus.PLAYING.value
    rating: float | None = None
    notes: str | None = ""
    trailer_url: str | None = ""
    launch_date: str | None = None
    image_url: str | None = ""
