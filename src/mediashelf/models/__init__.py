"""Catalog models."""

from mediashelf.models.clip import Clip, ClipCollection
from mediashelf.models.game import Game, GameStatus
from mediashelf.models.record import RecordRow
from mediashelf.models.song import Song, SongPayload

__all__ = [
    "Clip",
    "ClipCollection",
    "Game",
    "GameStatus",
    "RecordRow",
    "Song",
    "SongPayload",
]
