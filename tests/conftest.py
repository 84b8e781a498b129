"""Pytest configuration and fixtures."""

import os
import tempfile
from collections.abc import AsyncGenerator
from pathlib import Path

# Set test environment before importing app; uploads and the default data
# file land in a throwaway directory
_TEST_ROOT = tempfile.mkdtemp(prefix="mediashelf-tests-")
os.environ["ENVIRONMENT"] = "test"
os.environ["STORE_BACKEND"] = "json"
os.environ["DATA_FILE"] = os.path.join(_TEST_ROOT, "db.json")
os.environ["STORAGE_PATH"] = os.path.join(_TEST_ROOT, "uploads")

import pytest
from httpx import ASGITransport, AsyncClient

from mediashelf.main import app
from mediashelf.models import Clip, Game, Song
from mediashelf.store import Collection, JsonFileStore, RecordStore, get_store


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path of a per-test JSON data file."""
    return tmp_path / "data" / "db.json"


@pytest.fixture
async def store(data_file: Path) -> RecordStore:
    """Create an initialized JSON store in a temporary directory."""
    store = JsonFileStore(data_file)
    await store.initialize()
    return store


@pytest.fixture
async def client(store: RecordStore) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client bound to the temporary store."""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


async def seed_games(store: RecordStore, count: int, **fields) -> list[Game]:
    """Insert ``count`` games titled "Game 1".."Game N" with ids 1..N."""
    games = [Game(id=i, title=f"Game {i}", **fields) for i in range(1, count + 1)]
    for game in games:
        await store.create(Collection.GAMES, game.to_document())
    return games


async def seed_songs(store: RecordStore, count: int) -> list[Song]:
    songs = [
        Song(id=i, title=f"Song {i}", youtube_url=f"https://youtu.be/song{i}")
        for i in range(1, count + 1)
    ]
    for song in songs:
        await store.create(Collection.SONGS, song.to_document())
    return songs


@pytest.fixture
async def game(store: RecordStore) -> Game:
    """Create a test game."""
    game = Game(
        id=1,
        title="Test Game",
        status="Completed",
        rating=4.5,
        notes="A test game for unit tests",
        trailer_url="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        launch_date="2024-03-01",
        image_url="https://example.com/cover.png",
    )
    await store.create(Collection.GAMES, game.to_document())
    return game


@pytest.fixture
async def clip(store: RecordStore) -> Clip:
    """Create a test clip."""
    clip = Clip(
        id=7,
        title="Test Clip",
        description="Clutch round",
        thumbnail_url="/uploads/clips/thumbnails/abc.png",
        video_url="/uploads/clips/videos/abc.mp4",
    )
    await store.create(Collection.CLIPS, clip.to_document())
    return clip


@pytest.fixture
def png_content() -> bytes:
    """Small byte payload standing in for an image upload."""
    return b"\x89PNG\r\n\x1a\n fake image content"


@pytest.fixture
def mp4_content() -> bytes:
    """Small byte payload standing in for a video upload."""
    return b"\x00\x00\x00\x18ftypmp42 fake video content"
