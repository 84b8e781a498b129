"""Local upload storage tests."""

from pathlib import Path

import pytest

from mediashelf.api.utils import get_extension
from mediashelf.services.storage import CLIP_VIDEOS, GAME_IMAGES, StorageService


@pytest.fixture
def storage(tmp_path: Path) -> StorageService:
    return StorageService(tmp_path / "uploads")


@pytest.mark.asyncio
async def test_upload_file(storage: StorageService):
    """Test that uploads get random names under their prefix."""
    url, key = await storage.upload_file(b"data", GAME_IMAGES, "png")

    assert key.startswith("games/")
    assert key.endswith(".png")
    assert url == f"/uploads/{key}"
    assert (storage.upload_dir / key).read_bytes() == b"data"
    assert await storage.file_exists(key)


@pytest.mark.asyncio
async def test_upload_names_are_unique(storage: StorageService):
    """Test that two uploads never share a name."""
    first = await storage.upload_file(b"a", CLIP_VIDEOS, "mp4")
    second = await storage.upload_file(b"b", CLIP_VIDEOS, "mp4")
    assert first != second


@pytest.mark.asyncio
async def test_upload_without_extension(storage: StorageService):
    _url, key = await storage.upload_file(b"x", CLIP_VIDEOS, "")
    assert "." not in key.rsplit("/", 1)[-1]


@pytest.mark.asyncio
async def test_list_files(storage: StorageService):
    """Test listing keys, optionally by prefix."""
    _, game_key = await storage.upload_file(b"a", GAME_IMAGES, "png")
    _, clip_key = await storage.upload_file(b"b", CLIP_VIDEOS, "mp4")

    assert sorted(await storage.list_files()) == sorted([game_key, clip_key])
    assert await storage.list_files("clips") == [clip_key]
    assert await storage.list_files("missing") == []


def test_key_for_url(storage: StorageService):
    assert storage.key_for_url("/uploads/games/a.png") == "games/a.png"
    assert storage.key_for_url("https://example.com/a.png") is None
    assert storage.key_for_url("") is None


@pytest.mark.parametrize(
    ("content_type", "filename", "expected"),
    [
        ("image/png", "cover.PNG", "png"),
        ("image/png", "cover.png/../../escape", "png"),
        ("video/mp4", "clip.m p4", "mp4"),
        ("video/webm", "noextension", "webm"),
        ("application/octet-stream", "weird./x", ""),
        ("image/jpeg", None, "jpg"),
    ],
)
def test_get_extension(content_type, filename, expected):
    assert get_extension(content_type, filename) == expected
