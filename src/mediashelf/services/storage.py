"""File storage for uploaded media on the local filesystem."""

import os
import uuid
from pathlib import Path

import aiofiles
import aiofiles.os

from mediashelf.config import settings

# Upload prefixes by media kind
GAME_IMAGES = "games"
CLIP_THUMBNAILS = "clips/thumbnails"
CLIP_VIDEOS = "clips/videos"

URL_PREFIX = "/uploads"


class StorageService:
    """Service for file storage operations."""

    def __init__(self, upload_dir: Path | str | None = None) -> None:
        self.upload_dir = Path(upload_dir or settings.storage_path)
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def _generate_key(self, prefix: str, extension: str) -> str:
        """Generate a unique storage key, keeping the extension if there is one."""
        unique_id = uuid.uuid4().hex[:12]
        suffix = f".{extension}" if extension else ""
        return f"{prefix}/{unique_id}{suffix}"

    async def upload_file(self, data: bytes, prefix: str, extension: str) -> tuple[str, str]:
        """Store a file and return (url, key).

        Args:
            data: File content as bytes
            prefix: Path prefix (e.g., "clips/videos")
            extension: File extension without dot (e.g., "mp4"), may be empty

        Returns:
            Tuple of (public_url, storage_key)
        """
        key = self._generate_key(prefix, extension)
        file_path = self.upload_dir / key

        file_path.parent.mkdir(parents=True, exist_ok=True)

        async with aiofiles.open(file_path, "wb") as f:
            await f.write(data)

        return f"{URL_PREFIX}/{key}", key

    async def file_exists(self, key: str) -> bool:
        """Check if a file exists."""
        return await aiofiles.os.path.exists(self.upload_dir / key)

    def key_for_url(self, url: str) -> str | None:
        """Storage key for a stored upload URL, or None for external URLs."""
        if not url.startswith(f"{URL_PREFIX}/"):
            return None
        return url.removeprefix(f"{URL_PREFIX}/")

    async def list_files(self, prefix: str = "") -> list[str]:
        """List all files under a prefix.

        Args:
            prefix: Optional prefix to filter by (e.g., "games")

        Returns:
            List of storage keys
        """
        keys: list[str] = []
        base_path = self.upload_dir / prefix if prefix else self.upload_dir

        if not base_path.exists():
            return keys

        for root, _dirs, files in os.walk(base_path):
            for filename in files:
                file_path = Path(root) / filename
                keys.append(file_path.relative_to(self.upload_dir).as_posix())

        return keys


# Global storage service instance
storage = StorageService()
