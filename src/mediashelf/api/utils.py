"""Shared API utilities."""

import logging
import re

from fastapi import HTTPException, UploadFile, status

from mediashelf.services.storage import storage

logger = logging.getLogger(__name__)

MIME_TO_EXT = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/gif": "gif",
    "image/webp": "webp",
    "video/mp4": "mp4",
    "video/webm": "webm",
    "video/quicktime": "mov",
}

_EXTENSION_RE = re.compile(r"[A-Za-z0-9]+")


def get_extension(content_type: str, filename: str | None) -> str:
    """Get file extension from the original filename, else from the content type.

    Only a plain alphanumeric suffix counts as an extension.
    """
    if filename and "." in filename:
        extension = filename.rsplit(".", 1)[-1]
        if _EXTENSION_RE.fullmatch(extension):
            return extension.lower()
    return MIME_TO_EXT.get(content_type, "")


def has_file(upload: UploadFile | None) -> bool:
    """Whether a file was actually attached.

    Browsers send an empty, nameless part for a file input left blank.
    """
    return upload is not None and bool(upload.filename)


async def save_upload(upload: UploadFile | None, prefix: str) -> str | None:
    """Store an uploaded file under ``prefix`` and return its public URL.

    Returns None when no file was attached.
    """
    if not has_file(upload):
        return None
    assert upload is not None

    content = await upload.read()
    extension = get_extension(upload.content_type or "", upload.filename)
    url, key = await storage.upload_file(data=content, prefix=prefix, extension=extension)
    logger.info("Stored upload %s (%d bytes) as %s", upload.filename, len(content), key)
    return url


def parse_record_id(raw: str, not_found: str) -> int:
    """Parse a path id. Anything that is not an integer cannot match a record."""
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found) from None
