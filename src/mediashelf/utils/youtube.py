"""YouTube URL helpers."""

import re

_MARKER_RE = re.compile(r"(vi/|v=|/v/|youtu\.be/|/embed/)")
_ID_END_RE = re.compile(r"[^0-9a-z_\-]", re.IGNORECASE)


def youtube_id(url: str | None) -> str:
    """Extract the video id from a YouTube URL.

    Examples:
        youtube_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=1") -> "dQw4w9WgXcQ"
        youtube_id("https://youtu.be/xyz") -> "xyz"
        youtube_id("dQw4w9WgXcQ") -> "dQw4w9WgXcQ"
    """
    if not url:
        return ""
    parts = _MARKER_RE.split(url)
    if len(parts) < 3:
        return url
    return _ID_END_RE.split(parts[2], maxsplit=1)[0]


def thumbnail_url(url: str | None) -> str:
    """High-quality thumbnail image for a YouTube URL, or "" if there is no id."""
    video_id = youtube_id(url)
    return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg" if video_id else ""
