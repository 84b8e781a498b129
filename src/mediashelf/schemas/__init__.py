"""Pydantic schemas for API requests/responses."""

from mediashelf.schemas.common import (
    PageParams,
    PaginatedResponse,
    total_pages,
)

__all__ = [
    "PageParams",
    "PaginatedResponse",
    "total_pages",
]
