"""Common schemas used across the API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PaginatedResponse[T](BaseModel):
    """Page of a collection in stored order."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[T]
    total: int
    total_pages: int
    page: int
    limit: int


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items, ``limit`` per page."""
    return -(-total // limit)


class PageParams(BaseModel):
    """1-based page and page size."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
