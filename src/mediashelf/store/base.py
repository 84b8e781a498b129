"""Record store interface shared by the persistence backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

Record = dict[str, Any]


class Collection(StrEnum):
    """Top-level collections of the catalog document."""

    GAMES = "games"
    SONGS = "songs"
    CLIPS = "clips"


class StoreError(Exception):
    """Raised when the backing storage cannot be read or written."""


@dataclass
class RecordPage:
    """Slice of a collection plus the collection size."""

    items: list[Record]
    total: int


@dataclass
class StoreInfo:
    """Introspection data served by the debug endpoint."""

    backend: str
    location: str
    exists: bool
    counts: dict[str, int]
    sample_games: list[Record] = field(default_factory=list)
    sample_songs: list[Record] = field(default_factory=list)


def empty_document() -> dict[str, list[Record]]:
    return {collection.value: [] for collection in Collection}


class RecordStore(ABC):
    """CRUD over the three collections.

    Records are plain mappings in their stored (camelCase) form and always
    carry an integer ``id``. Collections keep insertion order.
    """

    name: str

    @abstractmethod
    async def initialize(self) -> None:
        """Create or repair the backing storage so every collection exists."""

    @abstractmethod
    async def list(
        self, collection: Collection, offset: int = 0, limit: int | None = None
    ) -> RecordPage:
        """Return ``limit`` records starting at ``offset`` (all when limit is None)."""

    @abstractmethod
    async def get(self, collection: Collection, record_id: int) -> Record | None:
        """Return the record with ``record_id`` or None."""

    @abstractmethod
    async def create(self, collection: Collection, record: Record) -> Record:
        """Append ``record`` to the collection and return it."""

    @abstractmethod
    async def update(self, collection: Collection, record_id: int, record: Record) -> Record | None:
        """Replace the record with ``record_id``. Returns None if it does not exist."""

    @abstractmethod
    async def delete(self, collection: Collection, record_id: int) -> bool:
        """Remove the record with ``record_id``. Returns False if it does not exist."""

    @abstractmethod
    async def describe(self) -> StoreInfo:
        """Describe the backing storage and its contents."""

    async def count(self, collection: Collection) -> int:
        page = await self.list(collection, 0, 0)
        return page.total

    async def close(self) -> None:  # noqa: B027
        """Release any resources held by the backend."""
