"""Record store backends."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache

from mediashelf.config import settings
from mediashelf.store.base import (
    Collection,
    Record,
    RecordPage,
    RecordStore,
    StoreError,
    StoreInfo,
)
from mediashelf.store.json_file import JsonFileStore
from mediashelf.store.sql import SqlStore


def create_store(backend: str, data_file: str, database_url: str) -> RecordStore:
    """Build the store selected by ``backend``."""
    if backend == "sqlite":
        return SqlStore(database_url)
    return JsonFileStore(data_file)


@lru_cache
def get_store() -> RecordStore:
    """Get the process-wide store configured by settings."""
    return create_store(settings.store_backend, settings.data_file, settings.database_url)


@asynccontextmanager
async def open_store() -> AsyncIterator[RecordStore]:
    """Initialize the configured store for a one-off task and close it afterwards."""
    store = get_store()
    await store.initialize()
    try:
        yield store
    finally:
        await store.close()


__all__ = [
    "Collection",
    "JsonFileStore",
    "Record",
    "RecordPage",
    "RecordStore",
    "SqlStore",
    "StoreError",
    "StoreInfo",
    "create_store",
    "get_store",
    "open_store",
]
