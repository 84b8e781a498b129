"""Record store backed by a single JSON document on disk."""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from pathlib import Path

import aiofiles
import aiofiles.os

from mediashelf.store.base import (
    Collection,
    Record,
    RecordPage,
    RecordStore,
    StoreError,
    StoreInfo,
    empty_document,
)

logger = logging.getLogger(__name__)

Document = dict[str, list[Record]]


def normalize_document(data: object) -> tuple[Document, bool]:
    """Coerce a parsed document into the expected shape.

    Missing or non-array collections become empty arrays. Returns the
    document and whether anything had to be repaired.
    """
    if not isinstance(data, dict):
        return empty_document(), True

    repaired = False
    for collection in Collection:
        if not isinstance(data.get(collection.value), list):
            logger.warning("Collection '%s' is not an array, resetting it", collection.value)
            data[collection.value] = []
            repaired = True
    return data, repaired


def _find_index(records: list[Record], record_id: int) -> int | None:
    for index, record in enumerate(records):
        if record.get("id") == record_id:
            return index
    return None


class JsonFileStore(RecordStore):
    """Whole-document store: every call re-reads the file, every mutation rewrites it.

    Mutations within one process are serialized by a lock. Other processes
    writing the same file are not coordinated.
    """

    name = "json"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        async with self._lock:
            if not await aiofiles.os.path.exists(self.path):
                logger.info("Data file %s not found, creating it", self.path)
                await self._write(empty_document())
            else:
                raw = await self._read_raw()
                document, repaired = normalize_document(raw)
                if repaired:
                    await self._write(document)
        counts = {c.value: await self.count(c) for c in Collection}
        logger.info(
            "Record store ready at %s - games: %d, songs: %d, clips: %d",
            self.path,
            counts["games"],
            counts["songs"],
            counts["clips"],
        )

    async def _read_raw(self) -> object:
        try:
            async with aiofiles.open(self.path, encoding="utf-8") as f:
                content = await f.read()
        except OSError as e:
            raise StoreError(f"Unable to read data file {self.path}: {e}") from e
        try:
            return json.loads(content) if content.strip() else None
        except json.JSONDecodeError as e:
            raise StoreError(f"Data file {self.path} is not valid JSON: {e}") from e

    async def _read(self) -> Document:
        if not await aiofiles.os.path.exists(self.path):
            return empty_document()
        document, _repaired = normalize_document(await self._read_raw())
        return document

    async def _write(self, document: Document) -> None:
        # Write to a sibling temp file and rename so readers never see a partial document
        tmp_path = self.path.with_name(f".{self.path.name}.{uuid.uuid4().hex[:8]}.tmp")
        try:
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(document, indent=2, ensure_ascii=False))
            await aiofiles.os.replace(tmp_path, self.path)
        except OSError as e:
            raise StoreError(f"Unable to write data file {self.path}: {e}") from e

    async def list(
        self, collection: Collection, offset: int = 0, limit: int | None = None
    ) -> RecordPage:
        records = (await self._read())[collection.value]
        end = None if limit is None else offset + limit
        return RecordPage(items=records[offset:end], total=len(records))

    async def get(self, collection: Collection, record_id: int) -> Record | None:
        records = (await self._read())[collection.value]
        index = _find_index(records, record_id)
        return None if index is None else records[index]

    async def create(self, collection: Collection, record: Record) -> Record:
        async with self._lock:
            document = await self._read()
            document[collection.value].append(record)
            await self._write(document)
        return record

    async def update(self, collection: Collection, record_id: int, record: Record) -> Record | None:
        async with self._lock:
            document = await self._read()
            records = document[collection.value]
            index = _find_index(records, record_id)
            if index is None:
                return None
            records[index] = record
            await self._write(document)
        return record

    async def delete(self, collection: Collection, record_id: int) -> bool:
        async with self._lock:
            document = await self._read()
            records = document[collection.value]
            index = _find_index(records, record_id)
            if index is None:
                return False
            del records[index]
            await self._write(document)
        return True

    async def describe(self) -> StoreInfo:
        exists = await aiofiles.os.path.exists(self.path)
        document = await self._read()
        return StoreInfo(
            backend=self.name,
            location=str(self.path.resolve()),
            exists=exists,
            counts={c.value: len(document[c.value]) for c in Collection},
            sample_games=document[Collection.GAMES.value][:3],
            sample_songs=document[Collection.SONGS.value][:3],
        )
