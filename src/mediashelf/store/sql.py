"""Record store backed by an SQL database through SQLModel."""

from __future__ import annotations

import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from mediashelf.database import create_engine, create_session_factory, create_tables, session_scope
from mediashelf.models.record import RecordRow
from mediashelf.store.base import Collection, Record, RecordPage, RecordStore, StoreError, StoreInfo

logger = logging.getLogger(__name__)


class SqlStore(RecordStore):
    """Keeps each record as a JSON document in the ``records`` table."""

    name = "sqlite"

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url
        self.engine = create_engine(database_url)
        self.session_factory = create_session_factory(self.engine)

    async def initialize(self) -> None:
        try:
            await create_tables(self.engine)
        except SQLAlchemyError as e:
            raise StoreError(f"Unable to initialize database: {e}") from e
        logger.info("Record store ready at %s", self.engine.url.render_as_string(hide_password=True))

    async def _find(self, session, collection: Collection, record_id: int) -> RecordRow | None:
        stmt = select(RecordRow).where(
            RecordRow.collection == collection.value,
            RecordRow.record_id == record_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self, collection: Collection, offset: int = 0, limit: int | None = None
    ) -> RecordPage:
        try:
            async with session_scope(self.session_factory) as session:
                count_stmt = select(func.count(RecordRow.seq)).where(  # type: ignore[arg-type]
                    RecordRow.collection == collection.value
                )
                total = (await session.execute(count_stmt)).scalar() or 0

                stmt = (
                    select(RecordRow)
                    .where(RecordRow.collection == collection.value)
                    .order_by(RecordRow.seq)
                    .offset(offset)
                )
                if limit is not None:
                    stmt = stmt.limit(limit)
                rows = (await session.execute(stmt)).scalars().all()
        except SQLAlchemyError as e:
            raise StoreError(f"Unable to list {collection.value}: {e}") from e
        return RecordPage(items=[dict(row.data) for row in rows], total=total)

    async def get(self, collection: Collection, record_id: int) -> Record | None:
        try:
            async with session_scope(self.session_factory) as session:
                row = await self._find(session, collection, record_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Unable to read {collection.value}: {e}") from e
        return None if row is None else dict(row.data)

    async def create(self, collection: Collection, record: Record) -> Record:
        try:
            async with session_scope(self.session_factory) as session:
                session.add(
                    RecordRow(collection=collection.value, record_id=record["id"], data=record)
                )
        except SQLAlchemyError as e:
            raise StoreError(f"Unable to write {collection.value}: {e}") from e
        return record

    async def update(self, collection: Collection, record_id: int, record: Record) -> Record | None:
        try:
            async with session_scope(self.session_factory) as session:
                row = await self._find(session, collection, record_id)
                if row is None:
                    return None
                # Assign a new dict so the JSON column is flagged as changed
                row.data = dict(record)
                session.add(row)
        except SQLAlchemyError as e:
            raise StoreError(f"Unable to write {collection.value}: {e}") from e
        return record

    async def delete(self, collection: Collection, record_id: int) -> bool:
        try:
            async with session_scope(self.session_factory) as session:
                row = await self._find(session, collection, record_id)
                if row is None:
                    return False
                await session.delete(row)
        except SQLAlchemyError as e:
            raise StoreError(f"Unable to write {collection.value}: {e}") from e
        return True

    async def describe(self) -> StoreInfo:
        counts = {c.value: await self.count(c) for c in Collection}
        games = await self.list(Collection.GAMES, 0, 3)
        songs = await self.list(Collection.SONGS, 0, 3)
        return StoreInfo(
            backend=self.name,
            location=self.engine.url.render_as_string(hide_password=True),
            exists=True,
            counts=counts,
            sample_games=games.items,
            sample_songs=songs.items,
        )

    async def close(self) -> None:
        await self.engine.dispose()
