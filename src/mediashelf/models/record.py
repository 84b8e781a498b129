"""Table used by the SQL record store."""

from typing import Any

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


class RecordRow(SQLModel, table=True):
    """One catalog record stored as a JSON document.

    ``seq`` preserves insertion order, which is also display order.
    """

    __tablename__ = "records"
    __table_args__ = (UniqueConstraint("collection", "record_id"),)

    seq: int | None = Field(default=None, primary_key=True)
    collection: str = Field(index=True, max_length=16)
    record_id: int = Field(index=True)
    data: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
