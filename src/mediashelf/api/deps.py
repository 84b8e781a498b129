"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from mediashelf.store import RecordStore, get_store

# Type alias for record store dependency
StoreDep = Annotated[RecordStore, Depends(get_store)]
