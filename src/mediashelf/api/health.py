"""Health check endpoints."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from mediashelf.api.deps import StoreDep
from mediashelf.store import Collection, StoreError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def health_check():
    """Basic health check - just confirms the service is running."""
    return {"status": "ok"}


@router.get("/store")
async def health_check_store(store: StoreDep):
    """Health check that reads from the record store."""
    try:
        await store.count(Collection.GAMES)
        return {"status": "ok", "store": store.name}
    except StoreError as e:
        logger.error(f"Record store health check failed: {e!r}")
        return JSONResponse(
            status_code=503,
            content={"status": "error", "store": store.name},
        )
