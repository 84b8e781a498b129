"""FastAPI application entrypoint."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mediashelf import pages
from mediashelf.api.middleware import RequestIDMiddleware, RequestLoggingMiddleware
from mediashelf.api.router import api_router
from mediashelf.config import settings
from mediashelf.services.storage import storage
from mediashelf.store import StoreError, get_store

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

# Initialize Sentry for error tracking
if settings.sentry_dsn:
    import sentry_sdk

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=0.1 if settings.is_production else 1.0,
    )
    logger.info("Sentry initialized")


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    store = get_store()
    try:
        await store.initialize()
    except StoreError as e:
        # Keep serving; every store-backed request will answer 500 with this error
        logger.error(f"Record store failed to initialize: {e}")
    yield
    await store.close()


app = FastAPI(
    title="mediashelf API",
    description="Personal catalog for games, songs and clips",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/api/docs" if settings.debug_enabled else None,
    redoc_url="/api/redoc" if settings.debug_enabled else None,
    openapi_url="/api/openapi.json" if settings.debug_enabled else None,
)

app.add_middleware(RequestLoggingMiddleware)  # type: ignore[arg-type]
# Added last so it runs first and the request id is set before logging
app.add_middleware(RequestIDMiddleware)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "X-Request-ID"],
    expose_headers=["X-Request-ID"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as ``{"error": message}``."""
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
    return JSONResponse({"error": str(exc)}, status_code=500)


@app.exception_handler(ValidationError)
async def record_error_handler(request: Request, exc: ValidationError):
    """Stored records that no longer fit their model answer 500 like other store failures."""
    logger.error(f"{request.method} {request.url.path} found an unreadable record: {exc}")
    return JSONResponse(
        {"error": f"Stored {exc.title} record is invalid: {exc.error_count()} field error(s)"},
        status_code=500,
    )


app.include_router(api_router, prefix="/api")

# Non-JS snapshots of the gallery
app.include_router(pages.router)

# Serve uploaded media (cover images, clip thumbnails and videos)
app.mount("/uploads", StaticFiles(directory=storage.upload_dir), name="uploads")

# Client bundle; index.html is served at /
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="client")


if __name__ == "__main__":
    import uvicorn

    from mediashelf.logging import get_uvicorn_log_config

    uvicorn.run(
        "mediashelf.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_config=get_uvicorn_log_config(),
    )
