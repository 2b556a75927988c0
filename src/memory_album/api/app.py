"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from memory_album.api.owner import router as owner_router
from memory_album.api.public import router as public_router
from memory_album.app_logging import configure_logging
from memory_album.config import parse_allowed_origins
from memory_album.containers import AppContainer
from memory_album.domain.errors import (
    MemoryAlbumError,
    NotAuthenticated,
    NotFound,
    SlugConflict,
    StoreError,
    UploadFailed,
    ValidationFailed,
)

_STATUS_BY_ERROR: list[tuple[type[MemoryAlbumError], int]] = [
    (ValidationFailed, 422),
    (SlugConflict, status.HTTP_409_CONFLICT),
    (NotAuthenticated, status.HTTP_401_UNAUTHORIZED),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (UploadFailed, status.HTTP_502_BAD_GATEWAY),
    (StoreError, status.HTTP_502_BAD_GATEWAY),
]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    origins = parse_allowed_origins(container.settings.cors_allowed_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(MemoryAlbumError)
    async def handle_domain_error(
        request: Request, exc: MemoryAlbumError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Upstream failure",
                extra={"path": request.url.path, "error": type(exc).__name__},
            )
        return JSONResponse(
            status_code=status_code,
            content={"detail": _format_error(container, exc, status_code)},
        )

    app.include_router(owner_router)
    app.include_router(public_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: MemoryAlbumError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _format_error(
    container: AppContainer, exc: MemoryAlbumError, status_code: int
) -> str:
    """Return a client-facing message with local debug info for upstream errors."""
    if status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
        return str(exc)
    fallback = "Storage is unavailable. Please try again."
    if container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        return f"{fallback} (debug: {detail})"
    return fallback
