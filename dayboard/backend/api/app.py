"""FastAPI application factory.

Instantiate with:
    uvicorn dayboard.backend.api.app:app --reload --port 8000

Set ``DAYBOARD_CONFIG`` to a YAML file to override the built-in defaults.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dayboard import __version__
from dayboard.backend.api.router import router
from dayboard.backend.core.errors import (
    AuthError,
    ConflictError,
    DayboardError,
    NotFoundError,
    RemoteError,
    ValidationError,
)
from dayboard.backend.core.utils.config import apply_env_overrides, get_default_config, load_config
from dayboard.backend.services import Workspace

logger = logging.getLogger(__name__)

# Checked most-specific first; WeatherLookupError is a RemoteError.
_STATUS_BY_ERROR: list[tuple[type[DayboardError], int]] = [
    (ValidationError, 422),
    (NotFoundError, 404),
    (ConflictError, 409),
    (AuthError, 401),
    (RemoteError, 502),
]


def resolve_config() -> dict[str, Any]:
    """Config from ``DAYBOARD_CONFIG`` if set, else defaults plus environment overrides."""
    path = os.getenv("DAYBOARD_CONFIG")
    if path:
        return load_config(path)
    return apply_env_overrides(get_default_config())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the workspace (unless one was injected) and resume a remembered session."""
    if app.state.workspace is None:
        app.state.workspace = Workspace(app.state.config)
    state = app.state.workspace.start()
    logger.info("Backend ready – auth state %s", state.value)
    yield
    app.state.workspace.close()


def status_for(error: DayboardError) -> int:
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(error, cls):
            return status
    return 500


async def _dayboard_error_handler(request: Request, exc: DayboardError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status, content={"error": exc.kind, "detail": exc.message})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg', 'invalid')}" if location else err.get("msg", "invalid"))
    return JSONResponse(
        status_code=422,
        content={"error": ValidationError.kind, "detail": "; ".join(parts)},
    )


def create_app(config: dict[str, Any] | None = None, workspace: Workspace | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Configuration dictionary; resolved from the environment if omitted
        workspace: Pre-built workspace (tests); built in the lifespan if omitted
    """
    if config is None:
        config = workspace.config if workspace is not None else resolve_config()

    application = FastAPI(
        title="Dayboard API",
        version=__version__,
        description="Personal planning dashboard backend",
        lifespan=lifespan,
    )
    application.state.config = config
    application.state.workspace = workspace

    # ── CORS ───────────────────────────────────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(config["server"]["cors_origins"]),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Error taxonomy → HTTP ──────────────────────────────────────────────
    application.add_exception_handler(DayboardError, _dayboard_error_handler)
    application.add_exception_handler(RequestValidationError, _request_validation_handler)

    # ── Register all API routes under /api ─────────────────────────────────
    application.include_router(router, prefix="/api")

    # ── Suppress noisy access-log lines for health polls ───────────────────
    _install_access_log_filter()

    return application


class _QuietPollFilter(logging.Filter):
    """Drop uvicorn access-log records for /api/health."""

    _NOISY = ("/api/health",)

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(path in msg for path in self._NOISY)


def _install_access_log_filter() -> None:
    """Attach the filter to uvicorn's access logger (if it exists)."""
    uvicorn_access = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, _QuietPollFilter) for f in uvicorn_access.filters):
        uvicorn_access.addFilter(_QuietPollFilter())


# Module-level instance used by uvicorn.
app = create_app()
