"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cluster_profiles import __version__
from cluster_profiles.api.v1 import router as v1_router
from cluster_profiles.config import LoggingConfig, get_settings
from cluster_profiles.db import close_db, init_db
from cluster_profiles.errors import ParseError, ProfileServiceError

logger = structlog.get_logger()


def configure_logging(config: LoggingConfig) -> None:
    """Configure structlog once for the whole process."""
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if config.json_logs:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(config.level)),
        cache_logger_on_first_use=True,
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as the {code, message, error} envelope."""

    @app.exception_handler(ProfileServiceError)
    async def _service_error_handler(_: Request, exc: ProfileServiceError) -> JSONResponse:
        logger.error(
            "api.error",
            code=exc.code,
            status_code=exc.status_code,
            message=exc.message,
            error=exc.error,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def _parse_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        err = ParseError(_format_validation_errors(exc))
        logger.error("api.parse_error", error=err.error)
        return JSONResponse(status_code=err.status_code, content=err.to_response())

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
        logger.exception("api.unhandled_exception")
        err = ProfileServiceError(str(exc))
        return JSONResponse(status_code=err.status_code, content=err.to_response())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("app.startup", version=__version__)
    await init_db()
    try:
        yield
    finally:
        await close_db()
        logger.info("app.shutdown")


def create_app() -> FastAPI:
    """Create and configure FastAPI application instance."""
    settings = get_settings()
    configure_logging(settings.logging)

    app = FastAPI(title="Cluster Profiles", version=__version__, lifespan=lifespan)
    register_exception_handlers(app)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(v1_router, prefix=settings.server.api_prefix)
    return app


def run() -> None:
    """Console entrypoint: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "cluster_profiles.main:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
