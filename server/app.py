"""FastAPI application exposing the inbound normalizer."""

from __future__ import annotations

import json
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.adapters.registry import ParserRegistry
from app.types import MalformedPayloadError, UnsupportedMessageTypeError

from .config import Settings, get_settings
from .logging_config import configure_logging, logger
from .routes import api_router


def register_exception_handlers(app: FastAPI) -> None:
    """Map parser errors and request failures to `{"ok": false, ...}` JSON."""

    @app.exception_handler(MalformedPayloadError)
    async def _malformed_payload_handler(request: Request, exc: MalformedPayloadError):
        logger.warning("Malformed payload at %s", exc.field_path, extra={"path": request.url.path})
        return JSONResponse(
            {"ok": False, "error": str(exc), "field": exc.field_path},
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(UnsupportedMessageTypeError)
    async def _unsupported_type_handler(request: Request, exc: UnsupportedMessageTypeError):
        logger.info("Unsupported message type %r", exc.message_type, extra={"path": request.url.path})
        message_type = exc.message_type if isinstance(exc.message_type, str) else None
        return JSONResponse(
            {"ok": False, "error": str(exc), "message_type": message_type},
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            {"ok": False, "error": "Invalid request", "detail": exc.errors()},
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else json.dumps(exc.detail)
        return JSONResponse({"ok": False, "error": detail}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(
            {"ok": False, "error": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app: logging, CORS, error mapping and the `/api/v1` routes."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Normalizing webhooks for providers: %s",
            ", ".join(ParserRegistry.providers()),
            extra={"version": settings.app_version, "env": settings.env},
        )
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=settings.resolved_docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
