"""Equipment and parameter CRUD service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api import api_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .db.store import Store

logger = logging.getLogger(__name__)


async def log_middleware(request: Request, call_next: Callable[[Request], Awaitable[Any]]):
    logger.info("%s %s", request.method, request.url.path)
    response = await call_next(request)
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or incomplete requests as 400 rather than 422."""
    logger.warning(
        "Rejected %s %s", request.method, request.url.path, extra={"errors": len(exc.errors())}
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    setup_logging()
    config = app_settings or settings
    logger.info("Initializing %s API", config.app_name)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = Store(config.database_url)
        store.open()
        app.state.store = store
        try:
            yield
        finally:
            store.close()

    docs = config.docs_enabled
    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.middleware("http")(log_middleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(api_router, prefix=config.api_prefix)
    return app


app = create_app()

__all__ = ["app", "create_app"]
