"""FastAPI application factory and ASGI entrypoint."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog.application.catalog import CATALOG_REQUESTS
from catalog.application.common.dispatcher import Dispatcher
from catalog.config import Settings, configure_logging, get_settings
from catalog.core import container
from catalog.database import dispose_engine, get_engine, initialize_database
from catalog.infrastructure.catalog.routers import products_router
from catalog.infrastructure.common.schemas import ResultEnvelope
from catalog.init_db import init_db

logger = structlog.get_logger(__name__)


def resolve_dispatcher() -> Dispatcher:
    """
    Build the dispatcher and check that every catalog request has a handler.

    A request type without a handler is a wiring bug, so this raises
    HandlerNotFoundError at startup instead of on the first request.
    """
    container.reset_singletons()
    dispatcher = container.dispatcher()
    dispatcher.ensure_registered(*CATALOG_REQUESTS)
    return dispatcher


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Set up the database and dispatcher, tear them down on shutdown."""
    settings: Settings = app.state.settings
    configure_logging(settings.ENVIRONMENT)

    initialize_database(settings)
    init_db(get_engine(), seed=settings.SEED_DATABASE)

    dispatcher = resolve_dispatcher()
    logger.info("application_started", environment=settings.ENVIRONMENT, handlers=len(dispatcher))

    try:
        yield
    finally:
        container.reset_singletons()
        dispose_engine()
        logger.info("application_stopped")


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer malformed requests with a failure envelope."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in errors
    )
    envelope = ResultEnvelope[None].failure(message or "Invalid request")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content=envelope.model_dump(mode="json"),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to run with; defaults to the cached environment settings
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
        docs_url=None if settings.ENVIRONMENT == "production" else "/docs",
        redoc_url=None if settings.ENVIRONMENT == "production" else "/redoc",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(products_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
