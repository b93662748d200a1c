"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.database import DatabaseConnectionError, DocumentStore
from modules.users.routes import router as users_router
from modules.messages.routes import router as messages_router
from modules.guards.routes import router as guards_router

from .dependencies import get_container
from .errors import register_error_handlers
from .routes import health

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Connects the shared document store before serving and closes it on
    shutdown. A failed connection aborts startup.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)

    store = DocumentStore.from_settings(settings)
    try:
        await store.connect()
    except DatabaseConnectionError as e:
        logger.error("MongoDB connection failed: %s", e.message)
        raise

    container = get_container()
    container.attach_store(store)
    logger.info("NSS Server running on %s:%s", settings.host, settings.port)
    try:
        yield
    finally:
        # Shutdown
        logger.info("Shutting down, closing MongoDB connection")
        container.reset()
        await store.close()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Users, contact messages and guard personnel records",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(users_router, prefix="/users", tags=["users"])
    app.include_router(messages_router, tags=["messages"])
    app.include_router(guards_router, prefix="/guards", tags=["guards"])

    return app


# Application instance for uvicorn
app = create_app()
