"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from user_api.config import Settings, get_settings
from user_api.error_handlers import register_error_handlers
from user_api.logging_config import setup_logging
from user_api.middleware import setup_middleware
from user_api.routes import api_router
from user_api.services import init_user_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    settings: Settings = app.state.settings
    logger.info(f"{settings.app_name} v{settings.app_version} started")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log level: {settings.log_level}")

    yield

    logger.info(f"{settings.app_name} shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its own user store.

    Args:
        settings: Settings to use; read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="In-memory user store - FastAPI backend service",
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings

    # Reached by handlers through get_user_store
    init_user_store(app, seed=settings.seed_users)

    setup_middleware(app, cors_origins=settings.cors_origins, environment=settings.environment)
    register_error_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = app.state.settings
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
