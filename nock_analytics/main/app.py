"""
Main Application - Main Layer

Builds the FastAPI application from the settings: logging, the DI
container, CORS and the NockBlocks, charts and system routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nock_analytics.main.config import AppSettings, get_settings
from nock_analytics.main.container import app_lifespan, init_container
from nock_analytics.presentation.controllers import (
    charts_router,
    nockblocks_router,
    system_router,
)
from nock_analytics.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

ROUTERS = (nockblocks_router, charts_router, system_router)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.started_at = datetime.now(timezone.utc)

    async with app_lifespan() as container:
        app.state.container = container
        logger.info("api.started", title=app.title, version=app.version)
        yield

    logger.info("api.stopped")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Loaded from the environment when omitted.
    """
    settings = settings or get_settings()
    update_logging_from_settings(settings)
    init_container(settings)

    app = FastAPI(
        title=settings.api.title,
        description=settings.api.description,
        version=settings.api.version,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    for router in ROUTERS:
        app.include_router(router)

    return app


# Console logging until the settings are read
configure_logging()

app = create_app()
