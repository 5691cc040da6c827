from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

from perfscore import __version__
from perfscore.api.errors import register_error_handlers
from perfscore.api.routes import feedback, health, performance, scoring
from perfscore.config.settings import Settings

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("api_startup", mode=app.state.settings.mode.value)
    yield
    logger.info("api_shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="PerfScore",
        description="Performance scoring API for KPIs, reviews and 360 feedback",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or Settings()

    register_error_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(scoring.router, prefix="/api/v1", tags=["scoring"])
    app.include_router(performance.router, prefix="/api/v1", tags=["performance"])
    app.include_router(feedback.router, prefix="/api/v1", tags=["feedback"])

    return app
