"""AutoRenter API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AutoRenterError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Sample data seeded through the services, never by raw inserts
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autorenter.api.error_handlers import register_error_handlers
from autorenter.api.routes import health, locations, log, vehicles
from autorenter.config import get_settings
from autorenter.db.seed import seed_sample_data
from autorenter.infrastructure.database import init_db
from autorenter.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.seed_sample_data:
        async with manager.session() as db:
            await seed_sample_data(db)
    logger.info("AutoRenter API started")
    yield
    await manager.dispose()
    logger.info("AutoRenter API shutting down")


app = FastAPI(
    title="AutoRenter API", version="1.0.0", lifespan=lifespan,
)

# CORS origins come from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", "x-total-count", "x-status-reason"],
)

# Routes
app.include_router(health.router)
app.include_router(locations.router)
app.include_router(vehicles.router)
app.include_router(log.router)

register_error_handlers(app)
