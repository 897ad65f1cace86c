"""Delivery API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly in one place, no auto-discovery
    - Global error handlers map every failure → normalized JSON body (api/error_handlers.py)
    - CORS configured from settings (not hardcoded)
    - Logging and database set up on startup and torn down on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Log handlers returned by setup_logging are kept local to the lifespan and closed
      by shutdown_logging (no module-level logging state)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import addresses, deliveries, health, permissions, products
from app.config import get_settings
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    log_handlers = setup_logging(
        settings.log_level,
        settings.log_format,
        info_file=settings.log_info_file,
        error_file=settings.log_error_file,
    )
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Delivery API started")
    try:
        yield
    finally:
        logger.info("Delivery API shutting down")
        await close_db()
        shutdown_logging(log_handlers)


settings = get_settings()
app = FastAPI(
    title="Delivery API", version=settings.service_version, lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(addresses.router)
app.include_router(products.router)
app.include_router(permissions.router)
app.include_router(deliveries.router)

register_error_handlers(app)
