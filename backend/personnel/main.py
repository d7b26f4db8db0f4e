"""Personnel API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PersonnelError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Connection provider initialized once on startup via lifespan; handlers get a
      per-request session through Depends(get_db)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - No explicit pool teardown on shutdown: the pool lives as long as the process
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from personnel import __version__
from personnel.api.error_handlers import register_error_handlers
from personnel.api.routes import employee, health, index, person
from personnel.config import get_settings
from personnel.infrastructure.database import init_db
from personnel.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Personnel API started")
    yield
    logger.info("Personnel API shutting down")


app = FastAPI(
    title="Personnel API", version=__version__, lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(index.router)
app.include_router(health.router)
app.include_router(person.router)
app.include_router(employee.router)

register_error_handlers(app)
