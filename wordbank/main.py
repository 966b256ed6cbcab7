"""Wordbank API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - transfer router registered before words router (/export, /import vs /{word_id})
    - Global error handlers map WordbankError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - SQLite databases get their tables created on startup; server databases
      are migrated with alembic
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from wordbank.infrastructure.database import init_db
from wordbank.infrastructure.observability import setup_logging
from wordbank.config import get_settings
from wordbank.api.error_handlers import register_error_handlers
from wordbank.api.routes import health, transfer, words

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
    if settings.database_url.startswith("sqlite"):
        await manager.create_all()
    logger.info("Wordbank API started")
    yield
    await manager.dispose()
    logger.info("Wordbank API shutting down")


app = FastAPI(
    title="Wordbank API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(transfer.router)
app.include_router(words.router)

register_error_handlers(app)

# Mounted AFTER API routes so /api/v1/* takes precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
