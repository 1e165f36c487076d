"""NC News API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure → {"message": ...} JSON bodies
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Tables created from metadata on startup when enabled; no migrations
    - Optional seeding only into empty tables: restarts never duplicate rows
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import articles, comments, endpoints, health, topics, users
from app.config import get_settings
from app.db.seed import is_empty, seed
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging

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
    if settings.database_create_tables:
        await manager.create_tables()
    if settings.seed_on_startup:
        async with manager.session() as db:
            if await is_empty(db):
                await seed(db)
    logger.info("NC News API started")
    yield
    await manager.dispose()
    logger.info("NC News API shutting down")


app = FastAPI(
    title="NC News API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(endpoints.router)
app.include_router(health.router)
app.include_router(topics.router)
app.include_router(articles.router)
app.include_router(comments.router)
app.include_router(users.router)

register_error_handlers(app)
