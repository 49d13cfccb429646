"""Employee Intake API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map IntakeError → {message, errors?} JSON responses
    - The store connection is verified during startup; if it fails the
      lifespan raises and the server exits instead of serving requests
    - The connection pool is disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, registration
from app.core.errors import StartupConnectionError
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging
from app.config import get_settings

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
    try:
        await manager.verify_connection()
    except StartupConnectionError as e:
        logger.critical(str(e), extra={"error_code": e.code})
        await close_db()
        raise
    logger.info("Connected to employee store")
    if settings.database_create_tables:
        await manager.create_tables()
    logger.info(f"Employee Intake API listening on port {settings.port}")
    yield
    logger.info("Employee Intake API shutting down")
    await close_db()


app = FastAPI(
    title="Employee Intake API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(registration.router)

register_error_handlers(app)
