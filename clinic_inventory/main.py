"""Clinic Inventory API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ClinicError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database session manager created on startup and held on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers registered from api/error_handlers.py (one place, three layers)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clinic_inventory.api.error_handlers import register_error_handlers
from clinic_inventory.api.routes import auth, health, products
from clinic_inventory.config import get_settings
from clinic_inventory.infrastructure.database import DatabaseSessionManager
from clinic_inventory.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Clinic Inventory API started")
    yield
    logger.info("Clinic Inventory API shutting down")
    await app.state.db_manager.close()


app = FastAPI(
    title="Clinic Inventory API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(products.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "clinic_inventory.main:app",
        host=settings.server_host,
        port=settings.server_port,
    )
