"""Locale Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LocalizationError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Reference catalog loaded on startup via lifespan; a load failure aborts startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py and are registered here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from locale_catalog.api.error_handlers import register_error_handlers
from locale_catalog.api.routes import health, localization
from locale_catalog.config import get_settings
from locale_catalog.infrastructure.observability import setup_logging
from locale_catalog.infrastructure.packaged_records import PackagedRecordProvider
from locale_catalog.services.localization_service import init_localization

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    service = init_localization(settings, PackagedRecordProvider(settings.data_dir))
    await service.load_all()
    logger.info(
        "Locale Catalog API started",
        extra={
            "culture": settings.ui_culture,
            "country_code": settings.metadata_country_code,
        },
    )
    yield
    logger.info("Locale Catalog API shutting down")


app = FastAPI(
    title="Locale Catalog API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(localization.router)

register_error_handlers(app)
