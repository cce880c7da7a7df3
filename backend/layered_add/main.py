"""Layered Add API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LayeredAddError → structured JSON responses
    - CORS configured from settings
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from layered_add import __version__
from layered_add.api.error_handlers import register_error_handlers
from layered_add.api.routes import add, health
from layered_add.config import get_settings
from layered_add.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Layered Add API started")
    yield
    logger.info("Layered Add API shutting down")


app = FastAPI(title="Layered Add API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(add.router)

register_error_handlers(app)
