"""Microwave API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MicrowaveError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Running tick tasks are cancelled on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Services built lazily by api.dependencies, so ASGI test clients that skip the
      lifespan still get a fully wired container
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from microwave.api.dependencies import get_container
from microwave.api.error_handlers import register_error_handlers
from microwave.api.routes import health, programs, sessions
from microwave.config import get_settings
from microwave.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    container = get_container()
    logger.info(
        f"Microwave API started with {len(container.catalog.list_all())} programs",
    )
    yield
    await container.ticker.shutdown()
    logger.info("Microwave API shutting down")


app = FastAPI(
    title="Microwave API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(sessions.router)
app.include_router(programs.router)

register_error_handlers(app)
