"""EMS API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmsError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The employees table exists before the first request is served
    - The store handle lives on app.state.db for the lifetime of the process

Design Decisions:
    - Lifespan over @app.on_event: creates the DatabaseSessionManager on startup
      and disposes it on shutdown (no module-level connection state)
    - create_app() factory: tests build isolated apps; `app` serves uvicorn
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ems import __version__
from ems.api.error_handlers import register_error_handlers
from ems.api.routes import employees, health
from ems.config import Settings, get_settings
from ems.infrastructure.database import DatabaseSessionManager
from ems.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        )
        await db_manager.create_schema()
        app.state.db = db_manager
        logger.info("EMS API started")
        try:
            yield
        finally:
            logger.info("EMS API shutting down")
            app.state.db = None
            await db_manager.dispose()

    app = FastAPI(
        title="Employee Management System API",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(employees.router)

    register_error_handlers(app)
    return app


app = create_app()
