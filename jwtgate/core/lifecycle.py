"""Application lifecycle management.

Startup loads settings, configures logging and optionally creates the tables;
shutdown disposes the database engine.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from structlog import get_logger

from jwtgate.core.config import get_settings
from jwtgate.core.logging import configure_logging
from jwtgate.infrastructure.database import create_db_and_tables
from jwtgate.infrastructure.dependency_injection.auth_dependencies import get_engine

logger = get_logger(__name__)


def create_lifespan_manager():
    """Create the application lifespan manager."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings = get_settings()
        configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

        engine = get_engine()
        if settings.DATABASE_CREATE_TABLES:
            await create_db_and_tables(engine)
        logger.info("application_startup", env=settings.APP_ENV, version=settings.VERSION)

        yield

        await engine.dispose()
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
