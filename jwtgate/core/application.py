"""Application factory for creating and configuring the FastAPI application.

Settings are not read here: the factory only wires routers, handlers and the
lifespan, so the application can be imported (and tested with dependency
overrides) without a complete environment.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from jwtgate.adapters.api.v1 import api_router
from jwtgate.core.config.app import AppSettings
from jwtgate.core.handlers import register_exception_handlers
from jwtgate.core.lifecycle import create_lifespan_manager


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    app_settings = AppSettings()
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version=app_settings.VERSION,
        description="Account activation, token issuance and password reset.",
        lifespan=create_lifespan_manager(),
        default_response_class=JSONResponse,
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")

    return app
