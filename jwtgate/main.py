"""ASGI entry point: ``uvicorn jwtgate.main:app``."""

from jwtgate.core.application import create_application

app = create_application()
