"""Authentication router package: activation, token and password reset endpoints."""

from fastapi import APIRouter

from .routes import activate as activate_route
from .routes import create_token as create_token_route
from .routes import request_password_reset as request_password_reset_route
from .routes import reset_password as reset_password_route

router = APIRouter(prefix="/auth", tags=["auth"])

router.include_router(activate_route.router, prefix="/activate")
router.include_router(create_token_route.router, prefix="/token")
router.include_router(request_password_reset_route.router, prefix="/request-password-reset")
router.include_router(reset_password_route.router, prefix="/reset-password")

__all__ = ["router"]
