from .requests import (
    ActivateRequest,
    CompletePasswordResetRequest,
    CreateTokenRequest,
    RequestPasswordResetRequest,
)
from .responses import TokenResponse

__all__ = [
    "ActivateRequest",
    "CompletePasswordResetRequest",
    "CreateTokenRequest",
    "RequestPasswordResetRequest",
    "TokenResponse",
]
