"""Response models for authentication endpoints."""

from datetime import datetime

from pydantic import Field

from jwtgate.domain.value_objects import TokenGrant

from .requests import CamelModel


class TokenResponse(CamelModel):
    """Body of a successful ``POST /auth/token``: a full and a lightweight token."""

    expires_at: datetime = Field(..., description="Shared expiry of both tokens (UTC)")
    token: str = Field(..., description="JWT carrying identity and role claims")
    lightweight_token: str = Field(..., description="JWT carrying identity only")

    @classmethod
    def from_grant(cls, grant: TokenGrant) -> "TokenResponse":
        return cls(
            expires_at=grant.expires_at,
            token=grant.token.value,
            lightweight_token=grant.lightweight_token.value,
        )
