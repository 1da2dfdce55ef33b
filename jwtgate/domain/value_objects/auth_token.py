"""Authentication token value objects.

An ``AuthToken`` is the immutable result of signing a set of claims for a
user. The claim tuple is fixed at issuance; the token has no server-side
lifecycle and stays valid purely by virtue of its signature and expiry.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class AuthToken:
    """A signed, time-bounded assertion of identity.

    Attributes:
        value: The encoded JWT
        subject: The user id the token was issued for
        expires_at: Timezone-aware expiry timestamp
        claims: Authorization claims embedded in the token (empty for
            lightweight tokens)
    """

    value: str
    subject: str
    expires_at: datetime
    claims: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Token value cannot be empty")
        if self.expires_at.tzinfo is None:
            raise ValueError("Token expiry must be timezone-aware")

    @property
    def is_lightweight(self) -> bool:
        return not self.claims


@dataclass(frozen=True)
class TokenGrant:
    """The pair of tokens returned by a successful login.

    Both tokens belong to the same user and share one expiry.
    """

    token: AuthToken
    lightweight_token: AuthToken

    def __post_init__(self) -> None:
        if self.token.expires_at != self.lightweight_token.expires_at:
            raise ValueError("Full and lightweight tokens must share one expiry")
        if self.token.subject != self.lightweight_token.subject:
            raise ValueError("Full and lightweight tokens must share one subject")

    @property
    def expires_at(self) -> datetime:
        return self.token.expires_at
