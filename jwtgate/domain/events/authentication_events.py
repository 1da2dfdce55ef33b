"""Authentication Domain Events.

These events represent the security-relevant outcomes of the authentication
workflow. Successful and failed attempts are separate event types so that
monitoring can tell them apart without parsing log messages.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class BaseDomainEvent:
    """Base class for all domain events.

    Attributes:
        occurred_at: When the event occurred
        correlation_id: Optional correlation ID for tracking
    """

    occurred_at: datetime
    correlation_id: Optional[str]

    def __post_init__(self):
        """Ensure occurred_at is timezone-aware."""
        if not self.occurred_at.tzinfo:
            object.__setattr__(self, "occurred_at", self.occurred_at.replace(tzinfo=timezone.utc))


@dataclass(frozen=True)
class AccountActivatedEvent(BaseDomainEvent):
    """Emitted when an activation code is redeemed and the account becomes active."""

    user_id: int
    email: str


@dataclass(frozen=True)
class ActivationFailedEvent(BaseDomainEvent):
    """Emitted when an activation attempt fails.

    Attributes:
        code_prefix: Masked activation code that was presented
        failure_reason: ``unknown_code`` or ``weak_password``
    """

    code_prefix: str
    failure_reason: str


@dataclass(frozen=True)
class TokenIssuedEvent(BaseDomainEvent):
    """Emitted when a full/lightweight token pair is issued."""

    user_id: int
    expires_at: datetime
    claim_count: int


@dataclass(frozen=True)
class AuthenticationFailedEvent(BaseDomainEvent):
    """Emitted when a login attempt is rejected.

    Attributes:
        username: Masked username that was presented
        failure_reason: ``invalid_credentials``, ``account_pending`` or
            ``account_locked``
    """

    username: str
    failure_reason: str
    user_id: Optional[int] = None


@dataclass(frozen=True)
class PasswordResetRequestedEvent(BaseDomainEvent):
    """Emitted when a reset code is issued and mailed to an existing user."""

    user_id: int
    email: str
    code_expires_at: datetime


@dataclass(frozen=True)
class PasswordResetCompletedEvent(BaseDomainEvent):
    """Emitted when a reset code is consumed and the password replaced."""

    user_id: int
    email: str


@dataclass(frozen=True)
class PasswordResetFailedEvent(BaseDomainEvent):
    """Emitted when a reset completion attempt fails.

    Attributes:
        code_prefix: Masked reset code that was presented
        failure_reason: ``unknown_code`` or ``weak_password``
    """

    code_prefix: str
    failure_reason: str
