from .authentication_events import (
    AccountActivatedEvent,
    ActivationFailedEvent,
    AuthenticationFailedEvent,
    BaseDomainEvent,
    PasswordResetCompletedEvent,
    PasswordResetFailedEvent,
    PasswordResetRequestedEvent,
    TokenIssuedEvent,
)

__all__ = [
    "AccountActivatedEvent",
    "ActivationFailedEvent",
    "AuthenticationFailedEvent",
    "BaseDomainEvent",
    "PasswordResetCompletedEvent",
    "PasswordResetFailedEvent",
    "PasswordResetRequestedEvent",
    "TokenIssuedEvent",
]
