from __future__ import annotations

"""Structured exception hierarchy for jwtgate.

Every application error carries a human-readable ``message`` and a
machine-readable ``code``. Request-time errors map onto HTTP status codes in
``jwtgate.core.handlers``; ``ConfigurationError`` is raised only while the
service is being wired together and never reaches a request.
"""

from typing import Final, Iterable, List

__all__: Final = [
    "JwtGateError",
    "NotFoundError",
    "UnauthorizedError",
    "ForbiddenError",
    "ValidationError",
    "PasswordValidationError",
    "InternalError",
    "ConfigurationError",
]


class JwtGateError(Exception):
    """Base exception class for all custom errors in jwtgate.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Request-time errors
# ---------------------------------------------------------------------------


class NotFoundError(JwtGateError):
    """Raised when an activation code or reset ticket does not match any user.

    Maps to a `404 Not Found` HTTP status code.
    """

    def __init__(self, message: str = "Not found", code: str = "not_found"):
        super().__init__(message, code)


class UnauthorizedError(JwtGateError):
    """Raised when login credentials are invalid.

    The message is deliberately generic: an unknown username and a wrong
    password produce the same error. Maps to `401 Unauthorized`.
    """

    def __init__(
        self,
        message: str = "Invalid username or password",
        code: str = "invalid_credentials",
    ):
        super().__init__(message, code)


class ForbiddenError(JwtGateError):
    """Raised when credentials are valid but the account cannot be used.

    Covers both pending and locked accounts. Maps to `403 Forbidden`.
    """

    def __init__(
        self,
        message: str = "Account is inactive or locked",
        code: str = "account_unavailable",
    ):
        super().__init__(message, code)


class ValidationError(JwtGateError):
    """Base for domain validation failures. Maps to `422 Unprocessable Entity`."""

    def __init__(self, message: str, code: str = "validation_error"):
        super().__init__(message, code)


class PasswordValidationError(ValidationError):
    """Raised when a new password is rejected by the password policy.

    Attributes:
        failures (List[str]): Every policy rule the password violated.
    """

    def __init__(self, failures: Iterable[str], code: str = "password_policy_violation"):
        self.failures: List[str] = list(failures)
        super().__init__("\n".join(self.failures) or "Password rejected", code)


class InternalError(JwtGateError):
    """Raised when a collaborator fails unexpectedly.

    The original exception is chained as ``__cause__``. Maps to
    `500 Internal Server Error` with a generic message.
    """

    def __init__(
        self,
        message: str = "An internal error occurred",
        code: str = "internal_error",
    ):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Construction-time errors
# ---------------------------------------------------------------------------


class ConfigurationError(JwtGateError):
    """Raised when a component is constructed with missing configuration."""

    def __init__(self, missing: Iterable[str], code: str = "configuration_error"):
        self.missing: List[str] = list(missing)
        super().__init__(
            f"Missing required configuration: {', '.join(self.missing)}", code
        )
