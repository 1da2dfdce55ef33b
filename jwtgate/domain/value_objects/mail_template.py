"""Password reset mail template value object."""

from dataclasses import dataclass

from jwtgate.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class PasswordResetMailTemplate:
    """Subject, plain-text body and HTML body of the password reset email.

    The three strings are templates rendered by the mail sender with the reset
    code. All three are required; construction fails fast when any is absent.
    """

    subject: str
    text_body: str
    html_body: str

    def __post_init__(self) -> None:
        missing = [name for name in ("subject", "text_body", "html_body") if not getattr(self, name)]
        if missing:
            raise ConfigurationError(f"password_reset_{name}" for name in missing)
