"""Email configuration settings.

Covers the SMTP connection used by fastapi-mail and the three templates of
the password reset message. The templates are jinja2 sources rendered with
``code`` and ``email``.
"""

from typing import Optional

from pydantic import EmailStr, Field, SecretStr
from pydantic_settings import BaseSettings


class EmailSettings(BaseSettings):
    """Email configuration settings.

    Security considerations:
    - SMTP credentials are handled as SecretStr to prevent logging
    - The HTML template is rendered with autoescaping enabled
    """

    PASSWORD_RESET_SUBJECT: str = Field(..., min_length=1)
    PASSWORD_RESET_TEXT_BODY: str = Field(..., min_length=1)
    PASSWORD_RESET_HTML_BODY: str = Field(..., min_length=1)

    EMAIL_SMTP_HOST: str = "localhost"
    EMAIL_SMTP_PORT: int = Field(default=587, ge=1, le=65535)
    EMAIL_SMTP_USERNAME: Optional[str] = None
    EMAIL_SMTP_PASSWORD: Optional[SecretStr] = None
    EMAIL_SMTP_USE_TLS: bool = True
    EMAIL_SMTP_USE_SSL: bool = False

    EMAIL_FROM_EMAIL: EmailStr = "noreply@example.com"
    EMAIL_FROM_NAME: str = "jwtgate"

    EMAIL_TEST_MODE: bool = Field(
        default=False,
        description="Suppress SMTP delivery (messages are built but not sent)",
    )
