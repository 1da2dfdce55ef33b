"""Main application settings.

Composes the settings from the different modules (app, auth, email, database)
into a single ``Settings`` class loaded from environment variables and an
optional ``.env`` file.

Settings are loaded lazily through ``get_settings`` so that importing the
application never requires the environment to be complete; missing required
values fail the first time settings are actually needed.
"""

from functools import lru_cache

import structlog
from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .auth import AuthSettings
from .database import DatabaseSettings
from .email import EmailSettings

logger = structlog.get_logger(__name__)


class Settings(AppSettings, DatabaseSettings, AuthSettings, EmailSettings):
    """The settings class that aggregates all application configuration.

    Security Note:
        - JWT_SECRET_KEY and EMAIL_SMTP_PASSWORD are secrets and are never
          logged or rendered.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Returns the process-wide settings instance, loading it on first use."""
    settings = Settings()
    logger.info(
        "Settings loaded",
        environment=settings.APP_ENV,
        issuer=settings.JWT_ISSUER,
        audience=settings.JWT_AUDIENCE,
        email_test_mode=settings.EMAIL_TEST_MODE,
    )
    return settings
