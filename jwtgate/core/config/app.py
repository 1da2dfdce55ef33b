"""
Application-wide settings.
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like project name, environment and
    logging behaviour.
    """
    PROJECT_NAME: str = "jwtgate"
    VERSION: str = "0.1.0"
    APP_ENV: str = "development"

    API_HOST: str = "0.0.0.0"
    API_PORT: int = Field(ge=1, le=65535, default=8000)

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
