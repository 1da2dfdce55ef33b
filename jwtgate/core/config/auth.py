"""Authentication settings: JWT signing, token lifetimes and password policy.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings


class AuthSettings(BaseSettings):
    """Defines settings for token signing and credential handling.

    Security Note:
        - JWT_SECRET_KEY signs every issued token; it must be a long random
          value, kept out of logs and version control.
        - Issuer and audience are embedded in and verified against every token.
    """

    JWT_SECRET_KEY: SecretStr
    JWT_ISSUER: str = Field(..., min_length=1)
    JWT_AUDIENCE: str = Field(..., min_length=1)
    JWT_ALGORITHM: str = Field(default="HS256", pattern="^HS(256|384|512)$")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60, ge=1)

    PASSWORD_RESET_CODE_EXPIRE_MINUTES: int = Field(default=60, ge=1, le=1440)
    PASSWORD_MIN_LENGTH: int = Field(default=8, ge=1)
    BCRYPT_WORK_FACTOR: int = Field(default=12, ge=4, le=31)

    @field_validator("JWT_SECRET_KEY")
    @classmethod
    def _require_secret(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("JWT_SECRET_KEY must not be empty")
        return value
