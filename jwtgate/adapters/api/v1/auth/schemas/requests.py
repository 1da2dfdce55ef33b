"""Request-payload Pydantic models for authentication endpoints.

Field names are exposed in camelCase on the wire (``activationCode``,
``ticketCode``); snake_case names are accepted as well.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ActivateRequest(CamelModel):
    """Payload expected by ``POST /auth/activate``."""

    activation_code: str = Field(..., min_length=1, examples=["6f1c2a..."])
    # Policy checks happen in the workflow so every failure is reported.
    password: str = Field(..., examples=["Str0ngP@ssw0rd"])


class CreateTokenRequest(CamelModel):
    """Payload expected by ``POST /auth/token``."""

    username: str = Field(..., min_length=1, examples=["alice@example.com"])
    password: str = Field(..., examples=["Str0ngP@ssw0rd"])


class RequestPasswordResetRequest(CamelModel):
    """Payload expected by ``POST /auth/request-password-reset``."""

    email: EmailStr = Field(..., examples=["alice@example.com"])


class CompletePasswordResetRequest(CamelModel):
    """Payload expected by ``POST /auth/reset-password``."""

    ticket_code: str = Field(..., min_length=1, examples=["abc123"])
    password: str = Field(..., examples=["N3wP@ss!"])
