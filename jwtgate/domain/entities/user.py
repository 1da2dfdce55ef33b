from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime, text
from sqlalchemy import Enum as SAEnum
from sqlmodel import Column, Field, Index, SQLModel, String


class AccountStatus(str, Enum):
    """Lifecycle state of a user account.

    Attributes:
        PENDING: Registered but not yet activated; cannot log in.
        ACTIVE: Activated; may log in and reset its password.
        LOCKED: Disabled by an administrator; cannot log in.
    """

    PENDING = "pending"
    ACTIVE = "active"
    LOCKED = "locked"


class User(SQLModel, table=True):
    """Represents a User entity and acts as an Aggregate Root.

    The email address doubles as the login username. Accounts are created
    elsewhere (registration) in the ``pending`` state together with an
    activation code; this service only activates them, issues tokens for them
    and resets their passwords.

    One-time codes are never stored in plain text: ``activation_code_hash``
    and ``reset_code_hash`` hold SHA-256 digests of the codes handed to the
    user.

    Attributes:
        id: The unique identifier for the user (primary key).
        email: Unique, case-insensitive email address used as username.
        person_id: Reference to the profile record of this user.
        hashed_password: bcrypt hash. Null until the account is activated.
        status: Account lifecycle state.
        activation_code_hash: Digest of the outstanding activation code.
        reset_code_hash: Digest of the outstanding password reset code.
        reset_code_expires_at: Expiry of the outstanding reset code.
        created_at: The timestamp of when the user account was created.
        updated_at: The timestamp of the last update to the user's record.
    """

    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        description="The unique identifier for the user.",
    )
    email: str = Field(
        sa_column=Column(String, unique=True, index=True, nullable=False),
        description="Unique, case-insensitive email address, also used as login username.",
    )
    person_id: int = Field(
        foreign_key="persons.id",
        description="Identifier of the profile record of this user.",
    )
    hashed_password: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Bcrypt-hashed password. Null until the account is activated.",
    )
    status: AccountStatus = Field(
        default=AccountStatus.PENDING,
        sa_column=Column(
            SAEnum(AccountStatus, name="account_status"),
            default=AccountStatus.PENDING,
            nullable=False,
        ),
        description="Account lifecycle state.",
    )
    activation_code_hash: Optional[str] = Field(
        default=None,
        sa_column=Column(String(64), unique=True, nullable=True),
        description="SHA-256 digest of the outstanding activation code.",
    )
    reset_code_hash: Optional[str] = Field(
        default=None,
        sa_column=Column(String(64), unique=True, nullable=True),
        description="SHA-256 digest of the outstanding password reset code.",
    )
    reset_code_expires_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
        description="The expiration timestamp for the password reset code.",
    )
    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(
            DateTime(timezone=True),
            server_default=text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        description="The timestamp of when the user account was created.",
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
        description="The timestamp of the last update to the user's record.",
    )

    __table_args__ = (
        Index("ix_users_email_lower", text("lower(email)"), unique=True),
        {"extend_existing": True},
    )
