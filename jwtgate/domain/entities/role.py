from typing import List, Optional

from sqlalchemy import JSON
from sqlmodel import Column, Field, SQLModel


class Role(SQLModel, table=True):
    """A named bundle of authorization claims assigned to users.

    Attributes:
        id: The unique identifier for the role.
        name: Unique role name.
        claims: Claim strings granted by this role, embedded in full tokens.
    """

    __tablename__ = "roles"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True, index=True)
    claims: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))


class UserRoleLink(SQLModel, table=True):
    """Assignment of a role to a user."""

    __tablename__ = "user_roles"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    role_id: int = Field(foreign_key="roles.id", primary_key=True)
