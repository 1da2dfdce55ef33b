"""Domain entities, persisted as SQLModel tables."""

from .person import Person
from .role import Role, UserRoleLink
from .user import AccountStatus, User

__all__ = ["AccountStatus", "Person", "Role", "User", "UserRoleLink"]
