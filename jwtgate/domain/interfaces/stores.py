"""Store interfaces for abstracting data persistence in the domain layer.

These abstract base classes are the "ports" through which the authentication
workflow reaches account, role and profile data. Concrete adapters live in
``jwtgate.infrastructure.repositories``; tests substitute in-memory fakes.

Every operation that consumes a one-time code is a single call so that the
adapter can implement it as an atomic find-and-invalidate: two concurrent
requests presenting the same code can never both succeed.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from jwtgate.domain.entities import Person, Role, User


class ICredentialStore(ABC):
    """Contract for credential lookup and mutation.

    Implementations own password hashing and enforce the password policy
    before any mutation, raising ``PasswordValidationError`` when a new
    password is rejected.
    """

    @abstractmethod
    async def activate(self, activation_code: str, password: str) -> Optional[User]:
        """Consumes a pending activation code, sets the password and activates the user.

        Args:
            activation_code: The raw activation code presented by the user.
            password: The chosen plaintext password.

        Returns:
            The activated `User`, or `None` when the code does not match a
            pending account (unknown, already consumed, or lost a race).

        Raises:
            PasswordValidationError: If the password violates the policy. The
                code is left untouched in that case.
        """
        raise NotImplementedError

    @abstractmethod
    async def validate_credentials(self, username: str, password: str) -> Optional[User]:
        """Checks a username/password pair and resolves the user.

        Returns:
            The `User` when the password matches, `None` otherwise. An unknown
            username and a wrong password are indistinguishable.
        """
        raise NotImplementedError

    @abstractmethod
    async def is_active(self, user: User) -> bool:
        """Whether the account may log in (activated and not locked)."""
        raise NotImplementedError

    @abstractmethod
    async def assign_reset_code(
        self, email: str, code_digest: str, expires_at: datetime
    ) -> Optional[User]:
        """Stores a reset code digest against the user owning ``email``.

        Any previously outstanding reset code of that user is replaced.

        Returns:
            The updated `User`, or `None` if no user has that email.
        """
        raise NotImplementedError

    @abstractmethod
    async def complete_password_reset(self, reset_code: str, password: str) -> Optional[User]:
        """Consumes an unexpired reset code and sets the new password.

        Returns:
            The updated `User`, or `None` when the code is unknown, expired or
            already consumed.

        Raises:
            PasswordValidationError: If the password violates the policy. The
                code stays outstanding and the old password keeps working.
        """
        raise NotImplementedError


class IRoleStore(ABC):
    """Contract for reading the roles assigned to a user."""

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> List[Role]:
        """Returns every role assigned to the user (possibly empty)."""
        raise NotImplementedError


class IProfileStore(ABC):
    """Contract for reading profile attributes."""

    @abstractmethod
    async def get_by_id(self, person_id: int) -> Optional[Person]:
        """Returns the person record, or `None` if it does not exist."""
        raise NotImplementedError
