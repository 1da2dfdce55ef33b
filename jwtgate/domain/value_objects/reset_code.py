"""Reset Code Value Object.

Encapsulates a freshly issued password reset code and its expiry.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, ClassVar, Optional

from jwtgate.core.logging import mask_code
from jwtgate.utils.security import generate_reset_code, hash_code


@dataclass(frozen=True)
class ResetCode:
    """Password reset code value object.

    Attributes:
        value: The raw code mailed to the user (never persisted)
        expires_at: Code expiration timestamp
    """

    value: str
    expires_at: datetime

    DEFAULT_EXPIRY_MINUTES: ClassVar[int] = 60

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Reset code cannot be empty")
        if self.expires_at.tzinfo is None:
            raise ValueError("Reset code expiry must be timezone-aware")

    @classmethod
    def generate(
        cls,
        ttl: Optional[timedelta] = None,
        generator: Callable[[], str] = generate_reset_code,
        now: Optional[datetime] = None,
    ) -> "ResetCode":
        """Generate a new reset code.

        Args:
            ttl: Code lifetime (default: 60 minutes)
            generator: Source of the raw code value
            now: Issue time (default: current UTC time)

        Returns:
            ResetCode: New code with its expiration
        """
        issued_at = now or datetime.now(timezone.utc)
        lifetime = ttl or timedelta(minutes=cls.DEFAULT_EXPIRY_MINUTES)
        return cls(value=generator(), expires_at=issued_at + lifetime)

    @property
    def digest(self) -> str:
        """SHA-256 digest under which the code is stored."""
        return hash_code(self.value)

    def mask_for_logging(self) -> str:
        return mask_code(self.value)
