import re
from typing import List

from jwtgate.core.exceptions import PasswordValidationError

MAX_BCRYPT_BYTES = 72


class PasswordPolicy:
    """Validates passwords against a defined security policy.

    The policy requires passwords to meet a minimum and maximum length and to
    include a mix of uppercase letters, lowercase letters, digits and special
    characters. Unlike a fail-fast check, ``validate`` reports every violated
    rule so the caller can show all of them at once.

    The maximum length is measured in UTF-8 bytes and defaults to 72, the
    longest input bcrypt takes into account.
    """

    SPECIAL_CHARS = r"[!@#$%^&*()_+\-=\[\]{}|;:,.<>?/~`'\"\\]"

    def __init__(
        self,
        min_length: int = 8,
        max_length: int = MAX_BCRYPT_BYTES,
        require_uppercase: bool = True,
        require_lowercase: bool = True,
        require_digit: bool = True,
        require_special_char: bool = True,
    ):
        self.min_length = min_length
        self.max_length = max_length
        self.require_uppercase = require_uppercase
        self.require_lowercase = require_lowercase
        self.require_digit = require_digit
        self.require_special_char = require_special_char

    def validate(self, password: str) -> List[str]:
        """Returns the list of policy violations (empty when the password is acceptable)."""
        if not password:
            return ["Password cannot be empty"]

        failures = []
        if len(password) < self.min_length:
            failures.append(f"Password must be at least {self.min_length} characters long")
        if len(password.encode("utf-8")) > self.max_length:
            failures.append(f"Password must not exceed {self.max_length} bytes")
        if self.require_uppercase and not re.search(r"[A-Z]", password):
            failures.append("Password must contain at least one uppercase letter")
        if self.require_lowercase and not re.search(r"[a-z]", password):
            failures.append("Password must contain at least one lowercase letter")
        if self.require_digit and not re.search(r"\d", password):
            failures.append("Password must contain at least one digit")
        if self.require_special_char and not re.search(self.SPECIAL_CHARS, password):
            failures.append("Password must contain at least one special character")
        return failures

    def enforce(self, password: str) -> None:
        """Raises `PasswordValidationError` carrying every violation, if any."""
        failures = self.validate(password)
        if failures:
            raise PasswordValidationError(failures)
