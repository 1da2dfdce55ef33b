"""Security utilities for password hashing and one-time code handling.

Passwords are hashed with bcrypt through passlib. One-time codes (activation
codes and reset tickets) are high-entropy random values, so they are stored as
SHA-256 digests rather than slow password hashes; this keeps them indexable
while never persisting the raw value.
"""

import hashlib
import secrets

from passlib.context import CryptContext

DEFAULT_BCRYPT_WORK_FACTOR = 12
RESET_CODE_BYTES = 32


def create_password_context(rounds: int = DEFAULT_BCRYPT_WORK_FACTOR) -> CryptContext:
    """Builds the passlib context used to hash and verify passwords.

    Args:
        rounds: bcrypt work factor

    Returns:
        CryptContext: Context configured for bcrypt
    """
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_code(code: str) -> str:
    """Returns the SHA-256 hex digest under which a one-time code is stored."""
    return hashlib.sha256(code.encode("utf-8")).hexdigest()


def generate_reset_code() -> str:
    """Generates a URL-safe, unguessable password reset code (256 bits)."""
    return secrets.token_urlsafe(RESET_CODE_BYTES)
