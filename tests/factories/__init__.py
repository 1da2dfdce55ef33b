"""Re-export factory functions for generating fake test data."""

from .user import create_fake_person, create_fake_role, create_fake_user

__all__ = ["create_fake_person", "create_fake_role", "create_fake_user"]
