"""Factories for generating fake users, people and roles."""

from datetime import datetime, timezone
from typing import List, Optional

from faker import Faker

from jwtgate.domain.entities import AccountStatus, Person, Role, User

fake = Faker()


def create_fake_user(
    id: Optional[int] = None,
    email: Optional[str] = None,
    person_id: Optional[int] = None,
    hashed_password: Optional[str] = None,
    status: AccountStatus = AccountStatus.ACTIVE,
    activation_code_hash: Optional[str] = None,
) -> User:
    """Create a fake User entity for testing.

    Args:
        id: User ID, defaults to a random integer.
        email: Email, defaults to a fake email.
        person_id: Profile reference, defaults to a random integer.
        hashed_password: Password hash, defaults to None (no password set).
        status: Account status, defaults to ACTIVE.
        activation_code_hash: Digest of an outstanding activation code.

    Returns:
        User: A fake User entity.
    """
    return User(
        id=id if id is not None else fake.random_int(min=1, max=10000),
        email=email if email is not None else fake.unique.email(),
        person_id=person_id if person_id is not None else fake.random_int(min=1, max=10000),
        hashed_password=hashed_password,
        status=status,
        activation_code_hash=activation_code_hash,
        created_at=datetime.now(timezone.utc),
    )


def create_fake_person(id: Optional[int] = None) -> Person:
    return Person(
        id=id if id is not None else fake.random_int(min=1, max=10000),
        first_name=fake.first_name(),
        last_name=fake.last_name(),
    )


def create_fake_role(name: Optional[str] = None, claims: Optional[List[str]] = None) -> Role:
    return Role(
        id=fake.random_int(min=1, max=10000),
        name=name or fake.unique.job(),
        claims=claims if claims is not None else [fake.word() + ":read"],
    )
