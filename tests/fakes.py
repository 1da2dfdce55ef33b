"""In-memory implementations of the gateway contracts for workflow tests.

The credential store mirrors the SQL store's semantics: the code lookup
happens first (so unknown codes win over weak passwords), the password policy
is enforced before any mutation, and consuming a code is serialized so only
one concurrent caller can redeem it.
"""

import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Optional

from passlib.context import CryptContext

from jwtgate.domain.entities import AccountStatus, Person, Role, User
from jwtgate.domain.events import BaseDomainEvent
from jwtgate.domain.interfaces import (
    ICredentialStore,
    IEventPublisher,
    IMailSender,
    IProfileStore,
    IRoleStore,
)
from jwtgate.domain.services.password_policy import PasswordPolicy
from jwtgate.utils.security import hash_code

SIGNING_KEY = "test-signing-key-that-is-long-enough-for-hs256"
ISSUER = "https://auth.test"
AUDIENCE = "https://api.test"


class InMemoryCredentialStore(ICredentialStore):
    def __init__(self, password_policy: PasswordPolicy, pwd_context: CryptContext):
        self.users: Dict[int, User] = {}
        self._policy = password_policy
        self._pwd_context = pwd_context
        self._lock = asyncio.Lock()

    def add_user(
        self,
        email: str,
        password: Optional[str] = None,
        status: AccountStatus = AccountStatus.ACTIVE,
        activation_code: Optional[str] = None,
        person_id: int = 1,
    ) -> User:
        user = User(
            id=len(self.users) + 1,
            email=email,
            person_id=person_id,
            hashed_password=self._pwd_context.hash(password) if password else None,
            status=status,
            activation_code_hash=hash_code(activation_code) if activation_code else None,
        )
        self.users[user.id] = user
        return user

    def _by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        return next((u for u in self.users.values() if u.email.lower() == email), None)

    async def activate(self, activation_code: str, password: str) -> Optional[User]:
        digest = hash_code(activation_code)
        async with self._lock:
            user = next(
                (
                    u
                    for u in self.users.values()
                    if u.activation_code_hash == digest and u.status == AccountStatus.PENDING
                ),
                None,
            )
            if user is None:
                return None
            self._policy.enforce(password)
            user.hashed_password = self._pwd_context.hash(password)
            user.status = AccountStatus.ACTIVE
            user.activation_code_hash = None
            return user

    async def validate_credentials(self, username: str, password: str) -> Optional[User]:
        user = self._by_email(username)
        if user is None or not user.hashed_password:
            return None
        if not self._pwd_context.verify(password, user.hashed_password):
            return None
        return user

    async def is_active(self, user: User) -> bool:
        return user.status == AccountStatus.ACTIVE

    async def assign_reset_code(
        self, email: str, code_digest: str, expires_at: datetime
    ) -> Optional[User]:
        async with self._lock:
            user = self._by_email(email)
            if user is None:
                return None
            user.reset_code_hash = code_digest
            user.reset_code_expires_at = expires_at
            return user

    async def complete_password_reset(self, reset_code: str, password: str) -> Optional[User]:
        digest = hash_code(reset_code)
        now = datetime.now(timezone.utc)
        async with self._lock:
            user = next(
                (
                    u
                    for u in self.users.values()
                    if u.reset_code_hash == digest and u.reset_code_expires_at > now
                ),
                None,
            )
            if user is None:
                return None
            self._policy.enforce(password)
            user.hashed_password = self._pwd_context.hash(password)
            user.reset_code_hash = None
            user.reset_code_expires_at = None
            return user


class InMemoryRoleStore(IRoleStore):
    def __init__(self):
        self.roles: Dict[int, List[Role]] = {}

    def assign(self, user_id: int, *roles: Role) -> None:
        self.roles.setdefault(user_id, []).extend(roles)

    async def get_by_user_id(self, user_id: int) -> List[Role]:
        return list(self.roles.get(user_id, []))


class InMemoryProfileStore(IProfileStore):
    def __init__(self):
        self.people: Dict[int, Person] = {}
        self.lookups = 0

    def add(self, person: Person) -> Person:
        self.people[person.id] = person
        return person

    async def get_by_id(self, person_id: int) -> Optional[Person]:
        self.lookups += 1
        return self.people.get(person_id)


class RecordingMailSender(IMailSender):
    """Records every message instead of sending it."""

    def __init__(self):
        self.sent: List[dict] = []

    async def send_password_recovery_mail(
        self, destination: str, code: str, subject: str, text_body: str, html_body: str
    ) -> None:
        self.sent.append(
            {
                "destination": destination,
                "code": code,
                "subject": subject,
                "text_body": text_body,
                "html_body": html_body,
            }
        )


class RecordingEventPublisher(IEventPublisher):
    """Keeps published events so tests can assert on them."""

    def __init__(self):
        self.published_events: List[BaseDomainEvent] = []

    async def publish(self, event: BaseDomainEvent) -> None:
        self.published_events.append(event)
