"""Credential store backed by SQLAlchemy.

Implements ``ICredentialStore`` on top of the ``users`` table. Every operation
that consumes a one-time code is a conditional ``UPDATE ... RETURNING`` whose
``WHERE`` clause re-checks the code, so when two requests race on the same
code exactly one of them updates the row and the other sees no match.

Password hashing runs in a worker thread to keep bcrypt off the event loop.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

from jwtgate.core.logging import mask_email
from jwtgate.domain.entities import AccountStatus, User
from jwtgate.domain.interfaces import ICredentialStore
from jwtgate.domain.services.password_policy import PasswordPolicy
from jwtgate.utils.security import hash_code

logger = get_logger(__name__)


def _normalize(email: str) -> str:
    return email.strip().lower()


class CredentialStore(ICredentialStore):
    """SQLAlchemy implementation of the credential store.

    Attributes:
        session_factory: Factory producing one session per operation
        password_policy: Policy enforced before any password is stored
        pwd_context: passlib context used to hash and verify passwords
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        password_policy: PasswordPolicy,
        pwd_context: CryptContext,
    ):
        self._session_factory = session_factory
        self._password_policy = password_policy
        self._pwd_context = pwd_context

    async def activate(self, activation_code: str, password: str) -> Optional[User]:
        code_digest = hash_code(activation_code)
        pending = (
            User.activation_code_hash == code_digest,
            User.status == AccountStatus.PENDING,
        )
        async with self._session_factory() as session:
            user_id = await session.scalar(select(User.id).where(*pending))
            if user_id is None:
                return None

            self._password_policy.enforce(password)
            hashed_password = await run_in_threadpool(self._pwd_context.hash, password)

            statement = (
                update(User)
                .where(User.id == user_id, *pending)
                .values(
                    hashed_password=hashed_password,
                    status=AccountStatus.ACTIVE,
                    activation_code_hash=None,
                    updated_at=datetime.now(timezone.utc),
                )
                .returning(User.id)
                .execution_options(synchronize_session=False)
            )
            user = await self._commit_update(session, statement)

        logger.debug("Activation code consumed", found=user is not None)
        return user

    async def validate_credentials(self, username: str, password: str) -> Optional[User]:
        async with self._session_factory() as session:
            user = await session.scalar(
                select(User).where(func.lower(User.email) == _normalize(username))
            )

        if user is None or not user.hashed_password:
            # Keep the response time of unknown users in line with known ones.
            await run_in_threadpool(self._pwd_context.dummy_verify)
            return None

        if not await run_in_threadpool(self._pwd_context.verify, password, user.hashed_password):
            logger.debug("Password mismatch", user_id=user.id)
            return None
        return user

    async def is_active(self, user: User) -> bool:
        return user.status == AccountStatus.ACTIVE

    async def assign_reset_code(
        self, email: str, code_digest: str, expires_at: datetime
    ) -> Optional[User]:
        statement = (
            update(User)
            .where(func.lower(User.email) == _normalize(email))
            .values(
                reset_code_hash=code_digest,
                reset_code_expires_at=expires_at,
                updated_at=datetime.now(timezone.utc),
            )
            .returning(User.id)
            .execution_options(synchronize_session=False)
        )
        async with self._session_factory() as session:
            user = await self._commit_update(session, statement)

        logger.debug("Reset code assignment", email=mask_email(email), found=user is not None)
        return user

    async def complete_password_reset(self, reset_code: str, password: str) -> Optional[User]:
        code_digest = hash_code(reset_code)
        now = datetime.now(timezone.utc)
        outstanding = (
            User.reset_code_hash == code_digest,
            User.reset_code_expires_at > now,
        )
        async with self._session_factory() as session:
            user_id = await session.scalar(select(User.id).where(*outstanding))
            if user_id is None:
                return None

            self._password_policy.enforce(password)
            hashed_password = await run_in_threadpool(self._pwd_context.hash, password)

            statement = (
                update(User)
                .where(User.id == user_id, *outstanding)
                .values(
                    hashed_password=hashed_password,
                    reset_code_hash=None,
                    reset_code_expires_at=None,
                    updated_at=now,
                )
                .returning(User.id)
                .execution_options(synchronize_session=False)
            )
            user = await self._commit_update(session, statement)

        logger.debug("Reset code consumed", found=user is not None)
        return user

    async def _commit_update(self, session: AsyncSession, statement) -> Optional[User]:
        """Executes a conditional update and returns the refreshed row, or None if nothing matched."""
        user_id = (await session.execute(statement)).scalar_one_or_none()
        if user_id is None:
            await session.rollback()
            return None
        user = await session.get(User, user_id, populate_existing=True)
        await session.commit()
        return user
