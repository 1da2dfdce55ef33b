from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from jwtgate.domain.entities import Role, UserRoleLink
from jwtgate.domain.interfaces import IRoleStore


class RoleStore(IRoleStore):
    """Reads role assignments through the ``user_roles`` link table.

    Roles are queried on every call; nothing is cached, so a role change is
    reflected in the next token issued.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_by_user_id(self, user_id: int) -> List[Role]:
        statement = (
            select(Role)
            .join(UserRoleLink, UserRoleLink.role_id == Role.id)
            .where(UserRoleLink.user_id == user_id)
            .order_by(Role.name)
        )
        async with self._session_factory() as session:
            result = await session.execute(statement)
            return list(result.scalars().all())
