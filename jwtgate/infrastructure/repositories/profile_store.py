from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from jwtgate.domain.entities import Person
from jwtgate.domain.interfaces import IProfileStore


class ProfileStore(IProfileStore):
    """Reads person records from the ``persons`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_by_id(self, person_id: int) -> Optional[Person]:
        async with self._session_factory() as session:
            return await session.get(Person, person_id)
