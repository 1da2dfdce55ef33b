from typing import Optional

from sqlmodel import Field, SQLModel


class Person(SQLModel, table=True):
    """Profile attributes of a user, embedded into issued tokens.

    Read-only from the point of view of this service.
    """

    __tablename__ = "persons"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
