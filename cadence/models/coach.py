"""
Coach and athlete database models.

Coach/athlete CRUD lives outside this service; the scheduling core only
reads these rows (names for reports, timezone for "today").
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Coach(SQLModel, table=True):
    """A coach owning programs and athletes.

    ``timezone`` is the single IANA zone all of the coach's athletes are
    scheduled in.
    """

    __tablename__ = "coaches"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    timezone: Optional[str] = Field(default=None, max_length=64)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class Athlete(SQLModel, table=True):
    __tablename__ = "athletes"

    id: Optional[int] = Field(default=None, primary_key=True)
    coach_id: int = Field(foreign_key="coaches.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = Field(default=True)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
