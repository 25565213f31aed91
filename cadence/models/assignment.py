"""
Program assignment model.

Binds one program to one athlete together with the scheduling
parameters used to map the program grid onto calendar dates.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


class ProgramAssignment(SQLModel, table=True):
    """One row per ``(program, athlete)`` pair; re-assigning updates it."""

    __tablename__ = "program_assignments"
    __table_args__ = (UniqueConstraint("program_id", "athlete_id", name="uq_assignment_program_athlete"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    program_id: int = Field(foreign_key="programs.id", ondelete="CASCADE", nullable=False, index=True)
    athlete_id: int = Field(foreign_key="athletes.id", ondelete="CASCADE", nullable=False, index=True)

    start_date: Optional[datetime.date] = Field(default=None)
    end_date: Optional[datetime.date] = Field(default=None)
    # Weekday indices, 0 = Sunday ... 6 = Saturday
    training_days: list[int] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    is_active: bool = Field(default=True, nullable=False)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
