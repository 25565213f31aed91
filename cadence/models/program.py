"""
Program, workout template and prescribed exercise models.

A program is an ordered grid of workouts tagged with
``(week_number, day_number)``.  Each workout prescribes exercises; the
prescribed set count is the completion target for that exercise.
"""

import datetime
import re
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

_LEADING_INT = re.compile(r"^\s*(\d+)")


class Program(SQLModel, table=True):
    __tablename__ = "programs"

    id: Optional[int] = Field(default=None, primary_key=True)
    coach_id: int = Field(foreign_key="coaches.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)
    is_archived: bool = Field(default=False)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class Workout(SQLModel, table=True):
    """A workout template at one ``(week, day)`` slot of a program."""

    __tablename__ = "workouts"
    __table_args__ = (UniqueConstraint("program_id", "week_number", "day_number", name="uq_workout_program_week_day"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    program_id: int = Field(foreign_key="programs.id", ondelete="CASCADE", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    week_number: int = Field(nullable=False, ge=1)
    day_number: int = Field(nullable=False, ge=1)


class WorkoutExercise(SQLModel, table=True):
    """One prescribed exercise inside a workout."""

    __tablename__ = "workout_exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_id: int = Field(foreign_key="workouts.id", ondelete="CASCADE", nullable=False, index=True)
    exercise_name: str = Field(nullable=False, max_length=255)
    order: int = Field(default=1, nullable=False)

    # Free text as entered by the coach, e.g. "3", "3-4", "5x"
    prescribed_sets: Optional[str] = Field(default=None, max_length=20)
    prescribed_reps: Optional[str] = Field(default=None, max_length=20)
    prescribed_load: Optional[str] = Field(default=None, max_length=50)

    @property
    def set_target(self) -> int:
        """Leading integer of ``prescribed_sets``; 0 when unset or unparseable."""
        if not self.prescribed_sets:
            return 0
        match = _LEADING_INT.match(self.prescribed_sets)
        return int(match.group(1)) if match else 0
