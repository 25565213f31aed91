"""
Scheduling schemas.

Value types flowing between the calendar walker, the conflict detector
and the schedule persister, plus the conflict report returned to callers.
"""

import datetime
from typing import Optional

from pydantic import Field

from cadence.models.workout_session import SessionStatus
from cadence.schemas.base import CamelModel


class WorkoutTemplate(CamelModel):
    """A program workout at one ``(week, day)`` slot, ready for scheduling."""

    workout_id: int
    title: str
    week_number: int = Field(..., ge=1)
    day_number: int = Field(..., ge=1)
    exercise_count: int = Field(0, ge=0)


class ScheduledWorkout(CamelModel):
    """One template mapped onto a calendar date."""

    workout_id: int
    date: datetime.date
    title: str
    week_number: int
    day_number: int
    exercise_count: int = 0


class ScheduleConflict(CamelModel):
    date: datetime.date
    existing_session_id: int
    existing_title: Optional[str]
    existing_status: SessionStatus
    existing_program_id: Optional[int] = None
    existing_assignment_id: Optional[int] = None
    new_title: str


class ConflictReport(CamelModel):
    """Advisory result of conflict detection for one athlete."""

    has_conflicts: bool = False
    conflicts: list[ScheduleConflict] = Field(default_factory=list)

    @property
    def conflict_count(self) -> int:
        return len(self.conflicts)


class PersistResult(CamelModel):
    created: int = 0
    skipped: int = 0
    total: int = 0
