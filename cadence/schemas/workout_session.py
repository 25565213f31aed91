"""
Workout session API schemas: calendar view, move/swap and skip.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

from cadence.models.workout_session import SessionStatus
from cadence.schemas.base import CamelModel


class WorkoutSessionResponse(CamelModel):
    id: int
    athlete_id: int
    date: datetime.date
    program_id: Optional[int]
    workout_id: Optional[int]
    assignment_id: Optional[int]
    title: Optional[str]
    week_number: Optional[int]
    day_number: Optional[int]
    total_items: int
    completed_items: int
    completion_percentage: int
    status: SessionStatus
    is_skipped: bool
    is_manually_scheduled: bool


class AthleteSchedule(CamelModel):
    id: int
    name: str
    sessions: list[WorkoutSessionResponse]


class ScheduleQuery(CamelModel):
    start_date: datetime.date
    end_date: datetime.date
    athlete_id: Optional[int] = None
    coach_id: Optional[int] = None

    @model_validator(mode="after")
    def _ordered(self):
        if self.start_date > self.end_date:
            raise ValueError("startDate must be before or equal to endDate")
        return self


class MoveSessionRequest(CamelModel):
    new_date: datetime.date = Field(..., description="Target date (YYYY-MM-DD)")


class RelocationAction(str, Enum):
    MOVED = "moved"
    SWAPPED = "swapped"


class RelocatedSession(CamelModel):
    id: int
    new_date: datetime.date


class RelocationResult(CamelModel):
    action: RelocationAction
    moved_session: RelocatedSession
    swapped_session: Optional[RelocatedSession] = None


class SkipSessionRequest(CamelModel):
    skip: bool


class SkipSessionResponse(CamelModel):
    id: int
    is_skipped: bool
