"""
Logged set API schemas.
"""

import datetime
from typing import Optional

from pydantic import Field

from cadence.models.workout_session import SessionStatus
from cadence.schemas.base import CamelModel


class SetLogCreate(CamelModel):
    workout_exercise_id: int
    athlete_id: int
    set_number: int = Field(..., ge=1)
    reps: int = Field(..., ge=0)
    weight: float = Field(..., ge=0)
    unit: str = Field("lbs", max_length=10)
    rpe: Optional[float] = Field(None, ge=1, le=10)
    rir: Optional[int] = Field(None, ge=0, le=10)
    notes: Optional[str] = Field(None, max_length=1000)


class SetLogUpdate(CamelModel):
    reps: Optional[int] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=10)
    rpe: Optional[float] = Field(None, ge=1, le=10)
    rir: Optional[int] = Field(None, ge=0, le=10)
    notes: Optional[str] = Field(None, max_length=1000)


class SessionCompletion(CamelModel):
    """Session state after the completion evaluator ran."""

    session_id: int
    previous_status: SessionStatus
    status: SessionStatus
    completed_items: int
    total_items: int
    completion_percentage: int

    @property
    def became_fully_completed(self) -> bool:
        return (self.status is SessionStatus.FULLY_COMPLETED
                and self.previous_status is not SessionStatus.FULLY_COMPLETED)


class SetLogResponse(CamelModel):
    id: int
    workout_exercise_id: int
    athlete_id: int
    set_number: int
    reps: int
    weight: float
    unit: str
    rpe: Optional[float]
    rir: Optional[int]
    notes: Optional[str]
    completed_at: datetime.datetime
    session: Optional[SessionCompletion] = None
