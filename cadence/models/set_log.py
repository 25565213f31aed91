"""
Logged set model.

A set is the unit of logged work the completion evaluator counts.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class SetLog(SQLModel, table=True):
    __tablename__ = "set_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_exercise_id: int = Field(foreign_key="workout_exercises.id", ondelete="CASCADE", nullable=False,
                                     index=True)
    athlete_id: int = Field(foreign_key="athletes.id", ondelete="CASCADE", nullable=False, index=True)

    set_number: int = Field(nullable=False, ge=1)
    reps: int = Field(nullable=False, ge=0)
    weight: float = Field(nullable=False, ge=0)
    unit: str = Field(default="lbs", max_length=10)
    rpe: Optional[float] = Field(default=None)
    rir: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    completed_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
