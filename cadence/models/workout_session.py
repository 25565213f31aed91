"""
Workout session database model.

One calendar-dated training occurrence for one athlete.  The
``(athlete_id, date)`` unique constraint is the final arbiter of every
scheduling race: at most one session per athlete per day.
"""

import datetime
import enum
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class SessionStatus(str, enum.Enum):
    NOT_STARTED = "NOT_STARTED"
    PARTIALLY_COMPLETED = "PARTIALLY_COMPLETED"
    FULLY_COMPLETED = "FULLY_COMPLETED"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]

    @property
    def has_progress(self) -> bool:
        return self is not SessionStatus.NOT_STARTED


_STATUS_RANK = {
    SessionStatus.NOT_STARTED: 0,
    SessionStatus.PARTIALLY_COMPLETED: 1,
    SessionStatus.FULLY_COMPLETED: 2,
}


class WorkoutSession(SQLModel, table=True):
    """A scheduled (or imported) session for one athlete on one date.

    Program, workout and assignment links are cleared rather than
    cascaded when their parent disappears, so sessions with progress stay
    queryable forever.
    """

    __tablename__ = "workout_sessions"
    __table_args__ = (UniqueConstraint("athlete_id", "date", name="uq_session_athlete_date"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="athletes.id", ondelete="CASCADE", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    program_id: Optional[int] = Field(default=None, foreign_key="programs.id", ondelete="SET NULL", index=True)
    workout_id: Optional[int] = Field(default=None, foreign_key="workouts.id", ondelete="SET NULL", index=True)
    assignment_id: Optional[int] = Field(default=None, foreign_key="program_assignments.id", ondelete="SET NULL",
                                         index=True)

    title: Optional[str] = Field(default=None, max_length=255)
    week_number: Optional[int] = Field(default=None)
    day_number: Optional[int] = Field(default=None)

    # Completion tracking (maintained by the completion evaluator)
    total_items: int = Field(default=0, nullable=False)
    completed_items: int = Field(default=0, nullable=False)
    completion_percentage: int = Field(default=0, nullable=False)
    status: SessionStatus = Field(default=SessionStatus.NOT_STARTED, nullable=False, index=True)

    is_skipped: bool = Field(default=False, nullable=False)
    is_manually_scheduled: bool = Field(default=False, nullable=False)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
