"""
Workout session repository.

Handles database operations for :class:`WorkoutSession`.  Mutations only
flush so several of them can share one transaction.
"""

import datetime
from typing import Iterable, Optional

from sqlalchemy import case
from sqlmodel import Session, select

from cadence.models.assignment import ProgramAssignment
from cadence.models.workout_session import SessionStatus, WorkoutSession


class WorkoutSessionRepository:
    """Repository for WorkoutSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, session_id: int) -> Optional[WorkoutSession]:
        return self.session.get(WorkoutSession, session_id)

    def get_by_athlete_and_date(self, athlete_id: int, date: datetime.date) -> Optional[WorkoutSession]:
        statement = select(WorkoutSession).where(WorkoutSession.athlete_id == athlete_id,
                                                 WorkoutSession.date == date)
        return self.session.exec(statement).first()

    def get_by_athlete_and_dates(self, athlete_id: int, dates: Iterable[datetime.date]) -> list[WorkoutSession]:
        dates = list(dates)
        if not dates:
            return []
        statement = (select(WorkoutSession).where(WorkoutSession.athlete_id == athlete_id,
                                                  WorkoutSession.date.in_(dates)).order_by(WorkoutSession.date))
        return list(self.session.exec(statement).all())

    def get_by_athletes_date_range(self, athlete_ids: list[int], start: datetime.date,
                                   end: datetime.date) -> list[WorkoutSession]:
        if not athlete_ids:
            return []
        statement = (select(WorkoutSession).where(WorkoutSession.athlete_id.in_(athlete_ids),
                                                  WorkoutSession.date >= start, WorkoutSession.date <= end)
                     .order_by(WorkoutSession.date))
        return list(self.session.exec(statement).all())

    def get_by_assignment(self, assignment_id: int, since: Optional[datetime.date] = None,
                          statuses: Optional[Iterable[SessionStatus]] = None) -> list[WorkoutSession]:
        statement = select(WorkoutSession).where(WorkoutSession.assignment_id == assignment_id)
        if since is not None:
            statement = statement.where(WorkoutSession.date >= since)
        if statuses is not None:
            statement = statement.where(WorkoutSession.status.in_(list(statuses)))
        return list(self.session.exec(statement.order_by(WorkoutSession.date)).all())

    # ------------------------------------------------------------------
    # Completion lookups
    # ------------------------------------------------------------------

    def find_for_workout(self, athlete_id: int, workout_id: int) -> Optional[WorkoutSession]:
        """The session logged sets for ``workout_id`` belong to.

        A workout can own several sessions once a program is re-assigned.
        Preference order: linked to an active assignment, not yet fully
        completed, latest date.
        """
        statement = (select(WorkoutSession)
                     .outerjoin(ProgramAssignment, WorkoutSession.assignment_id == ProgramAssignment.id)
                     .where(WorkoutSession.athlete_id == athlete_id, WorkoutSession.workout_id == workout_id)
                     .order_by(case((ProgramAssignment.is_active == True, 0), else_=1),  # noqa: E712
                               case((WorkoutSession.status == SessionStatus.FULLY_COMPLETED, 1), else_=0),
                               WorkoutSession.date.desc()))
        return self.session.exec(statement).first()

    def find_by_program_title(self, athlete_id: int, program_id: int, title: str) -> Optional[WorkoutSession]:
        statement = (select(WorkoutSession).where(WorkoutSession.athlete_id == athlete_id,
                                                  WorkoutSession.program_id == program_id,
                                                  WorkoutSession.title == title)
                     .order_by(WorkoutSession.date))
        return self.session.exec(statement).first()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_all(self, entries: list[WorkoutSession]) -> list[WorkoutSession]:
        self.session.add_all(entries)
        self.session.flush()
        return entries

    def save(self, entry: WorkoutSession) -> WorkoutSession:
        entry.updated_at = datetime.datetime.utcnow()
        self.session.add(entry)
        # Flush per call: date moves must reach the database one at a time
        self.session.flush()
        return entry

    def delete_all(self, entries: list[WorkoutSession]) -> int:
        for entry in entries:
            self.session.delete(entry)
        self.session.flush()
        return len(entries)
