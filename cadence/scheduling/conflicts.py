"""
Conflict detector.

Before any schedule is written, report every date on which the athlete
already has a session that belongs to a *different* assignment (or to
no assignment at all).  Read-only and purely advisory: the storage
uniqueness constraint remains the final arbiter.
"""

from typing import Optional, Sequence

from sqlmodel import Session

from cadence.db.repositories.workout_session import WorkoutSessionRepository
from cadence.schemas.schedule import ConflictReport, ScheduleConflict, ScheduledWorkout


def detect_conflicts(session: Session, athlete_id: int, schedule: Sequence[ScheduledWorkout],
                     assignment_id: Optional[int] = None, ) -> ConflictReport:
    """Compare a generated schedule with the athlete's existing sessions.

    Sessions already linked to ``assignment_id`` are the athlete's own
    previous run of this assignment and never count as conflicts.  Any
    other session does, whatever its progress.
    """
    if not schedule:
        return ConflictReport()

    repository = WorkoutSessionRepository(session)
    existing = repository.get_by_athlete_and_dates(athlete_id, (item.date for item in schedule))
    existing_by_date = {s.date: s for s in existing
                        if assignment_id is None or s.assignment_id != assignment_id}

    conflicts = []
    for item in schedule:
        occupant = existing_by_date.get(item.date)
        if occupant is None:
            continue
        conflicts.append(ScheduleConflict(date=item.date, existing_session_id=occupant.id,
                                          existing_title=occupant.title, existing_status=occupant.status,
                                          existing_program_id=occupant.program_id,
                                          existing_assignment_id=occupant.assignment_id, new_title=item.title, ))

    return ConflictReport(has_conflicts=bool(conflicts), conflicts=conflicts)
