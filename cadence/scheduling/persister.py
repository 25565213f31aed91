"""
Schedule persister.

Turns a generated schedule into ``WorkoutSession`` rows keyed by
``(athlete_id, date)``.  Dates that already hold a session are skipped,
so repeated calls with the same input are idempotent.

Does not commit: it runs inside the caller's transaction.  A concurrent
writer that wins the race on a date makes the flush fail with an
integrity error, and the whole transaction rolls back.
"""

from typing import Sequence

from sqlmodel import Session

from cadence.core.logging import get_logger
from cadence.db.repositories.workout_session import WorkoutSessionRepository
from cadence.models.workout_session import SessionStatus, WorkoutSession
from cadence.schemas.schedule import PersistResult, ScheduledWorkout

logger = get_logger(__name__)


def persist_schedule(session: Session, athlete_id: int, program_id: int, assignment_id: int,
                     schedule: Sequence[ScheduledWorkout], ) -> PersistResult:
    if not schedule:
        return PersistResult()

    repository = WorkoutSessionRepository(session)
    taken = {s.date for s in repository.get_by_athlete_and_dates(athlete_id, (item.date for item in schedule))}

    to_create = [WorkoutSession(athlete_id=athlete_id, date=item.date, program_id=program_id,
                                workout_id=item.workout_id, assignment_id=assignment_id, title=item.title,
                                week_number=item.week_number, day_number=item.day_number,
                                total_items=item.exercise_count, completed_items=0, completion_percentage=0,
                                status=SessionStatus.NOT_STARTED, )
                 for item in schedule if item.date not in taken]
    if to_create:
        repository.add_all(to_create)

    result = PersistResult(created=len(to_create), skipped=len(schedule) - len(to_create), total=len(schedule))
    logger.info("schedule_persisted", athlete_id=athlete_id, assignment_id=assignment_id, created=result.created,
                skipped=result.skipped, total=result.total)
    return result
