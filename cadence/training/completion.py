"""
Completion evaluator: derives a session's completion state from logged sets.

Runs after every create/update/delete of a logged set, inside the same
transaction as the write.  The state is recomputed from scratch each
time rather than maintained incrementally.

Rules
-----

- An exercise is *complete* when its prescribed set target is greater
  than zero **and** the athlete has logged at least that many sets for
  it.  Exercises without a target never count as complete.
- ``completed_items`` = complete exercises, ``total_items`` = exercises
  in the workout, ``completion_percentage = round(completed / total * 100)``.
- Status: no complete exercise -> PARTIALLY_COMPLETED if any set exists
  at all, else NOT_STARTED; all exercises complete -> FULLY_COMPLETED;
  otherwise PARTIALLY_COMPLETED.
- Status never moves backward automatically: the stored status is the
  higher of the previous and the recomputed one.

The transition into FULLY_COMPLETED yields a
:class:`~cadence.notifications.messages.WorkoutCompletedNotification`
for the caller to dispatch after commit.
"""

from dataclasses import dataclass
from typing import Optional

from sqlmodel import Session

from cadence.core.logging import get_logger
from cadence.db.repositories.athlete import AthleteRepository
from cadence.db.repositories.program import ProgramRepository
from cadence.db.repositories.set_log import SetLogRepository
from cadence.db.repositories.workout_session import WorkoutSessionRepository
from cadence.models.program import Workout, WorkoutExercise
from cadence.models.workout_session import SessionStatus, WorkoutSession
from cadence.notifications.messages import WorkoutCompletedNotification
from cadence.schemas.set_log import SessionCompletion

logger = get_logger(__name__)


@dataclass(frozen=True)
class CompletionTally:
    completed_items: int
    total_items: int
    completion_percentage: int
    status: SessionStatus


def tally_completion(exercises: list[WorkoutExercise], logged_sets: dict[int, int]) -> CompletionTally:
    """Pure recomputation of the completion counters and status."""
    total_items = len(exercises)
    completed_items = sum(1 for ex in exercises
                          if ex.set_target > 0 and logged_sets.get(ex.id, 0) >= ex.set_target)
    completion_percentage = round(completed_items / total_items * 100) if total_items else 0

    if completed_items == 0:
        any_logged = any(logged_sets.get(ex.id, 0) > 0 for ex in exercises)
        status = SessionStatus.PARTIALLY_COMPLETED if any_logged else SessionStatus.NOT_STARTED
    elif completed_items >= total_items:
        status = SessionStatus.FULLY_COMPLETED
    else:
        status = SessionStatus.PARTIALLY_COMPLETED

    return CompletionTally(completed_items=completed_items, total_items=total_items,
                           completion_percentage=completion_percentage, status=status)


@dataclass(frozen=True)
class CompletionOutcome:
    completion: SessionCompletion
    notification: Optional[WorkoutCompletedNotification] = None


class CompletionEvaluator:
    """Recomputes the completion state of the session owning an exercise."""

    def __init__(self, session: Session):
        self.session = session
        self.programs = ProgramRepository(session)
        self.sessions = WorkoutSessionRepository(session)
        self.set_logs = SetLogRepository(session)
        self.athletes = AthleteRepository(session)

    def evaluate(self, workout_exercise_id: int, athlete_id: int) -> Optional[CompletionOutcome]:
        """Recompute and store the owning session's completion state.

        Returns ``None`` when the exercise, its workout or the athlete's
        session for that workout cannot be found (nothing to update).
        """
        workout_exercise = self.programs.get_workout_exercise(workout_exercise_id)
        if workout_exercise is None:
            return None
        workout = self.programs.get_workout(workout_exercise.workout_id)
        if workout is None:
            return None

        target = self._find_session(athlete_id, workout)
        if target is None:
            logger.debug("completion_no_session", athlete_id=athlete_id, workout_id=workout.id)
            return None

        exercises = self.programs.get_exercises(workout.id)
        logged_sets = self.set_logs.count_by_exercise(athlete_id, [ex.id for ex in exercises])
        tally = tally_completion(exercises, logged_sets)

        previous_status = SessionStatus(target.status)
        status = tally.status if tally.status.rank >= previous_status.rank else previous_status

        target.completed_items = tally.completed_items
        target.total_items = tally.total_items
        target.completion_percentage = tally.completion_percentage
        target.status = status
        self.sessions.save(target)

        completion = SessionCompletion(session_id=target.id, previous_status=previous_status, status=status,
                                       completed_items=tally.completed_items, total_items=tally.total_items,
                                       completion_percentage=tally.completion_percentage)
        notification = self._completion_notice(target, completion) if completion.became_fully_completed else None
        return CompletionOutcome(completion=completion, notification=notification)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find_session(self, athlete_id: int, workout: Workout) -> Optional[WorkoutSession]:
        found = self.sessions.find_for_workout(athlete_id, workout.id)
        if found is None:
            # Sessions created before the workout link existed
            found = self.sessions.find_by_program_title(athlete_id, workout.program_id, workout.name)
        return found

    def _completion_notice(self, target: WorkoutSession,
                           completion: SessionCompletion) -> Optional[WorkoutCompletedNotification]:
        athlete = self.athletes.get_by_id(target.athlete_id)
        if athlete is None:
            return None
        return WorkoutCompletedNotification(coach_id=athlete.coach_id, athlete_id=athlete.id,
                                            athlete_name=athlete.name, session_title=target.title or "Workout",
                                            completion_percent=completion.completion_percentage, date=target.date)
