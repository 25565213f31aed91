"""
Set logging service.

Every write of a logged set is followed, in the same transaction, by the
completion evaluator.  A resulting completion notification is handed to
the dispatcher only after the commit, so delivery can never fail or slow
down the logging write.
"""

from typing import Optional

from sqlmodel import Session

from cadence.core.exceptions import NotFoundError
from cadence.core.logging import get_logger
from cadence.core.transactions import transaction
from cadence.db.repositories.athlete import AthleteRepository
from cadence.db.repositories.program import ProgramRepository
from cadence.db.repositories.set_log import SetLogRepository
from cadence.models.set_log import SetLog
from cadence.notifications.dispatch import NotificationDispatcher, NullDispatcher
from cadence.schemas.set_log import SetLogCreate, SetLogResponse, SetLogUpdate
from cadence.training.completion import CompletionEvaluator, CompletionOutcome

logger = get_logger(__name__)

_REQUIRED_FIELDS = frozenset({"reps", "weight", "unit"})


class SetLogService:
    """Service for logged sets and the completion state they drive."""

    def __init__(self, session: Session, dispatcher: Optional[NotificationDispatcher] = None):
        self.session = session
        self.dispatcher = dispatcher or NullDispatcher()
        self.repository = SetLogRepository(session)
        self.programs = ProgramRepository(session)
        self.athletes = AthleteRepository(session)
        self.evaluator = CompletionEvaluator(session)

    def create(self, data: SetLogCreate) -> SetLogResponse:
        with transaction(self.session):
            if self.programs.get_workout_exercise(data.workout_exercise_id) is None:
                raise NotFoundError("workout_exercise", details={"workout_exercise_id": data.workout_exercise_id})
            if self.athletes.get_by_id(data.athlete_id) is None:
                raise NotFoundError("athlete", details={"athlete_id": data.athlete_id})

            entry = self.repository.save(SetLog(**data.model_dump()))
            outcome = self.evaluator.evaluate(entry.workout_exercise_id, entry.athlete_id)
            response = self._to_response(entry, outcome)

        self._dispatch(outcome)
        return response

    def update(self, set_log_id: int, data: SetLogUpdate) -> SetLogResponse:
        with transaction(self.session):
            entry = self._get_entry(set_log_id)
            for key, value in data.model_dump(exclude_unset=True).items():
                # Explicit null clears optional fields; required columns keep their value
                if value is None and key in _REQUIRED_FIELDS:
                    continue
                setattr(entry, key, value)
            entry = self.repository.save(entry)
            outcome = self.evaluator.evaluate(entry.workout_exercise_id, entry.athlete_id)
            response = self._to_response(entry, outcome)

        self._dispatch(outcome)
        return response

    def delete(self, set_log_id: int) -> None:
        with transaction(self.session):
            entry = self._get_entry(set_log_id)
            workout_exercise_id, athlete_id = entry.workout_exercise_id, entry.athlete_id
            self.repository.delete(entry)
            outcome = self.evaluator.evaluate(workout_exercise_id, athlete_id)

        self._dispatch(outcome)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry(self, set_log_id: int) -> SetLog:
        entry = self.repository.get_by_id(set_log_id)
        if entry is None:
            raise NotFoundError("set_log", details={"set_log_id": set_log_id})
        return entry

    def _dispatch(self, outcome: Optional[CompletionOutcome]) -> None:
        if outcome is None or outcome.notification is None:
            return
        logger.info("session_fully_completed", session_id=outcome.completion.session_id,
                    athlete_id=outcome.notification.athlete_id)
        self.dispatcher.submit(outcome.notification)

    @staticmethod
    def _to_response(entry: SetLog, outcome: Optional[CompletionOutcome]) -> SetLogResponse:
        return SetLogResponse(id=entry.id, workout_exercise_id=entry.workout_exercise_id,
                              athlete_id=entry.athlete_id, set_number=entry.set_number, reps=entry.reps,
                              weight=entry.weight, unit=entry.unit, rpe=entry.rpe, rir=entry.rir,
                              notes=entry.notes, completed_at=entry.completed_at,
                              session=outcome.completion if outcome else None)
