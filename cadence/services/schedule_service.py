"""
Schedule service.

Calendar view of scheduled sessions, rescheduling (move/swap) and
skipping.
"""

import datetime

from sqlmodel import Session

from cadence.core.exceptions import NotFoundError, ValidationError
from cadence.core.logging import get_logger
from cadence.core.transactions import transaction
from cadence.db.repositories.athlete import AthleteRepository
from cadence.db.repositories.workout_session import WorkoutSessionRepository
from cadence.models.workout_session import SessionStatus
from cadence.scheduling.relocator import SessionRelocator
from cadence.schemas.workout_session import (AthleteSchedule, RelocationResult, ScheduleQuery,
                                             SkipSessionResponse, WorkoutSessionResponse, )

logger = get_logger(__name__)


class ScheduleService:
    def __init__(self, session: Session):
        self.session = session
        self.sessions = WorkoutSessionRepository(session)
        self.athletes = AthleteRepository(session)

    def list_schedule(self, query: ScheduleQuery) -> list[AthleteSchedule]:
        """Sessions in ``[start_date, end_date]`` grouped per active athlete."""
        athletes = self.athletes.get_active(coach_id=query.coach_id, athlete_id=query.athlete_id)
        entries = self.sessions.get_by_athletes_date_range([a.id for a in athletes], query.start_date,
                                                           query.end_date)
        by_athlete: dict[int, list[WorkoutSessionResponse]] = {a.id: [] for a in athletes}
        for entry in entries:
            by_athlete[entry.athlete_id].append(WorkoutSessionResponse.model_validate(entry))
        return [AthleteSchedule(id=a.id, name=a.name, sessions=by_athlete[a.id]) for a in athletes]

    def move(self, session_id: int, new_date: datetime.date) -> RelocationResult:
        return SessionRelocator(self.session).relocate(session_id, new_date)

    def set_skipped(self, session_id: int, skip: bool) -> SkipSessionResponse:
        with transaction(self.session):
            entry = self.sessions.get_by_id(session_id)
            if entry is None:
                raise NotFoundError("session", details={"session_id": session_id})
            if entry.status != SessionStatus.NOT_STARTED:
                raise ValidationError("session", "Only NOT_STARTED sessions can be skipped",
                                      details={"session_id": session_id})
            entry.is_skipped = skip
            self.sessions.save(entry)
            response = SkipSessionResponse(id=entry.id, is_skipped=entry.is_skipped)
        logger.info("session_skip_updated", session_id=session_id, skip=skip)
        return response
