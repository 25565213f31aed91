"""
Session relocator: move or swap the date of a not-yet-started session.

Move
    The athlete has no session on the target date: the session's date
    is updated directly.

Swap
    Another session occupies the target date: the two sessions exchange
    dates.  Because ``(athlete_id, date)`` is unique at every statement
    (not only at commit), the exchange stages through a reserved
    sentinel date:

    1. occupant -> sentinel
    2. source   -> target
    3. occupant -> source's original date

    All three updates commit together or not at all.

Only NOT_STARTED sessions move; progress is never relocated.
"""

import datetime

from sqlmodel import Session

from cadence.core.config import settings
from cadence.core.exceptions import ConflictError, NotFoundError, ValidationError
from cadence.core.logging import get_logger
from cadence.core.transactions import transaction
from cadence.db.repositories.workout_session import WorkoutSessionRepository
from cadence.models.workout_session import SessionStatus, WorkoutSession
from cadence.schemas.workout_session import RelocatedSession, RelocationAction, RelocationResult

logger = get_logger(__name__)


class SessionRelocator:
    def __init__(self, session: Session, sentinel_date: datetime.date | None = None):
        self.session = session
        self.sessions = WorkoutSessionRepository(session)
        self.sentinel_date = sentinel_date or settings.SWAP_SENTINEL_DATE

    def relocate(self, session_id: int, target_date: datetime.date) -> RelocationResult:
        with transaction(self.session):
            source = self.sessions.get_by_id(session_id)
            if source is None:
                raise NotFoundError("session", details={"session_id": session_id})
            self._check_movable(source, target_date)

            occupant = self.sessions.get_by_athlete_and_date(source.athlete_id, target_date)
            if occupant is None:
                result = self._move(source, target_date)
            else:
                result = self._swap(source, occupant, target_date)

        logger.info("session_relocated", action=result.action.value, session_id=session_id,
                    target_date=target_date.isoformat(),
                    swapped_session_id=result.swapped_session.id if result.swapped_session else None)
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_movable(self, source: WorkoutSession, target_date: datetime.date) -> None:
        if source.status != SessionStatus.NOT_STARTED:
            raise ValidationError("session", "Only NOT_STARTED sessions can be moved",
                                  details={"session_id": source.id, "status": SessionStatus(source.status).value})
        if source.date == target_date:
            raise ValidationError("new_date", "New date is the same as current date",
                                  details={"session_id": source.id, "date": target_date.isoformat()})
        if target_date == self.sentinel_date:
            raise ValidationError("new_date", f"{target_date.isoformat()} is reserved and cannot hold a session")

    def _move(self, source: WorkoutSession, target_date: datetime.date) -> RelocationResult:
        source.date = target_date
        source.is_manually_scheduled = True
        self.sessions.save(source)
        return RelocationResult(action=RelocationAction.MOVED,
                                moved_session=RelocatedSession(id=source.id, new_date=target_date))

    def _swap(self, source: WorkoutSession, occupant: WorkoutSession,
              target_date: datetime.date) -> RelocationResult:
        if SessionStatus(occupant.status).has_progress:
            raise ValidationError("new_date", "Cannot swap: the session on the target date is not NOT_STARTED",
                                  details={"occupant_session_id": occupant.id, "status": SessionStatus(occupant.status).value})
        if self.sessions.get_by_athlete_and_date(source.athlete_id, self.sentinel_date) is not None:
            raise ConflictError("The reserved swap date is occupied; the swap cannot be staged",
                                details={"sentinel_date": self.sentinel_date.isoformat()})

        original_date = source.date

        occupant.date = self.sentinel_date
        self.sessions.save(occupant)

        source.date = target_date
        source.is_manually_scheduled = True
        self.sessions.save(source)

        occupant.date = original_date
        occupant.is_manually_scheduled = True
        self.sessions.save(occupant)

        return RelocationResult(action=RelocationAction.SWAPPED,
                                moved_session=RelocatedSession(id=source.id, new_date=target_date),
                                swapped_session=RelocatedSession(id=occupant.id, new_date=original_date))
