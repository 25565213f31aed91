"""
Assignment cleanup service.

When an assignment is deactivated or deleted, its future sessions that
were never started are removed.  Any session with progress
(PARTIALLY_COMPLETED or FULLY_COMPLETED) is preserved: logged work is
never deleted.

``deleted`` and ``preserved`` count disjoint sets of sessions linked to
the assignment with ``date >= cutoff``.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from cadence.core.exceptions import NotFoundError
from cadence.core.logging import get_logger
from cadence.core.transactions import transaction
from cadence.db.repositories.assignment import AssignmentRepository
from cadence.db.repositories.athlete import AthleteRepository
from cadence.db.repositories.workout_session import WorkoutSessionRepository
from cadence.models.assignment import ProgramAssignment
from cadence.models.workout_session import SessionStatus
from cadence.scheduling.calendar_walker import local_today
from cadence.schemas.assignment import CleanupResult

logger = get_logger(__name__)

_PROGRESS_STATUSES = (SessionStatus.PARTIALLY_COMPLETED, SessionStatus.FULLY_COMPLETED)


class AssignmentCleanupService:
    """Removes safe-to-discard future sessions of an assignment."""

    def __init__(self, session: Session):
        self.session = session
        self.assignments = AssignmentRepository(session)
        self.sessions = WorkoutSessionRepository(session)
        self.athletes = AthleteRepository(session)

    def cleanup(self, assignment_id: int, as_of: Optional[datetime.date] = None) -> CleanupResult:
        """Delete future NOT_STARTED sessions without touching the assignment."""
        with transaction(self.session):
            assignment = self._get_assignment(assignment_id)
            result = self._purge(assignment, as_of)
        logger.info("assignment_cleaned", assignment_id=assignment_id, deleted=result.deleted,
                    preserved=result.preserved)
        return result

    def deactivate(self, assignment_id: int,
                   as_of: Optional[datetime.date] = None) -> tuple[ProgramAssignment, CleanupResult]:
        """Set ``is_active = False`` and clean up, atomically."""
        with transaction(self.session):
            assignment = self._get_assignment(assignment_id)
            result = self._purge(assignment, as_of)
            assignment.is_active = False
            assignment.updated_at = datetime.datetime.utcnow()
            self.assignments.save(assignment)
        self.session.refresh(assignment)
        logger.info("assignment_deactivated", assignment_id=assignment_id, deleted=result.deleted,
                    preserved=result.preserved)
        return assignment, result

    def delete(self, assignment_id: int, as_of: Optional[datetime.date] = None) -> CleanupResult:
        """Clean up, then delete the assignment row, atomically.

        Sessions that survive the cleanup (past ones and any with progress)
        keep their history but lose the reference to the deleted row.
        """
        with transaction(self.session):
            assignment = self._get_assignment(assignment_id)
            result = self._purge(assignment, as_of)
            survivors = self.sessions.get_by_assignment(assignment_id)
            for survivor in survivors:
                survivor.assignment_id = None
                self.sessions.save(survivor)
            self.assignments.delete(assignment)
        logger.info("assignment_deleted", assignment_id=assignment_id, deleted=result.deleted,
                    preserved=result.preserved, detached=len(survivors))
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_assignment(self, assignment_id: int) -> ProgramAssignment:
        assignment = self.assignments.get_by_id(assignment_id)
        if assignment is None:
            raise NotFoundError("assignment", details={"assignment_id": assignment_id})
        return assignment

    def _purge(self, assignment: ProgramAssignment, as_of: Optional[datetime.date]) -> CleanupResult:
        cutoff = as_of or self._today_for(assignment)
        preserved = self.sessions.get_by_assignment(assignment.id, since=cutoff, statuses=_PROGRESS_STATUSES)
        discardable = self.sessions.get_by_assignment(assignment.id, since=cutoff,
                                                      statuses=(SessionStatus.NOT_STARTED,))
        deleted = self.sessions.delete_all(discardable)
        return CleanupResult(deleted=deleted, preserved=len(preserved))

    def _today_for(self, assignment: ProgramAssignment) -> datetime.date:
        athlete = self.athletes.get_by_id(assignment.athlete_id)
        coach = self.athletes.get_coach(athlete.coach_id) if athlete else None
        return local_today(coach.timezone if coach else None)
