"""Tests for assignment cleanup: future unstarted sessions go, progress stays."""

import datetime

import pytest
from sqlmodel import select

from cadence.core.exceptions import NotFoundError
from cadence.models.assignment import ProgramAssignment
from cadence.models.workout_session import SessionStatus, WorkoutSession
from cadence.scheduling.cleanup import AssignmentCleanupService

CUTOFF = datetime.date(2027, 3, 10)


@pytest.fixture
def assigned(db, make):
    """An assignment with past, future, started and unstarted sessions."""
    coach = make.coach()
    athlete = make.athlete(coach)
    program = make.program(coach)
    assignment = make.assignment(program, athlete)
    sessions = {
        "past": make.workout_session(athlete, CUTOFF - datetime.timedelta(days=2), assignment=assignment),
        "today": make.workout_session(athlete, CUTOFF, assignment=assignment),
        "future": make.workout_session(athlete, CUTOFF + datetime.timedelta(days=2), assignment=assignment),
        "partial": make.workout_session(athlete, CUTOFF + datetime.timedelta(days=4), assignment=assignment,
                                        status=SessionStatus.PARTIALLY_COMPLETED),
        "full": make.workout_session(athlete, CUTOFF + datetime.timedelta(days=6), assignment=assignment,
                                     status=SessionStatus.FULLY_COMPLETED),
        "unrelated": make.workout_session(athlete, CUTOFF + datetime.timedelta(days=1)),
    }
    return assignment, {name: s.id for name, s in sessions.items()}


def _remaining_ids(db) -> set[int]:
    return {s.id for s in db.exec(select(WorkoutSession)).all()}


class TestCleanup:
    def test_deletes_only_future_unstarted_sessions(self, db, assigned):
        assignment, ids = assigned

        result = AssignmentCleanupService(db).cleanup(assignment.id, as_of=CUTOFF)

        assert (result.deleted, result.preserved) == (2, 2)
        assert _remaining_ids(db) == {ids["past"], ids["partial"], ids["full"], ids["unrelated"]}

    def test_assignment_untouched(self, db, assigned):
        assignment, _ = assigned
        AssignmentCleanupService(db).cleanup(assignment.id, as_of=CUTOFF)
        assert db.get(ProgramAssignment, assignment.id).is_active is True

    def test_unknown_assignment(self, db):
        with pytest.raises(NotFoundError):
            AssignmentCleanupService(db).cleanup(999, as_of=CUTOFF)

    def test_repeated_cleanup_is_a_no_op(self, db, assigned):
        assignment, _ = assigned
        service = AssignmentCleanupService(db)
        service.cleanup(assignment.id, as_of=CUTOFF)
        result = service.cleanup(assignment.id, as_of=CUTOFF)
        assert (result.deleted, result.preserved) == (0, 2)


class TestDeactivate:
    def test_deactivates_and_cleans(self, db, assigned):
        assignment, ids = assigned

        updated, result = AssignmentCleanupService(db).deactivate(assignment.id, as_of=CUTOFF)

        assert updated.is_active is False
        assert (result.deleted, result.preserved) == (2, 2)
        assert ids["partial"] in _remaining_ids(db)


class TestDelete:
    def test_deletes_row_and_detaches_survivors(self, db, assigned):
        assignment, ids = assigned

        result = AssignmentCleanupService(db).delete(assignment.id, as_of=CUTOFF)

        assert (result.deleted, result.preserved) == (2, 2)
        assert db.get(ProgramAssignment, assignment.id) is None
        survivors = {s.id: s for s in db.exec(select(WorkoutSession)).all()}
        assert set(survivors) == {ids["past"], ids["partial"], ids["full"], ids["unrelated"]}
        assert all(s.assignment_id is None for s in survivors.values())
        assert survivors[ids["full"]].status is SessionStatus.FULLY_COMPLETED
