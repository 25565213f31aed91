"""Tests for moving and swapping session dates."""

import datetime

import pytest
from sqlmodel import select

from cadence.core.exceptions import ConflictError, NotFoundError, ValidationError
from cadence.models.workout_session import SessionStatus, WorkoutSession
from cadence.scheduling.relocator import SessionRelocator
from cadence.schemas.workout_session import RelocationAction

MONDAY = datetime.date(2027, 3, 1)
WEDNESDAY = datetime.date(2027, 3, 3)
FRIDAY = datetime.date(2027, 3, 5)
SENTINEL = datetime.date(2099, 12, 31)


def _dates(db) -> dict[int, datetime.date]:
    db.expire_all()
    return {s.id: s.date for s in db.exec(select(WorkoutSession)).all()}


# ======================================================================
# Move
# ======================================================================


class TestMove:
    def test_moves_to_free_date(self, db, make):
        athlete = make.athlete()
        source = make.workout_session(athlete, MONDAY)

        result = SessionRelocator(db).relocate(source.id, FRIDAY)

        assert result.action is RelocationAction.MOVED
        assert result.moved_session.new_date == FRIDAY
        assert result.swapped_session is None
        db.refresh(source)
        assert source.date == FRIDAY
        assert source.is_manually_scheduled is True

    def test_other_athletes_session_does_not_block(self, db, make):
        coach = make.coach()
        athlete = make.athlete(coach, name="Ava")
        other = make.athlete(coach, name="Ben")
        source = make.workout_session(athlete, MONDAY)
        make.workout_session(other, FRIDAY)

        assert SessionRelocator(db).relocate(source.id, FRIDAY).action is RelocationAction.MOVED

    def test_move_leaves_every_other_session_alone(self, db, make):
        coach = make.coach()
        athlete = make.athlete(coach, name="Ava")
        other = make.athlete(coach, name="Ben")
        source = make.workout_session(athlete, MONDAY)
        bystander = make.workout_session(athlete, WEDNESDAY)
        neighbour = make.workout_session(other, FRIDAY)

        SessionRelocator(db).relocate(source.id, FRIDAY)

        assert _dates(db) == {source.id: FRIDAY, bystander.id: WEDNESDAY, neighbour.id: FRIDAY}
        assert db.get(WorkoutSession, bystander.id).is_manually_scheduled is False
        assert db.get(WorkoutSession, neighbour.id).is_manually_scheduled is False


# ======================================================================
# Swap
# ======================================================================


class TestSwap:
    def test_swaps_dates(self, db, make):
        athlete = make.athlete()
        source = make.workout_session(athlete, MONDAY, title="A")
        occupant = make.workout_session(athlete, WEDNESDAY, title="B")

        result = SessionRelocator(db).relocate(source.id, WEDNESDAY)

        assert result.action is RelocationAction.SWAPPED
        assert result.moved_session.new_date == WEDNESDAY
        assert result.swapped_session.id == occupant.id
        assert result.swapped_session.new_date == MONDAY
        assert _dates(db) == {source.id: WEDNESDAY, occupant.id: MONDAY}

    def test_occupant_with_progress_blocks_swap(self, db, make):
        athlete = make.athlete()
        source = make.workout_session(athlete, MONDAY)
        occupant = make.workout_session(athlete, WEDNESDAY, status=SessionStatus.PARTIALLY_COMPLETED)

        with pytest.raises(ValidationError):
            SessionRelocator(db).relocate(source.id, WEDNESDAY)

        assert _dates(db) == {source.id: MONDAY, occupant.id: WEDNESDAY}

    def test_occupied_sentinel_rejects_swap(self, db, make):
        athlete = make.athlete()
        source = make.workout_session(athlete, MONDAY)
        occupant = make.workout_session(athlete, WEDNESDAY)
        make.workout_session(athlete, SENTINEL)

        with pytest.raises(ConflictError):
            SessionRelocator(db).relocate(source.id, WEDNESDAY)

        dates = _dates(db)
        assert dates[source.id] == MONDAY
        assert dates[occupant.id] == WEDNESDAY

    def test_failed_swap_rolls_back_every_step(self, db, make, monkeypatch):
        athlete = make.athlete()
        source = make.workout_session(athlete, MONDAY)
        occupant = make.workout_session(athlete, WEDNESDAY)
        relocator = SessionRelocator(db)

        original_save = relocator.sessions.save
        calls = []

        def flaky_save(entry):
            calls.append(entry.id)
            if len(calls) == 3:
                raise RuntimeError("connection lost")
            return original_save(entry)

        monkeypatch.setattr(relocator.sessions, "save", flaky_save)

        with pytest.raises(RuntimeError):
            relocator.relocate(source.id, WEDNESDAY)

        assert _dates(db) == {source.id: MONDAY, occupant.id: WEDNESDAY}


# ======================================================================
# Guards
# ======================================================================


class TestGuards:
    def test_unknown_session(self, db):
        with pytest.raises(NotFoundError):
            SessionRelocator(db).relocate(404, FRIDAY)

    @pytest.mark.parametrize("status", [SessionStatus.PARTIALLY_COMPLETED, SessionStatus.FULLY_COMPLETED])
    def test_started_session_cannot_move(self, db, make, status):
        source = make.workout_session(make.athlete(), MONDAY, status=status)
        with pytest.raises(ValidationError):
            SessionRelocator(db).relocate(source.id, FRIDAY)

    def test_same_date_rejected(self, db, make):
        source = make.workout_session(make.athlete(), MONDAY)
        with pytest.raises(ValidationError):
            SessionRelocator(db).relocate(source.id, MONDAY)

    def test_sentinel_is_not_a_valid_target(self, db, make):
        source = make.workout_session(make.athlete(), MONDAY)
        with pytest.raises(ValidationError):
            SessionRelocator(db).relocate(source.id, SENTINEL)
