"""Tests for logged sets driving session completion."""

import datetime

import pytest
from sqlmodel import select

from cadence.core.exceptions import NotFoundError
from cadence.models.program import Workout, WorkoutExercise
from cadence.models.workout_session import SessionStatus, WorkoutSession
from cadence.notifications.messages import WorkoutCompletedNotification
from cadence.schemas.set_log import SetLogCreate, SetLogUpdate
from cadence.services.set_log_service import SetLogService

MONDAY = datetime.date(2027, 3, 1)


@pytest.fixture
def workout(db, make):
    """One athlete, a 2 exercise x 2 set workout and its scheduled session."""
    coach = make.coach()
    athlete = make.athlete(coach)
    program = make.program(coach, weeks=1, days=1, exercises=2, prescribed_sets="2")
    template = db.exec(select(Workout).where(Workout.program_id == program.id)).one()
    exercise_ids = [ex.id for ex in db.exec(select(WorkoutExercise).order_by(WorkoutExercise.order)).all()]
    entry = make.workout_session(athlete, MONDAY, title=template.name, program=program, workout=template)
    return athlete.id, exercise_ids, entry.id


def _create(athlete_id: int, exercise_id: int, set_number: int = 1) -> SetLogCreate:
    return SetLogCreate(workout_exercise_id=exercise_id, athlete_id=athlete_id, set_number=set_number, reps=5,
                        weight=135)


class TestSetLogService:
    def test_create_reports_session_state(self, db, workout, dispatcher):
        athlete_id, exercise_ids, session_id = workout

        response = SetLogService(db, dispatcher).create(_create(athlete_id, exercise_ids[0]))

        assert response.id is not None
        assert response.session.session_id == session_id
        assert response.session.status is SessionStatus.PARTIALLY_COMPLETED
        assert dispatcher.sent == []

    def test_completing_the_workout_notifies_once(self, db, workout, dispatcher):
        athlete_id, exercise_ids, session_id = workout
        service = SetLogService(db, dispatcher)

        for exercise_id in exercise_ids:
            for number in (1, 2):
                service.create(_create(athlete_id, exercise_id, number))
        service.create(_create(athlete_id, exercise_ids[0], 3))

        assert len(dispatcher.sent) == 1
        notification = dispatcher.sent[0]
        assert isinstance(notification, WorkoutCompletedNotification)
        assert notification.completion_percent == 100
        assert notification.date == MONDAY
        assert db.get(WorkoutSession, session_id).status is SessionStatus.FULLY_COMPLETED

    def test_update_recomputes(self, db, workout):
        athlete_id, exercise_ids, _ = workout
        service = SetLogService(db)
        created = service.create(_create(athlete_id, exercise_ids[0]))

        updated = service.update(created.id, SetLogUpdate(reps=8, notes="felt easy"))

        assert (updated.reps, updated.weight, updated.notes) == (8, 135, "felt easy")
        assert updated.session.status is SessionStatus.PARTIALLY_COMPLETED

    def test_update_clears_optional_fields_set_to_null(self, db, workout):
        athlete_id, exercise_ids, _ = workout
        service = SetLogService(db)
        data = _create(athlete_id, exercise_ids[0]).model_copy(update={"notes": "grindy", "rpe": 9.0, "rir": 1})
        created = service.create(data)

        updated = service.update(created.id, SetLogUpdate.model_validate({"notes": None, "rpe": None, "rir": None,
                                                                          "reps": None}))

        assert (updated.notes, updated.rpe, updated.rir) == (None, None, None)
        assert updated.reps == 5

    def test_update_leaves_unsent_fields(self, db, workout):
        athlete_id, exercise_ids, _ = workout
        service = SetLogService(db)
        data = _create(athlete_id, exercise_ids[0]).model_copy(update={"notes": "grindy"})
        created = service.create(data)

        updated = service.update(created.id, SetLogUpdate(weight=140))

        assert (updated.notes, updated.weight) == ("grindy", 140)

    def test_delete_keeps_status(self, db, workout):
        athlete_id, exercise_ids, session_id = workout
        service = SetLogService(db)
        created = service.create(_create(athlete_id, exercise_ids[0]))

        service.delete(created.id)

        entry = db.get(WorkoutSession, session_id)
        db.refresh(entry)
        assert entry.status is SessionStatus.PARTIALLY_COMPLETED
        assert entry.completed_items == 0

    def test_unknown_exercise(self, db, workout):
        athlete_id, _, _ = workout
        with pytest.raises(NotFoundError):
            SetLogService(db).create(_create(athlete_id, 999))

    def test_unknown_set(self, db):
        with pytest.raises(NotFoundError):
            SetLogService(db).delete(404)
