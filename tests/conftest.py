"""Shared fixtures: an in-memory SQLite database and row factories.

SQLite enforces the ``(athlete_id, date)`` unique constraint per
statement, like PostgreSQL, so swap staging is exercised for real.
"""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import cadence.db.base  # noqa: F401  (registers all tables)
from cadence.api.dependencies import get_dispatcher
from cadence.db.session import get_db
from cadence.main import app
from cadence.models.assignment import ProgramAssignment
from cadence.models.coach import Athlete, Coach
from cadence.models.program import Program, Workout, WorkoutExercise
from cadence.models.set_log import SetLog
from cadence.models.workout_session import SessionStatus, WorkoutSession
from cadence.notifications.dispatch import NotificationDispatcher

MONDAY = datetime.date(2027, 3, 1)


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


class Factory:
    """Creates committed rows with sensible defaults."""

    def __init__(self, session: Session):
        self.session = session

    def _save(self, entry):
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def coach(self, name: str = "Joe", timezone: str | None = "UTC") -> Coach:
        return self._save(Coach(name=name, email=f"{name.lower()}@example.com", timezone=timezone))

    def athlete(self, coach: Coach | None = None, name: str = "Ava", is_active: bool = True) -> Athlete:
        coach = coach or self.coach()
        return self._save(Athlete(coach_id=coach.id, name=name, email=f"{name.lower()}@example.com",
                                  is_active=is_active))

    def program(self, coach: Coach | None = None, weeks: int = 1, days: int = 4, exercises: int = 3,
                prescribed_sets: str | None = "3", name: str = "Strength Block") -> Program:
        """A ``weeks`` x ``days`` grid, each workout with ``exercises`` exercises."""
        coach = coach or self.coach()
        program = self._save(Program(coach_id=coach.id, name=name))
        for week in range(1, weeks + 1):
            for day in range(1, days + 1):
                workout = self._save(Workout(program_id=program.id, name=f"Week {week} - Day {day}",
                                             week_number=week, day_number=day))
                for order in range(1, exercises + 1):
                    self._save(WorkoutExercise(workout_id=workout.id, exercise_name=f"Exercise {order}",
                                               order=order, prescribed_sets=prescribed_sets))
        return program

    def assignment(self, program: Program, athlete: Athlete, start_date: datetime.date = MONDAY,
                   training_days: list[int] | None = None, is_active: bool = True) -> ProgramAssignment:
        return self._save(ProgramAssignment(program_id=program.id, athlete_id=athlete.id, start_date=start_date,
                                            training_days=training_days or [1, 3], is_active=is_active))

    def workout_session(self, athlete: Athlete, date: datetime.date, title: str = "Existing session",
                        status: SessionStatus = SessionStatus.NOT_STARTED,
                        assignment: ProgramAssignment | None = None, program: Program | None = None,
                        workout: Workout | None = None) -> WorkoutSession:
        return self._save(WorkoutSession(athlete_id=athlete.id, date=date, title=title, status=status,
                                         assignment_id=assignment.id if assignment else None,
                                         program_id=program.id if program else None,
                                         workout_id=workout.id if workout else None))

    def set_log(self, workout_exercise: WorkoutExercise, athlete: Athlete, set_number: int = 1) -> SetLog:
        return self._save(SetLog(workout_exercise_id=workout_exercise.id, athlete_id=athlete.id,
                                 set_number=set_number, reps=5, weight=100.0))


@pytest.fixture
def make(db) -> Factory:
    return Factory(db)


class RecordingDispatcher(NotificationDispatcher):
    """Collects submitted notifications instead of delivering them."""

    def __init__(self):
        self.sent = []

    def submit(self, notification) -> None:
        self.sent.append(notification)


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def client(engine, dispatcher):
    """TestClient bound to the in-memory database and the recording dispatcher."""

    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
