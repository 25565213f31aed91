"""SQLModel database models."""

from cadence.models.coach import Athlete, Coach
from cadence.models.program import Program, Workout, WorkoutExercise
from cadence.models.assignment import ProgramAssignment
from cadence.models.workout_session import SessionStatus, WorkoutSession
from cadence.models.set_log import SetLog

__all__ = [
    "Coach",
    "Athlete",
    "Program",
    "Workout",
    "WorkoutExercise",
    "ProgramAssignment",
    "SessionStatus",
    "WorkoutSession",
    "SetLog",
]
