"""Database repositories."""

from cadence.db.repositories.athlete import AthleteRepository
from cadence.db.repositories.program import ProgramRepository
from cadence.db.repositories.assignment import AssignmentRepository
from cadence.db.repositories.workout_session import WorkoutSessionRepository
from cadence.db.repositories.set_log import SetLogRepository

__all__ = [
    "AthleteRepository",
    "ProgramRepository",
    "AssignmentRepository",
    "WorkoutSessionRepository",
    "SetLogRepository",
]
