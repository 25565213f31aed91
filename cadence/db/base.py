"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from cadence.models.coach import Athlete, Coach  # noqa: F401
from cadence.models.program import Program, Workout, WorkoutExercise  # noqa: F401
from cadence.models.assignment import ProgramAssignment  # noqa: F401
from cadence.models.workout_session import WorkoutSession  # noqa: F401
from cadence.models.set_log import SetLog  # noqa: F401
