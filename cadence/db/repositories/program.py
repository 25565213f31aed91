"""Program, workout and prescribed exercise repository."""

from typing import Optional

from sqlmodel import Session, select

from cadence.models.program import Program, Workout, WorkoutExercise


class ProgramRepository:
    """Repository for Program database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, program_id: int) -> Optional[Program]:
        return self.session.get(Program, program_id)

    def get_workouts(self, program_id: int) -> list[Workout]:
        """Workouts of a program ordered by ``(week_number, day_number)``."""
        statement = (select(Workout).where(Workout.program_id == program_id)
                     .order_by(Workout.week_number, Workout.day_number, Workout.id))
        return list(self.session.exec(statement).all())

    def count_exercises_by_workout(self, workout_ids: list[int]) -> dict[int, int]:
        if not workout_ids:
            return {}
        statement = select(WorkoutExercise.workout_id).where(WorkoutExercise.workout_id.in_(workout_ids))
        counts = {workout_id: 0 for workout_id in workout_ids}
        for workout_id in self.session.exec(statement).all():
            counts[workout_id] += 1
        return counts

    def get_workout(self, workout_id: int) -> Optional[Workout]:
        return self.session.get(Workout, workout_id)

    def get_exercises(self, workout_id: int) -> list[WorkoutExercise]:
        statement = (select(WorkoutExercise).where(WorkoutExercise.workout_id == workout_id)
                     .order_by(WorkoutExercise.order, WorkoutExercise.id))
        return list(self.session.exec(statement).all())

    def get_workout_exercise(self, workout_exercise_id: int) -> Optional[WorkoutExercise]:
        return self.session.get(WorkoutExercise, workout_exercise_id)
