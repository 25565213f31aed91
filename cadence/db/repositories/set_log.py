"""Logged set repository."""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from cadence.models.set_log import SetLog


class SetLogRepository:
    """Repository for SetLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, set_log_id: int) -> Optional[SetLog]:
        return self.session.get(SetLog, set_log_id)

    def save(self, entry: SetLog) -> SetLog:
        self.session.add(entry)
        self.session.flush()
        return entry

    def delete(self, entry: SetLog) -> None:
        self.session.delete(entry)
        self.session.flush()

    def count_by_exercise(self, athlete_id: int, workout_exercise_ids: list[int]) -> dict[int, int]:
        """Number of logged sets per workout exercise for one athlete."""
        if not workout_exercise_ids:
            return {}
        statement = (select(SetLog.workout_exercise_id, func.count(SetLog.id))
                     .where(SetLog.athlete_id == athlete_id, SetLog.workout_exercise_id.in_(workout_exercise_ids))
                     .group_by(SetLog.workout_exercise_id))
        counts = {exercise_id: 0 for exercise_id in workout_exercise_ids}
        for exercise_id, count in self.session.exec(statement).all():
            counts[exercise_id] = count
        return counts
