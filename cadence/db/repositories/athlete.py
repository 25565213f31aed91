"""Athlete and coach repository (read-only from the scheduling core)."""

from typing import Iterable, Optional

from sqlmodel import Session, select

from cadence.models.coach import Athlete, Coach


class AthleteRepository:
    """Repository for Athlete/Coach lookups."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, athlete_id: int) -> Optional[Athlete]:
        return self.session.get(Athlete, athlete_id)

    def get_many(self, athlete_ids: Iterable[int]) -> dict[int, Athlete]:
        ids = list(athlete_ids)
        if not ids:
            return {}
        statement = select(Athlete).where(Athlete.id.in_(ids))
        return {a.id: a for a in self.session.exec(statement).all()}

    def get_active(self, coach_id: Optional[int] = None, athlete_id: Optional[int] = None) -> list[Athlete]:
        statement = select(Athlete).where(Athlete.is_active == True)  # noqa: E712
        if coach_id is not None:
            statement = statement.where(Athlete.coach_id == coach_id)
        if athlete_id is not None:
            statement = statement.where(Athlete.id == athlete_id)
        return list(self.session.exec(statement.order_by(Athlete.name)).all())

    def get_coach(self, coach_id: int) -> Optional[Coach]:
        return self.session.get(Coach, coach_id)
