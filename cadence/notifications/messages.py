"""Notification messages handed from the core to the delivery worker."""

import datetime
from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class WorkoutCompletedNotification:
    """An athlete's session reached FULLY_COMPLETED for the first time."""

    coach_id: int
    athlete_id: int
    athlete_name: str
    session_title: str
    completion_percent: int
    date: datetime.date

    kind = "workout_completed"

    def to_payload(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["date"] = self.date.isoformat()
        payload["kind"] = self.kind
        return payload


@dataclass(frozen=True)
class ProgramAssignedNotification:
    """A program was (re)assigned and scheduled for an athlete."""

    athlete_id: int
    athlete_name: str
    athlete_email: Optional[str]
    program_id: int
    program_name: str
    start_date: Optional[datetime.date]
    sessions_created: int

    kind = "program_assigned"

    def to_payload(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["start_date"] = self.start_date.isoformat() if self.start_date else None
        payload["kind"] = self.kind
        return payload
