"""
Program assignment API schemas.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator, model_validator

from cadence.schemas.base import CamelModel
from cadence.schemas.schedule import PersistResult
from cadence.core.exceptions import ValidationError as DomainValidationError
from cadence.scheduling.calendar_walker import validate_training_days


class AssignProgramRequest(CamelModel):
    """Schema for assigning a program to one or more athletes."""

    athlete_ids: list[int] = Field(..., min_length=1, description="Athletes to enrol")
    start_date: Optional[datetime.date] = Field(
        None, description="First eligible calendar date (defaults to today in the coach's timezone)"
    )
    end_date: Optional[datetime.date] = None
    training_days: Optional[list[int]] = Field(
        None, description="Weekday indices 0-6, 0 = Sunday (defaults to Mon/Tue/Thu/Fri)"
    )
    force: bool = Field(False, description="Overwrite conflicting sessions")

    @field_validator("athlete_ids")
    @classmethod
    def _unique_athletes(cls, value: list[int]) -> list[int]:
        return list(dict.fromkeys(value))

    @field_validator("training_days")
    @classmethod
    def _valid_training_days(cls, value: Optional[list[int]]) -> Optional[list[int]]:
        if value is None:
            return None
        try:
            return validate_training_days(value)
        except DomainValidationError as e:
            raise ValueError(e.message) from e

    @model_validator(mode="after")
    def _end_after_start(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class ConflictDate(CamelModel):
    date: datetime.date
    existing_title: Optional[str]
    existing_status: str
    new_title: str


class AthleteConflictReport(CamelModel):
    athlete_id: int
    athlete_name: str
    conflict_count: int
    dates: list[ConflictDate]


class AssignmentConflictResponse(CamelModel):
    """Returned instead of writing when conflicts exist and ``force`` is off."""

    program_id: int
    conflicts: list[AthleteConflictReport]


class AthleteScheduleResult(PersistResult):
    athlete_id: int
    assignment_id: int
    replaced: int = 0


class AssignProgramResponse(CamelModel):
    program_id: int
    results: list[AthleteScheduleResult]
    count: int


class RemovalMode(str, Enum):
    DEACTIVATE = "deactivate"
    DELETE = "delete"


class RemoveAssignmentRequest(CamelModel):
    athlete_id: int
    mode: RemovalMode = RemovalMode.DEACTIVATE
    as_of: Optional[datetime.date] = Field(None, description="Cutoff date (defaults to today)")


class AssignmentResponse(CamelModel):
    id: int
    program_id: int
    athlete_id: int
    start_date: Optional[datetime.date]
    end_date: Optional[datetime.date]
    training_days: list[int]
    is_active: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime


class CleanupResult(CamelModel):
    deleted: int = 0
    preserved: int = 0


class RemoveAssignmentResponse(CleanupResult):
    mode: RemovalMode
    assignment: Optional[AssignmentResponse] = None
