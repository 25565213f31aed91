"""
Calendar walker: maps a program's week/day grid onto calendar dates.

Pure functions, no I/O.

Algorithm
---------

Starting at ``start_date`` (inclusive), walk forward one calendar day at
a time.  Every day whose weekday index is one of ``training_days`` is
given to the next unconsumed workout template.  The walk stops once all
templates are consumed.

When a program week defines more workouts than there are training days
in a calendar week, the extra workouts roll into the following calendar
week.  No workout is ever dropped, only shifted later.

Weekday indices follow the 0 = Sunday ... 6 = Saturday convention.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cadence.core.config import settings
from cadence.core.exceptions import ValidationError
from cadence.schemas.schedule import ScheduledWorkout, WorkoutTemplate

_ONE_DAY = datetime.timedelta(days=1)


def weekday_index(day: datetime.date) -> int:
    """Weekday of ``day`` with Sunday as 0 (Python's ``weekday()`` has Monday as 0)."""
    return (day.weekday() + 1) % 7


def validate_training_days(training_days: Iterable[int]) -> list[int]:
    """Return the sorted, de-duplicated training days or raise.

    Must run before :func:`generate_schedule`; an empty set would make the
    walk never terminate.
    """
    days = list(training_days)
    if not days:
        raise ValidationError("training_days", "trainingDays must contain at least one weekday")
    for day in days:
        if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6:
            raise ValidationError("training_days", f"Invalid weekday {day!r}: weekdays are integers 0-6 (0 = Sunday)",
                                  details={"field": "training_days", "value": day})
    return sorted(set(days))


def order_templates(templates: Iterable[WorkoutTemplate]) -> list[WorkoutTemplate]:
    """Sort templates by ``(week_number, day_number)``, stable for ties."""
    return sorted(templates, key=lambda t: (t.week_number, t.day_number))


def generate_schedule(templates: Sequence[WorkoutTemplate], start_date: datetime.date,
                      training_days: Iterable[int], ) -> list[ScheduledWorkout]:
    """Map ordered ``templates`` onto calendar dates.

    Args:
        templates: workout templates, already ordered by week then day.
        start_date: first date eligible for a workout.
        training_days: validated weekday indices (see
            :func:`validate_training_days`).

    Returns:
        One :class:`ScheduledWorkout` per template, in input order, with
        strictly increasing dates.
    """
    allowed = frozenset(training_days)
    schedule: list[ScheduledWorkout] = []
    current = start_date

    for template in templates:
        while weekday_index(current) not in allowed:
            current += _ONE_DAY
        schedule.append(ScheduledWorkout(workout_id=template.workout_id, date=current, title=template.title,
                                         week_number=template.week_number, day_number=template.day_number,
                                         exercise_count=template.exercise_count, ))
        current += _ONE_DAY

    return schedule


def local_today(timezone: Optional[str] = None) -> datetime.date:
    """Today's date in ``timezone`` (falls back to the configured default zone)."""
    try:
        zone = ZoneInfo(timezone or settings.DEFAULT_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        zone = ZoneInfo(settings.DEFAULT_TIMEZONE)
    return datetime.datetime.now(zone).date()
