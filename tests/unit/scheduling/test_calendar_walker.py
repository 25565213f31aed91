"""Tests for the calendar walker.

Pure unit tests: templates are built in memory, no database involved.
"""

import datetime

import pytest

from cadence.core.exceptions import ValidationError
from cadence.scheduling.calendar_walker import (generate_schedule, local_today, order_templates,
                                                validate_training_days, weekday_index)
from cadence.schemas.schedule import WorkoutTemplate

MONDAY = datetime.date(2027, 3, 1)


# ======================================================================
# Helpers
# ======================================================================


def _templates(weeks: int, days: int) -> list[WorkoutTemplate]:
    return [WorkoutTemplate(workout_id=(week - 1) * days + day, title=f"W{week}D{day}", week_number=week,
                            day_number=day, exercise_count=2)
            for week in range(1, weeks + 1) for day in range(1, days + 1)]


# ======================================================================
# weekday_index
# ======================================================================


class TestWeekdayIndex:
    @pytest.mark.parametrize("offset, expected", [(0, 1), (1, 2), (4, 5), (5, 6), (6, 0)])
    def test_sunday_is_zero(self, offset, expected):
        assert weekday_index(MONDAY + datetime.timedelta(days=offset)) == expected


# ======================================================================
# validate_training_days
# ======================================================================


class TestValidateTrainingDays:
    def test_sorted_and_deduplicated(self):
        assert validate_training_days([5, 1, 3, 1]) == [1, 3, 5]

    def test_empty_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_training_days([])
        assert exc_info.value.code == "VAL_TRAINING_DAYS"

    @pytest.mark.parametrize("bad", [7, -1, True, "1", 2.0])
    def test_out_of_range_or_non_int_rejected(self, bad):
        with pytest.raises(ValidationError):
            validate_training_days([1, bad])


# ======================================================================
# order_templates
# ======================================================================


class TestOrderTemplates:
    def test_orders_by_week_then_day(self):
        shuffled = list(reversed(_templates(2, 3)))
        ordered = order_templates(shuffled)
        assert [(t.week_number, t.day_number) for t in ordered] == [
            (1, 1), (1, 2), (1, 3), (2, 1), (2, 2), (2, 3)]


# ======================================================================
# generate_schedule
# ======================================================================


class TestGenerateSchedule:
    def test_two_training_days_from_monday(self):
        schedule = generate_schedule(_templates(2, 2), MONDAY, [1, 3])
        assert [item.date for item in schedule] == [
            datetime.date(2027, 3, 1), datetime.date(2027, 3, 3),
            datetime.date(2027, 3, 8), datetime.date(2027, 3, 10)]

    def test_start_on_non_training_day_waits_for_next_one(self):
        sunday = MONDAY - datetime.timedelta(days=1)
        schedule = generate_schedule(_templates(1, 1), sunday, [3])
        assert schedule[0].date == datetime.date(2027, 3, 3)

    def test_extra_workouts_roll_into_next_week(self):
        # 3 workouts per program week, only Mon/Wed available
        schedule = generate_schedule(_templates(1, 3), MONDAY, [1, 3])
        assert len(schedule) == 3
        assert schedule[2].date == datetime.date(2027, 3, 8)

    def test_dates_strictly_increase_and_fall_on_training_days(self):
        schedule = generate_schedule(_templates(4, 4), MONDAY, [0, 2, 4, 6])
        dates = [item.date for item in schedule]
        assert all(a < b for a, b in zip(dates, dates[1:]))
        assert all(weekday_index(d) in {0, 2, 4, 6} for d in dates)
        assert dates[0] >= MONDAY

    def test_preserves_template_fields(self):
        schedule = generate_schedule(_templates(1, 2), MONDAY, [1, 2])
        assert schedule[1].workout_id == 2
        assert schedule[1].title == "W1D2"
        assert (schedule[1].week_number, schedule[1].day_number) == (1, 2)
        assert schedule[1].exercise_count == 2

    def test_empty_templates(self):
        assert generate_schedule([], MONDAY, [1]) == []

    def test_every_day(self):
        schedule = generate_schedule(_templates(1, 7), MONDAY, range(7))
        assert [item.date for item in schedule] == [MONDAY + datetime.timedelta(days=i) for i in range(7)]


class TestLocalToday:
    def test_unknown_zone_falls_back(self):
        assert isinstance(local_today("Not/AZone"), datetime.date)

    def test_known_zone(self):
        assert isinstance(local_today("Europe/Paris"), datetime.date)
