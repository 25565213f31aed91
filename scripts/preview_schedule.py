"""Preview how a program grid lands on the calendar.

Runs the calendar walker only (no database) and prints one line per
workout.

Usage:
    python scripts/preview_schedule.py 2027-03-01 1,3,5 3x4
        start date, training days (0 = Sunday), weeks x days per week
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cadence.core.exceptions import ValidationError
from cadence.scheduling.calendar_walker import generate_schedule, validate_training_days
from cadence.schemas.schedule import WorkoutTemplate

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def main(argv: list[str]) -> int:
    if len(argv) != 3:
        print(__doc__)
        return 2

    start = datetime.date.fromisoformat(argv[0])
    try:
        training_days = validate_training_days(int(d) for d in argv[1].split(","))
    except (ValueError, ValidationError) as e:
        print(f"Invalid training days: {getattr(e, 'message', e)}")
        return 2
    weeks, days = (int(part) for part in argv[2].lower().split("x"))

    templates = [WorkoutTemplate(workout_id=w * 100 + d, title=f"Week {w} - Day {d}", week_number=w, day_number=d)
                 for w in range(1, weeks + 1) for d in range(1, days + 1)]

    print(f"Start {start.isoformat()}  training days: {', '.join(WEEKDAY_NAMES[d] for d in training_days)}")
    print("-" * 50)
    for item in generate_schedule(templates, start, training_days):
        print(f"{item.date.isoformat()}  {item.date.strftime('%a')}  {item.title}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
