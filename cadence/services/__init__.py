"""Business logic services."""

from cadence.services.assignment_service import AssignmentService
from cadence.services.schedule_service import ScheduleService
from cadence.services.set_log_service import SetLogService

__all__ = [
    "AssignmentService",
    "ScheduleService",
    "SetLogService",
]
