"""Scheduling core: calendar walk, conflict detection, persistence, cleanup and relocation."""

from cadence.scheduling.calendar_walker import generate_schedule, order_templates, validate_training_days

__all__ = ["generate_schedule", "order_templates", "validate_training_days"]
