"""
Notification delivery adapters.

Formatting and transport belong to the notifier; the scheduling core
only produces messages.
"""

from abc import ABC, abstractmethod
from typing import Union

import httpx

from cadence.core.config import settings
from cadence.core.logging import get_logger
from cadence.notifications.messages import ProgramAssignedNotification, WorkoutCompletedNotification

logger = get_logger(__name__)

Notification = Union[WorkoutCompletedNotification, ProgramAssignedNotification]


class Notifier(ABC):
    """Delivers notification messages. Implementations may raise; callers use :func:`deliver_safely`."""

    @abstractmethod
    def notify_workout_completed(self, notification: WorkoutCompletedNotification) -> None:
        ...

    @abstractmethod
    def notify_program_assigned(self, notification: ProgramAssignedNotification) -> None:
        ...

    def send(self, notification: Notification) -> None:
        if isinstance(notification, WorkoutCompletedNotification):
            self.notify_workout_completed(notification)
        else:
            self.notify_program_assigned(notification)


class LoggingNotifier(Notifier):
    """Default notifier: records the notification in the application log."""

    def notify_workout_completed(self, notification: WorkoutCompletedNotification) -> None:
        logger.info("notify_workout_completed", **notification.to_payload())

    def notify_program_assigned(self, notification: ProgramAssignedNotification) -> None:
        logger.info("notify_program_assigned", **notification.to_payload())


class WebhookNotifier(Notifier):
    """POSTs each notification as JSON to a webhook endpoint."""

    def __init__(self, url: str, timeout: float = 5.0):
        self.url = url
        self.timeout = timeout

    def _post(self, payload: dict) -> None:
        response = httpx.post(self.url, json=payload, timeout=self.timeout)
        response.raise_for_status()

    def notify_workout_completed(self, notification: WorkoutCompletedNotification) -> None:
        self._post(notification.to_payload())

    def notify_program_assigned(self, notification: ProgramAssignedNotification) -> None:
        self._post(notification.to_payload())


def build_notifier() -> Notifier:
    if settings.NOTIFICATION_WEBHOOK_URL:
        return WebhookNotifier(settings.NOTIFICATION_WEBHOOK_URL, timeout=settings.NOTIFICATION_TIMEOUT_SECONDS)
    return LoggingNotifier()


def deliver_safely(notifier: Notifier, notification: Notification) -> None:
    """Deliver one notification; failures are logged and never propagate."""
    try:
        notifier.send(notification)
    except Exception:
        logger.exception("notification_failed", kind=notification.kind, **_identity(notification))


def _identity(notification: Notification) -> dict:
    if isinstance(notification, WorkoutCompletedNotification):
        return {"coach_id": notification.coach_id, "athlete_id": notification.athlete_id}
    return {"athlete_id": notification.athlete_id, "program_id": notification.program_id}
