"""
Fire-and-forget notification dispatch.

The triggering request hands immutable messages to a dispatcher after
its transaction committed.  Delivery runs independently of the request
(FastAPI background tasks in the HTTP layer) and goes through
:func:`deliver_safely`, so a delivery failure is visible in the logs but
never affects the write that triggered it.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from fastapi import BackgroundTasks

from cadence.notifications.notifier import Notification, Notifier, deliver_safely


class NotificationDispatcher(ABC):
    @abstractmethod
    def submit(self, notification: Notification) -> None:
        ...

    def submit_all(self, notifications: Iterable[Notification]) -> None:
        for notification in notifications:
            self.submit(notification)


class BackgroundTaskDispatcher(NotificationDispatcher):
    """Queues delivery on FastAPI ``BackgroundTasks`` (runs after the response is sent)."""

    def __init__(self, background_tasks: BackgroundTasks, notifier: Notifier):
        self.background_tasks = background_tasks
        self.notifier = notifier

    def submit(self, notification: Notification) -> None:
        self.background_tasks.add_task(deliver_safely, self.notifier, notification)


class NullDispatcher(NotificationDispatcher):
    """Drops notifications (notifications disabled)."""

    def submit(self, notification: Notification) -> None:
        return None
