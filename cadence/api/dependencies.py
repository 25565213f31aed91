"""
Shared API dependencies.

Authentication and coach/athlete lookup happen upstream of this
service; the dependencies here wire database access and notification
dispatch.
"""

from functools import lru_cache

from fastapi import BackgroundTasks, Depends

from cadence.core.config import settings
from cadence.notifications.dispatch import BackgroundTaskDispatcher, NotificationDispatcher, NullDispatcher
from cadence.notifications.notifier import Notifier, build_notifier


@lru_cache
def get_notifier() -> Notifier:
    return build_notifier()


def get_dispatcher(background_tasks: BackgroundTasks,
                   notifier: Notifier = Depends(get_notifier), ) -> NotificationDispatcher:
    """Dispatcher handing notifications to the request's background tasks."""
    if not settings.NOTIFICATIONS_ENABLED:
        return NullDispatcher()
    return BackgroundTaskDispatcher(background_tasks, notifier)
