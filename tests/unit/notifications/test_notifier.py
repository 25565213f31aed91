"""Tests for notification delivery adapters and dispatch."""

import datetime

import httpx
from fastapi import BackgroundTasks

from cadence.notifications.dispatch import BackgroundTaskDispatcher, NullDispatcher
from cadence.notifications.messages import ProgramAssignedNotification, WorkoutCompletedNotification
from cadence.notifications.notifier import LoggingNotifier, Notifier, WebhookNotifier, deliver_safely

COMPLETED = WorkoutCompletedNotification(coach_id=1, athlete_id=2, athlete_name="Ava", session_title="Day 1",
                                         completion_percent=100, date=datetime.date(2027, 3, 1))
ASSIGNED = ProgramAssignedNotification(athlete_id=2, athlete_name="Ava", athlete_email=None, program_id=3,
                                       program_name="Block", start_date=None, sessions_created=4)


class _Recorder(Notifier):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def notify_workout_completed(self, notification):
        if self.fail:
            raise RuntimeError("smtp down")
        self.calls.append(("completed", notification))

    def notify_program_assigned(self, notification):
        self.calls.append(("assigned", notification))


class TestPayloads:
    def test_completed_payload(self):
        payload = COMPLETED.to_payload()
        assert payload["kind"] == "workout_completed"
        assert payload["date"] == "2027-03-01"
        assert payload["completion_percent"] == 100

    def test_assigned_payload_without_start(self):
        payload = ASSIGNED.to_payload()
        assert payload["kind"] == "program_assigned"
        assert payload["start_date"] is None


class TestDelivery:
    def test_send_routes_by_kind(self):
        notifier = _Recorder()
        notifier.send(COMPLETED)
        notifier.send(ASSIGNED)
        assert [kind for kind, _ in notifier.calls] == ["completed", "assigned"]

    def test_failures_are_swallowed(self):
        deliver_safely(_Recorder(fail=True), COMPLETED)

    def test_logging_notifier(self):
        LoggingNotifier().send(COMPLETED)

    def test_webhook_posts_json(self, monkeypatch):
        captured = {}

        def fake_post(url, json, timeout):
            captured.update(url=url, json=json, timeout=timeout)
            return httpx.Response(200, request=httpx.Request("POST", url))

        monkeypatch.setattr(httpx, "post", fake_post)
        WebhookNotifier("https://hooks.example.com/x", timeout=2.0).send(ASSIGNED)

        assert captured["url"] == "https://hooks.example.com/x"
        assert captured["json"]["program_name"] == "Block"
        assert captured["timeout"] == 2.0

    def test_webhook_error_is_contained(self, monkeypatch):
        def failing_post(url, json, timeout):
            return httpx.Response(500, request=httpx.Request("POST", url))

        monkeypatch.setattr(httpx, "post", failing_post)
        deliver_safely(WebhookNotifier("https://hooks.example.com/x"), COMPLETED)


class TestDispatch:
    def test_background_tasks_queue_delivery(self):
        tasks = BackgroundTasks()
        notifier = _Recorder()

        BackgroundTaskDispatcher(tasks, notifier).submit_all([COMPLETED, ASSIGNED])

        assert len(tasks.tasks) == 2
        assert tasks.tasks[0].func is deliver_safely
        assert tasks.tasks[0].args == (notifier, COMPLETED)

    def test_null_dispatcher(self):
        NullDispatcher().submit(COMPLETED)
