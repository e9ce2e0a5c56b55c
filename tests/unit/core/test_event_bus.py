"""
Unit tests for the in-memory event bus.
"""
import pytest

from accounts.domain.events import AccountCreated, AccountDeleted
from core.domain.events import EventHandler
from core.infrastructure.events import InMemoryEventBus


class RecordingHandler(EventHandler):
    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


class FailingHandler(EventHandler):
    async def handle(self, event):
        raise RuntimeError("handler failed")


@pytest.mark.asyncio
class TestInMemoryEventBus:
    """Tests for InMemoryEventBus."""

    async def test_publish_reaches_subscribers_of_that_type(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(AccountCreated, handler)

        await bus.publish(AccountCreated(email="a@example.com", duration_seconds=60))
        await bus.publish(AccountDeleted(email="a@example.com"))

        assert len(handler.events) == 1
        assert handler.events[0].event_type == "AccountCreated"

    async def test_subscribe_is_idempotent(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(AccountDeleted, handler)
        bus.subscribe(AccountDeleted, handler)

        await bus.publish(AccountDeleted(email="a@example.com"))

        assert len(handler.events) == 1

    async def test_failing_handler_does_not_fail_publisher(self):
        bus = InMemoryEventBus()
        recorder = RecordingHandler()
        bus.subscribe(AccountDeleted, FailingHandler())
        bus.subscribe(AccountDeleted, recorder)

        await bus.publish(AccountDeleted(email="a@example.com"))

        assert len(recorder.events) == 1

    async def test_event_to_dict_carries_payload(self):
        event = AccountCreated(email="a@example.com", duration_seconds=60)
        data = event.to_dict()

        assert data["event_type"] == "AccountCreated"
        assert data["aggregate_id"] == "a@example.com"
        assert data["duration_seconds"] == 60
        assert "event_id" in data
        assert "occurred_at" in data
