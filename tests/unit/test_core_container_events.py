"""Unit tests for event bus container wiring.

Verifies that get_event_bus() subscribes a LoggingEventHandler method for
every registered event, and that strict mode refuses to start when a
handler method is missing.
"""

from unittest.mock import MagicMock, patch

import pytest

from src.core.container.events import get_event_bus
from src.domain.events.payment_events import PaymentFailed
from src.domain.events.registry import (
    EVENT_REGISTRY,
    EventCategory,
    EventMetadata,
    WorkflowPhase,
    get_all_events,
)


@pytest.fixture(autouse=True)
def fresh_event_bus():
    """Rebuild the cached event bus around each test."""
    get_event_bus.cache_clear()
    yield
    get_event_bus.cache_clear()


@pytest.mark.unit
class TestEventBusWiring:
    """Test registry-driven subscriptions."""

    def test_all_registered_events_have_handlers(self):
        event_bus = get_event_bus()

        missing = [e.__name__ for e in get_all_events() if event_bus.handler_count(e) == 0]

        assert not missing, f"Events without handlers: {missing}"

    def test_one_logging_subscription_per_event(self):
        event_bus = get_event_bus()

        total = sum(event_bus.handler_count(meta.event_class) for meta in EVENT_REGISTRY)

        assert total == len(EVENT_REGISTRY)

    def test_event_bus_is_singleton(self):
        assert get_event_bus() is get_event_bus()


@pytest.mark.unit
class TestEventBusStrictMode:
    """Test behavior when a handler method is missing."""

    BROKEN_REGISTRY = [
        EventMetadata(
            event_class=PaymentFailed,
            category=EventCategory.PAYMENT,
            workflow_name="payment_teleportation",
            phase=WorkflowPhase.FAILED,
        )
    ]

    def test_strict_mode_raises_on_missing_handler(self):
        with (
            patch("src.domain.events.registry.EVENT_REGISTRY", self.BROKEN_REGISTRY),
            patch(
                "src.core.config.get_settings",
                return_value=MagicMock(events_strict_mode=True),
            ),
        ):
            with pytest.raises(RuntimeError, match="handle_payment_teleportation_failed"):
                get_event_bus()

    def test_graceful_mode_skips_missing_handler(self):
        with (
            patch("src.domain.events.registry.EVENT_REGISTRY", self.BROKEN_REGISTRY),
            patch(
                "src.core.config.get_settings",
                return_value=MagicMock(events_strict_mode=False),
            ),
        ):
            event_bus = get_event_bus()

        assert event_bus.handler_count(PaymentFailed) == 0
