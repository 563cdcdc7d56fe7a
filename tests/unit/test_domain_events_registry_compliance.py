"""Registry Compliance Tests - FAIL FAST on drift.

These tests verify the Event Registry remains synchronized with implementations.
Tests FAIL if:
- Event registered but LoggingEventHandler method missing
- Event defined in an events module but not registered

Reference:
    - src/domain/events/registry.py
"""

import inspect

import pytest

from src.domain.events import attendance_events, payment_events
from src.domain.events.base_event import DomainEvent
from src.domain.events.registry import (
    EVENT_REGISTRY,
    EventCategory,
    WorkflowPhase,
    get_all_events,
    get_events_requiring_logging,
)
from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler


def _defined_events(module) -> set[type[DomainEvent]]:
    return {
        obj
        for _, obj in inspect.getmembers(module, inspect.isclass)
        if issubclass(obj, DomainEvent)
        and obj is not DomainEvent
        and obj.__module__ == module.__name__
    }


@pytest.mark.unit
class TestRegistryCompleteness:
    """Verify registry is complete and accurate."""

    def test_registry_not_empty(self):
        assert len(EVENT_REGISTRY) > 0, "Registry is empty!"

    def test_every_defined_event_is_registered(self):
        defined = _defined_events(attendance_events) | _defined_events(payment_events)

        missing = defined - set(get_all_events())

        assert not missing, f"Events not in EVENT_REGISTRY: {sorted(e.__name__ for e in missing)}"

    def test_no_duplicate_registrations(self):
        events = get_all_events()

        assert len(events) == len(set(events))

    def test_categories_and_phases(self):
        categories = {meta.category for meta in EVENT_REGISTRY}
        phases = {meta.phase for meta in EVENT_REGISTRY}

        assert categories == {EventCategory.ATTENDANCE, EventCategory.PAYMENT}
        assert phases == {WorkflowPhase.SUCCEEDED, WorkflowPhase.FAILED}

    def test_handler_method_name(self):
        meta = next(m for m in EVENT_REGISTRY if m.event_class.__name__ == "PaymentFailed")

        assert meta.handler_method_name == "handle_payment_processing_failed"


@pytest.mark.unit
class TestHandlerMethodCompliance:
    """CRITICAL: Verify all registered events have handler methods."""

    def test_all_events_have_logging_handler_methods(self):
        logging_handler = LoggingEventHandler(logger=None)  # type: ignore[arg-type]
        missing = []

        for event_class in get_events_requiring_logging():
            meta = next(m for m in EVENT_REGISTRY if m.event_class == event_class)
            if not hasattr(logging_handler, meta.handler_method_name):
                missing.append(
                    f"LoggingEventHandler.{meta.handler_method_name} for {event_class.__name__}"
                )

        assert not missing, (
            "\nREGISTRY COMPLIANCE FAILURE: LoggingEventHandler methods missing\n"
            + "\n".join(f"  - {m}" for m in missing)
        )
