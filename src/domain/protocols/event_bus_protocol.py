"""Event bus protocol (port) for domain events.

The domain defines the port, infrastructure provides adapters.

Implementations:
    - InMemoryEventBus: src/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> from src.core.container import get_event_bus
    >>> event_bus = get_event_bus()
    >>> await event_bus.publish(AttendanceCheckedIn(...))
    >>>
    >>> async def on_checked_in(event: AttendanceCheckedIn) -> None:
    ...     ...
    >>> event_bus.subscribe(AttendanceCheckedIn, on_checked_in)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async function receiving one event and returning None."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and must NOT fail the publisher.
        2. **Async support**: All handlers are async.
        3. **Type-based routing**: Handlers registered for an event type only
           receive events of that exact type.
        4. **No ordering guarantees** between handlers of the same event.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (exact type match).
            handler: Async function called with the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Handler exceptions are logged but NOT propagated to the publisher.

        Args:
            event: Domain event to publish.
        """
        ...
