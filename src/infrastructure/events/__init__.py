"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: Event bus with fail-open behavior

Event Handlers:
    - LoggingEventHandler: Structured logging for all domain events

Usage:
    >>> event_bus = InMemoryEventBus(logger=logger)
    >>> logging_handler = LoggingEventHandler(logger=logger)
    >>> event_bus.subscribe(PaymentCompleted, logging_handler.handle_payment_processing_succeeded)
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
