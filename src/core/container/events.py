# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Handlers are
subscribed at startup from EVENT_REGISTRY.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    For each entry in EVENT_REGISTRY the handler method name is computed
    from ``workflow_name`` + ``phase`` (``handle_payment_processing_failed``)
    and the matching LoggingEventHandler method is subscribed.

    Mode-dependent behavior when a method is missing:
        - strict (EVENTS_STRICT_MODE=true): raise RuntimeError at startup
        - graceful: log a warning and skip the subscription

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        RuntimeError: Strict mode and a required handler method is missing.
    """
    from src.core.config import get_settings
    from src.core.container.infrastructure import get_logger
    from src.domain.events.registry import EVENT_REGISTRY
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    strict_mode = get_settings().events_strict_mode
    logger = get_logger()

    event_bus = InMemoryEventBus(logger=logger)
    logging_handler = LoggingEventHandler(logger=logger)

    for metadata in EVENT_REGISTRY:
        if not metadata.requires_logging:
            continue

        method_name = metadata.handler_method_name
        handler_method = getattr(logging_handler, method_name, None)
        if handler_method is None:
            if strict_mode:
                raise RuntimeError(
                    f"EVENTS_STRICT_MODE: Missing required logging handler\n"
                    f"Event: {metadata.event_class.__name__}\n"
                    f"Expected method: LoggingEventHandler.{method_name}"
                )
            logger.warning(
                "Missing logging handler (graceful mode)",
                event_class=metadata.event_class.__name__,
                handler_method=method_name,
            )
            continue

        event_bus.subscribe(metadata.event_class, handler_method)

    return event_bus
