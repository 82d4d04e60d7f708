# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions
are wired once, when the bus is first requested:
- LoggingEventHandler: every event
- NotificationEventHandler: member-facing rental, reservation and
  payment events
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns:
        Event bus implementing EventBusProtocol.

    Usage:
        # Application Layer (direct use)
        event_bus = get_event_bus()
        await event_bus.publish(RentalCreated(...))
    """
    from src.core.container.infrastructure import (
        get_logger,
        get_notification_service,
    )
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.handlers.notification_event_handler import (
        NotificationEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus = InMemoryEventBus(logger=get_logger())

    logging_handler = LoggingEventHandler(logger=get_logger())
    event_bus.subscribe_to_all(logging_handler.handle)

    notification_handler = NotificationEventHandler(
        notifications=get_notification_service()
    )
    notification_handler.register(event_bus)

    return event_bus
