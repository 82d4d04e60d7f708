"""Event bus protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure provides the adapter (InMemoryEventBus)
    - Container (src/core/container/events.py) wires subscribers

Usage:
    >>> event_bus = get_event_bus()
    >>> unsubscribe = event_bus.subscribe(RentalCreated, notify_member)
    >>> await event_bus.publish(RentalCreated(...))
    >>> unsubscribe()
"""

from collections.abc import Awaitable, Callable, Iterable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async callable receiving a DomainEvent (or subclass) and returning None."""

Unsubscribe = Callable[[], None]
"""Handle returned by subscribe(); calling it removes the subscription."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing and is never raised to the publisher.
           Failures are logged.
        2. **Async support**: All handlers are async.
        3. **Type-based routing**: Handlers registered for an event type only
           receive events of that exact type. Handlers registered with
           subscribe_to_all receive every event.
        4. **No ordering guarantees**: Handlers execute concurrently.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> Unsubscribe:
        """Register handler for one event type.

        Args:
            event_type: Event class to handle (exact type match).
            handler: Async function called with each published event.

        Returns:
            Callable removing this subscription.
        """
        ...

    def subscribe_to_all(self, handler: EventHandler) -> Unsubscribe:
        """Register handler for every event type."""
        ...

    def unsubscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Remove a handler for an event type (no-op if not registered)."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Flow:
            1. Look up handlers for type(event) plus catch-all handlers
            2. Execute them concurrently (asyncio.gather)
            3. Log any handler exceptions
            4. Return (never raise)

        Notes:
            - Publish AFTER persistence (events are facts, not intents)
            - No handlers = no-op (not an error)
        """
        ...

    async def publish_many(self, events: Iterable[DomainEvent]) -> None:
        """Publish events in order, each with fail-open semantics."""
        ...

    def clear_all_handlers(self) -> None:
        ...

    def handler_count(self, event_type: type[DomainEvent] | None = None) -> int:
        """Count subscriptions.

        Args:
            event_type: Count handlers for this type (catch-all handlers
                included). None counts every subscription.
        """
        ...
