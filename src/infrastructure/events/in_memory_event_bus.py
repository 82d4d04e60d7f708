"""In-memory event bus implementation.

Implements EventBusProtocol with an in-process handler registry. Suitable
for a single-server deployment; a broker-backed adapter could replace it
without touching publishers.

Architecture:
    - Dictionary-based handler registry (event_type → list of handlers)
    - Catch-all handlers (subscribe_to_all) receive every event
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> unsubscribe = bus.subscribe(RentalCreated, notify_member)
    >>> await bus.publish(RentalCreated(...))
    >>> unsubscribe()
"""

import asyncio
from collections import defaultdict
from collections.abc import Iterable

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler, Unsubscribe
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe (single event loop design).

    Attributes:
        _handlers: Event class → handlers registered for exactly that class.
        _global_handlers: Handlers receiving every event.
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._global_handlers: list[EventHandler] = []
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> Unsubscribe:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (exact type match).
            handler: Async function to call when event is published.

        Returns:
            Callable that removes this subscription.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_type].append(handler)
        return lambda: self.unsubscribe(event_type, handler)

    def subscribe_to_all(self, handler: EventHandler) -> Unsubscribe:
        """Register handler receiving every published event."""
        self._global_handlers.append(handler)

        def _unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return _unsubscribe

    def unsubscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)
            if not handlers:
                del self._handlers[event_type]

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Executes handlers concurrently. Handler exceptions are logged at
        warning level and NOT propagated to the publisher. If no handlers
        are registered, this is a no-op.
        """
        event_type = type(event)
        handlers = [*self._handlers.get(event_type, []), *self._global_handlers]

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        # return_exceptions=True keeps one failing handler from cancelling the rest
        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                handler_name = getattr(handlers[idx], "__name__", repr(handlers[idx]))
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=handler_name,
                    error_type=type(result).__name__,
                    error_message=str(result),
                    exc_info=result,
                )

    async def publish_many(self, events: Iterable[DomainEvent]) -> None:
        """Publish events sequentially in the given order."""
        for event in events:
            await self.publish(event)

    def clear_all_handlers(self) -> None:
        self._handlers.clear()
        self._global_handlers.clear()

    def handler_count(self, event_type: type[DomainEvent] | None = None) -> int:
        """Count subscriptions for one event type (catch-all included) or overall."""
        if event_type is None:
            return sum(len(h) for h in self._handlers.values()) + len(
                self._global_handlers
            )
        return len(self._handlers.get(event_type, [])) + len(self._global_handlers)
