"""Logging event handler for domain events.

Subscribed with subscribe_to_all, so every published domain event is logged
once with its payload flattened into structured fields.

Log Levels:
    - WARNING: RentalOverdue, EquipmentDamaged, PaymentFailed (need attention)
    - INFO: everything else

Structured Fields:
    - event_type: Event class name (e.g., "RentalCreated")
    - event_id: UUID for correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - every payload field (UUIDs, datetimes and Decimals rendered as strings)
"""

import re
from dataclasses import fields
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from src.domain.events import (
    DomainEvent,
    EquipmentDamaged,
    PaymentFailed,
    RentalOverdue,
)
from src.domain.protocols.logger_protocol import LoggerProtocol

_WARNING_EVENTS: tuple[type[DomainEvent], ...] = (
    RentalOverdue,
    EquipmentDamaged,
    PaymentFailed,
)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def event_log_name(event: DomainEvent) -> str:
    """snake_case log event name ("RentalCreated" → "rental_created")."""
    return _CAMEL_BOUNDARY.sub("_", type(event).__name__).lower()


def _render(value: Any) -> Any:
    if isinstance(value, (UUID, Decimal)):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, tuple):
        return [_render(v) for v in value]
    return value


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> event_bus.subscribe_to_all(handler.handle)
        >>> await event_bus.publish(RentalCreated(...))
        >>> # {"event": "rental_created", "rental_id": "...", ...}
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle(self, event: DomainEvent) -> None:
        """Log any domain event."""
        context = {
            f.name: _render(getattr(event, f.name))
            for f in fields(event)
            if f.name not in ("event_id", "occurred_at")
        }
        log = self._logger.warning if isinstance(event, _WARNING_EVENTS) else self._logger.info
        log(
            event_log_name(event),
            event_type=type(event).__name__,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            **context,
        )
