"""Event handlers reacting to domain events with infrastructure side effects.

Handlers:
    - LoggingEventHandler: structured log line for every event
    - NotificationEventHandler: member notifications

All handlers run fail-open under the event bus.
"""

from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler
from src.infrastructure.events.handlers.notification_event_handler import (
    NotificationEventHandler,
)

__all__ = [
    "LoggingEventHandler",
    "NotificationEventHandler",
]
