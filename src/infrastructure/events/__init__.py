"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: in-process bus with fail-open behavior

Event Handlers (src.infrastructure.events.handlers):
    - LoggingEventHandler
    - NotificationEventHandler
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
