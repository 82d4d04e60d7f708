"""Base domain event class.

Domain events record things that happened in the rental domain and are
named in past tense (RentalCreated, ReservationCancelled). Command handlers
publish them after the state change has been persisted.

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class RentalCreated(DomainEvent):
    ...     rental_id: UUID
    >>>
    >>> event = RentalCreated(rental_id=rental.id)
    >>> event.event_id      # auto-generated
    >>> event.occurred_at   # auto-generated, UTC
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen, keyword-only dataclasses
        4. Carry the ids and amounts subscribers need (no entity objects)

    Attributes:
        event_id: Unique identifier for this event instance (UUIDv7).
        occurred_at: When the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Class name of the event (used as the structured log field)."""
        return type(self).__name__
