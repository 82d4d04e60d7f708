"""Reservation domain events."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ReservationCreated(DomainEvent):
    """Reservation placed (PENDING)."""

    reservation_id: UUID
    equipment_id: UUID
    member_id: UUID
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True, kw_only=True)
class ReservationConfirmed(DomainEvent):
    """Reservation confirmed."""

    reservation_id: UUID
    member_id: UUID


@dataclass(frozen=True, kw_only=True)
class ReservationCancelled(DomainEvent):
    """Reservation cancelled.

    Attributes:
        reservation_id: Cancelled reservation.
        member_id: Member who held it.
        reason: Optional free-text reason.
    """

    reservation_id: UUID
    member_id: UUID
    reason: str | None = None


@dataclass(frozen=True, kw_only=True)
class ReservationFulfilled(DomainEvent):
    """Reservation turned into an active rental."""

    reservation_id: UUID
    rental_id: UUID
    member_id: UUID


@dataclass(frozen=True, kw_only=True)
class ReservationExpired(DomainEvent):
    """Reservation period ended without fulfilment."""

    reservation_id: UUID
    member_id: UUID
