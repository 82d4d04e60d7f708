"""Reservation commands (CQRS write operations).

State transitions:
    CreateReservation:          → PENDING
    ConfirmReservation:         PENDING → CONFIRMED
    CancelReservation:          PENDING | CONFIRMED → CANCELLED
    FulfillReservation:         CONFIRMED → FULFILLED (opens an ACTIVE rental)
    ProcessExpiredReservations: PENDING | CONFIRMED → EXPIRED (batch)
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.protocols import DEFAULT_PAYMENT_METHOD


@dataclass(frozen=True, kw_only=True)
class CreateReservation:
    """Hold equipment for a future period.

    Attributes:
        equipment_id: Equipment to reserve.
        member_id: Member placing the reservation.
        start_date: Period start (must be in the future).
        end_date: Period end.
    """

    equipment_id: UUID
    member_id: UUID
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True, kw_only=True)
class ConfirmReservation:
    reservation_id: UUID


@dataclass(frozen=True, kw_only=True)
class CancelReservation:
    reservation_id: UUID
    reason: str | None = None


@dataclass(frozen=True, kw_only=True)
class FulfillReservation:
    """Turn a started, confirmed reservation into an active rental."""

    reservation_id: UUID
    payment_method: str = DEFAULT_PAYMENT_METHOD


@dataclass(frozen=True, kw_only=True)
class ProcessExpiredReservations:
    as_of: datetime | None = None
