"""Reservation handler results."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Self
from uuid import UUID

from src.domain.entities import Reservation


@dataclass
class ReservationResult:
    id: UUID
    equipment_id: UUID
    member_id: UUID
    start_date: datetime
    end_date: datetime
    status: str
    cancellation_reason: str | None
    rental_id: UUID | None
    confirmed_at: datetime | None
    cancelled_at: datetime | None
    fulfilled_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, reservation: Reservation) -> Self:
        return cls(
            id=reservation.id,
            equipment_id=reservation.equipment_id,
            member_id=reservation.member_id,
            start_date=reservation.period.start,
            end_date=reservation.period.end,
            status=reservation.status.value,
            cancellation_reason=reservation.cancellation_reason,
            rental_id=reservation.rental_id,
            confirmed_at=reservation.confirmed_at,
            cancelled_at=reservation.cancelled_at,
            fulfilled_at=reservation.fulfilled_at,
            created_at=reservation.created_at,
            updated_at=reservation.updated_at,
        )


@dataclass
class CreateReservationResult:
    """Outcome of CreateReservation.

    Attributes:
        reservation_id: New reservation.
        status: Initial status (pending).
        start_date: Reserved period start.
        end_date: Reserved period end.
        estimated_cost: Discounted cost if rented for the full period.
        currency: ISO 4217 code.
    """

    reservation_id: UUID
    status: str
    start_date: datetime
    end_date: datetime
    estimated_cost: Decimal
    currency: str


@dataclass
class FulfillReservationResult:
    reservation_id: UUID
    rental_id: UUID
    total_cost: Decimal
    currency: str
    transaction_id: str | None = None


@dataclass
class ProcessExpiredReservationsResult:
    expired_count: int
    reservation_ids: list[UUID] = field(default_factory=list)
