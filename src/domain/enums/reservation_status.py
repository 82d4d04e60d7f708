"""Reservation status enumeration."""

from enum import Enum


class ReservationStatus(str, Enum):
    """Reservation lifecycle status.

    **Lifecycle Flow**:
        PENDING → CONFIRMED → FULFILLED (rental created)
        PENDING | CONFIRMED → CANCELLED
        PENDING | CONFIRMED → EXPIRED (period ended without fulfilment)

    **Blocking States**: PENDING, CONFIRMED (equipment is held for the period)
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    FULFILLED = "fulfilled"
    EXPIRED = "expired"

    def blocks_equipment(self) -> bool:
        """Check if the reservation holds its equipment for the period."""
        return self in BLOCKING_RESERVATION_STATUSES


BLOCKING_RESERVATION_STATUSES: tuple[ReservationStatus, ...] = (
    ReservationStatus.PENDING,
    ReservationStatus.CONFIRMED,
)
