"""Rental status enumeration."""

from enum import Enum


class RentalStatus(str, Enum):
    """Rental lifecycle status.

    **Lifecycle Flow**:
        PENDING → ACTIVE (period started)
        ACTIVE → RETURNED (normal flow)
        ACTIVE → OVERDUE → RETURNED (late return)
        PENDING | ACTIVE → CANCELLED

    **Terminal States**: RETURNED, CANCELLED
    **Open States**: PENDING, ACTIVE, OVERDUE (equipment is held)
    """

    PENDING = "pending"
    ACTIVE = "active"
    OVERDUE = "overdue"
    RETURNED = "returned"
    CANCELLED = "cancelled"

    def is_open(self) -> bool:
        """Check if the rental still holds its equipment."""
        return self in OPEN_RENTAL_STATUSES

    def is_terminal(self) -> bool:
        """Check if no further transitions are possible."""
        return self in (RentalStatus.RETURNED, RentalStatus.CANCELLED)


OPEN_RENTAL_STATUSES: tuple[RentalStatus, ...] = (
    RentalStatus.PENDING,
    RentalStatus.ACTIVE,
    RentalStatus.OVERDUE,
)
