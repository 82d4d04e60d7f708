"""Reservation error types."""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ReservationError(DomainError):
    """Reservation lifecycle rule violation.

    Used for RESERVATION_ALREADY_CANCELLED, INVALID_RESERVATION_STATE and
    INVALID_RESERVATION_PERIOD.
    """

    pass  # Inherits all fields from DomainError
