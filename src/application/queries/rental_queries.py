"""Rental queries (CQRS read operations)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetRental:
    rental_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetOverdueRentals:
    """Rentals past their end date.

    Attributes:
        as_of: Reference instant (defaults to now).
    """

    as_of: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class GetDamageAssessment:
    rental_id: UUID
