"""Rental commands (CQRS write operations).

State transitions:
    CreateRental:          → PENDING (future start) or ACTIVE
    ActivateRental:        PENDING → ACTIVE
    ExtendRental:          ACTIVE → ACTIVE (later end)
    ReturnRental:          ACTIVE | OVERDUE → RETURNED
    CancelRental:          PENDING | ACTIVE → CANCELLED
    ProcessOverdueRentals: ACTIVE → OVERDUE (batch)
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.protocols import DEFAULT_PAYMENT_METHOD


@dataclass(frozen=True, kw_only=True)
class CreateRental:
    """Rent equipment to a member for a period.

    Attributes:
        equipment_id: Equipment to rent.
        member_id: Renting member.
        start_date: Period start.
        end_date: Period end.
        payment_method: Payment method for the rental charge.

    Example:
        >>> command = CreateRental(
        ...     equipment_id=drill_id,
        ...     member_id=member_id,
        ...     start_date=datetime(2026, 5, 1, tzinfo=UTC),
        ...     end_date=datetime(2026, 5, 4, tzinfo=UTC),
        ... )
        >>> result = await handler.handle(command)
    """

    equipment_id: UUID
    member_id: UUID
    start_date: datetime
    end_date: datetime
    payment_method: str = DEFAULT_PAYMENT_METHOD


@dataclass(frozen=True, kw_only=True)
class ActivateRental:
    rental_id: UUID


@dataclass(frozen=True, kw_only=True)
class ExtendRental:
    """Push the end of an active rental later.

    Exactly one of new_end_date and additional_days must be given.

    Attributes:
        rental_id: Rental to extend.
        new_end_date: New period end.
        additional_days: Days to add to the current end.
        payment_method: Payment method for the extension charge.
    """

    rental_id: UUID
    new_end_date: datetime | None = None
    additional_days: int | None = None
    payment_method: str = DEFAULT_PAYMENT_METHOD


@dataclass(frozen=True, kw_only=True)
class ReturnRental:
    """Return rented equipment.

    Attributes:
        rental_id: Rental to close.
        condition_at_return: Condition value observed at return.
        notes: Inspector notes recorded with a damage assessment.
        assessed_by: Inspector name recorded with a damage assessment.
        payment_method: Payment method for late and damage fees.
    """

    rental_id: UUID
    condition_at_return: str
    notes: str = ""
    assessed_by: str = "system"
    payment_method: str = DEFAULT_PAYMENT_METHOD


@dataclass(frozen=True, kw_only=True)
class CancelRental:
    rental_id: UUID


@dataclass(frozen=True, kw_only=True)
class ProcessOverdueRentals:
    """Flag every active rental past its end as overdue.

    Attributes:
        as_of: Reference instant (defaults to now).
    """

    as_of: datetime | None = None
