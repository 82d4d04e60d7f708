"""Rental domain events.

Handlers:
- LoggingEventHandler: ALL events
- NotificationEventHandler: RentalCreated, RentalReturned, RentalOverdue

Amounts are carried as Decimal plus currency so subscribers never need the
entity.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class RentalCreated(DomainEvent):
    """Rental opened (directly or by fulfilling a reservation).

    Attributes:
        rental_id: New rental.
        equipment_id: Rented equipment.
        member_id: Renting member.
        start_date: Period start.
        end_date: Period end.
        total_cost: Amount charged.
        currency: ISO 4217 code.
    """

    rental_id: UUID
    equipment_id: UUID
    member_id: UUID
    start_date: datetime
    end_date: datetime
    total_cost: Decimal
    currency: str = "USD"


@dataclass(frozen=True, kw_only=True)
class RentalActivated(DomainEvent):
    """PENDING rental became ACTIVE."""

    rental_id: UUID
    member_id: UUID


@dataclass(frozen=True, kw_only=True)
class RentalExtended(DomainEvent):
    """Rental end date pushed later.

    Attributes:
        rental_id: Extended rental.
        member_id: Renting member.
        previous_end_date: End date before the extension.
        new_end_date: End date after the extension.
        additional_cost: Discounted amount charged for the extension.
        currency: ISO 4217 code.
    """

    rental_id: UUID
    member_id: UUID
    previous_end_date: datetime
    new_end_date: datetime
    additional_cost: Decimal
    currency: str = "USD"


@dataclass(frozen=True, kw_only=True)
class RentalReturned(DomainEvent):
    """Rental closed with equipment back in inventory.

    Attributes:
        rental_id: Returned rental.
        equipment_id: Returned equipment.
        member_id: Renting member.
        returned_at: Return instant.
        late_fee: Late fee charged.
        damage_fee: Damage fee charged.
        total_cost: Final amount owed for the rental.
        was_late: Whether the return happened after the period end.
        currency: ISO 4217 code.
    """

    rental_id: UUID
    equipment_id: UUID
    member_id: UUID
    returned_at: datetime
    late_fee: Decimal
    damage_fee: Decimal
    total_cost: Decimal
    was_late: bool
    currency: str = "USD"


@dataclass(frozen=True, kw_only=True)
class RentalCancelled(DomainEvent):
    """Rental cancelled before return."""

    rental_id: UUID
    equipment_id: UUID
    member_id: UUID


@dataclass(frozen=True, kw_only=True)
class RentalOverdue(DomainEvent):
    """Rental flagged OVERDUE by batch processing.

    Attributes:
        rental_id: Overdue rental.
        member_id: Renting member.
        days_overdue: Whole or partial days past the end date.
        accrued_late_fee: Late fee accrued so far (tier discount applied).
        currency: ISO 4217 code.
    """

    rental_id: UUID
    member_id: UUID
    days_overdue: int
    accrued_late_fee: Decimal
    currency: str = "USD"
