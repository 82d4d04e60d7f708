"""Rental handler results.

Rental amounts all share one currency, reported once per DTO.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Self
from uuid import UUID

from src.domain.entities import DamageAssessment, Rental


@dataclass
class RentalResult:
    """Single rental DTO.

    is_overdue and days_overdue are evaluated at query time; a rental can be
    late while its stored status is still ACTIVE until batch processing runs.
    """

    id: UUID
    equipment_id: UUID
    member_id: UUID
    start_date: datetime
    end_date: datetime
    status: str
    base_cost: Decimal
    discount: Decimal
    late_fee: Decimal
    damage_fee: Decimal
    total_cost: Decimal
    currency: str
    condition_at_start: str
    condition_at_return: str | None
    is_overdue: bool
    days_overdue: int
    returned_at: datetime | None
    cancelled_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, rental: Rental, now: datetime) -> Self:
        return cls(
            id=rental.id,
            equipment_id=rental.equipment_id,
            member_id=rental.member_id,
            start_date=rental.period.start,
            end_date=rental.period.end,
            status=rental.status.value,
            base_cost=rental.base_cost.amount,
            discount=rental.discount.amount,
            late_fee=rental.late_fee.amount,
            damage_fee=rental.damage_fee.amount,
            total_cost=rental.total_cost.amount,
            currency=rental.total_cost.currency,
            condition_at_start=rental.condition_at_start.value,
            condition_at_return=(
                rental.condition_at_return.value
                if rental.condition_at_return is not None
                else None
            ),
            is_overdue=rental.is_overdue(now),
            days_overdue=rental.days_overdue(now),
            returned_at=rental.returned_at,
            cancelled_at=rental.cancelled_at,
            created_at=rental.created_at,
            updated_at=rental.updated_at,
        )


@dataclass
class CreateRentalResult:
    """Outcome of CreateRental and FulfillReservation.

    Attributes:
        rental_id: New rental.
        status: Initial status (pending or active).
        start_date: Period start.
        end_date: Period end.
        base_cost: Daily rate times billable days.
        discount: Tier discount granted.
        total_cost: Amount charged.
        currency: ISO 4217 code.
        transaction_id: Payment reference (None when nothing was charged).
    """

    rental_id: UUID
    status: str
    start_date: datetime
    end_date: datetime
    base_cost: Decimal
    discount: Decimal
    total_cost: Decimal
    currency: str
    transaction_id: str | None = None


@dataclass
class ExtendRentalResult:
    rental_id: UUID
    previous_end_date: datetime
    new_end_date: datetime
    additional_cost: Decimal
    total_cost: Decimal
    currency: str
    transaction_id: str | None = None


@dataclass
class ReturnRentalResult:
    """Outcome of ReturnRental.

    Attributes:
        rental_id: Returned rental.
        returned_at: Return instant.
        late_fee: Late fee charged (tier discount applied).
        damage_fee: Damage fee charged.
        total_cost: Final amount owed for the rental.
        currency: ISO 4217 code.
        was_late: Return happened after the period end.
        condition_changed: Condition at return differs from condition at start.
        damage_assessment_id: Assessment recorded when condition degraded.
        transaction_id: Payment reference for the fees, if any were charged.
    """

    rental_id: UUID
    returned_at: datetime
    late_fee: Decimal
    damage_fee: Decimal
    total_cost: Decimal
    currency: str
    was_late: bool
    condition_changed: bool
    damage_assessment_id: UUID | None = None
    transaction_id: str | None = None


@dataclass
class OverdueRentalItem:
    """Late rental with the fee accrued as of the query instant."""

    rental_id: UUID
    equipment_id: UUID
    member_id: UUID
    status: str
    end_date: datetime
    days_overdue: int
    accrued_late_fee: Decimal
    currency: str


@dataclass
class ProcessOverdueRentalsResult:
    processed_count: int
    rental_ids: list[UUID] = field(default_factory=list)


@dataclass
class DamageAssessmentResult:
    id: UUID
    rental_id: UUID
    equipment_id: UUID
    condition_before: str
    condition_after: str
    degradation_levels: int
    damage_fee: Decimal
    currency: str
    notes: str
    assessed_by: str
    assessed_at: datetime

    @classmethod
    def from_entity(cls, assessment: DamageAssessment) -> Self:
        return cls(
            id=assessment.id,
            rental_id=assessment.rental_id,
            equipment_id=assessment.equipment_id,
            condition_before=assessment.condition_before.value,
            condition_after=assessment.condition_after.value,
            degradation_levels=assessment.degradation_levels,
            damage_fee=assessment.damage_fee.amount,
            currency=assessment.damage_fee.currency,
            notes=assessment.notes,
            assessed_by=assessment.assessed_by,
            assessed_at=assessment.assessed_at,
        )
