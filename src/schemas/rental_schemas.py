"""Rental request and response schemas.

Pydantic schemas for rental API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from src.application.dtos import (
    CreateRentalResult,
    DamageAssessmentResult,
    ExtendRentalResult,
    OverdueRentalItem,
    ProcessOverdueRentalsResult,
    RentalResult,
    ReturnRentalResult,
)
from src.domain.protocols import DEFAULT_PAYMENT_METHOD


# =============================================================================
# Request Schemas
# =============================================================================


class CreateRentalRequest(BaseModel):
    equipment_id: UUID
    member_id: UUID
    start_date: datetime
    end_date: datetime
    payment_method: str = Field(DEFAULT_PAYMENT_METHOD, min_length=1)


class ExtendRentalRequest(BaseModel):
    """Extension request: a new end date or a number of days, not both."""

    new_end_date: datetime | None = None
    additional_days: int | None = Field(None, gt=0)
    payment_method: str = Field(DEFAULT_PAYMENT_METHOD, min_length=1)

    @model_validator(mode="after")
    def exactly_one_target(self) -> "ExtendRentalRequest":
        if (self.new_end_date is None) == (self.additional_days is None):
            raise ValueError("Provide exactly one of new_end_date or additional_days")
        return self


class ReturnRentalRequest(BaseModel):
    condition_at_return: str = Field(..., examples=["good"])
    notes: str = Field("", max_length=2000)
    assessed_by: str = Field("system", min_length=1, max_length=200)
    payment_method: str = Field(DEFAULT_PAYMENT_METHOD, min_length=1)


class ProcessOverdueRentalsRequest(BaseModel):
    as_of: datetime | None = Field(None, description="Reference instant (defaults to now)")


# =============================================================================
# Response Schemas
# =============================================================================


class RentalResponse(BaseModel):
    """Single rental.

    is_overdue and days_overdue are computed at request time.
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
    def from_dto(cls, dto: RentalResult) -> "RentalResponse":
        return cls(
            id=dto.id,
            equipment_id=dto.equipment_id,
            member_id=dto.member_id,
            start_date=dto.start_date,
            end_date=dto.end_date,
            status=dto.status,
            base_cost=dto.base_cost,
            discount=dto.discount,
            late_fee=dto.late_fee,
            damage_fee=dto.damage_fee,
            total_cost=dto.total_cost,
            currency=dto.currency,
            condition_at_start=dto.condition_at_start,
            condition_at_return=dto.condition_at_return,
            is_overdue=dto.is_overdue,
            days_overdue=dto.days_overdue,
            returned_at=dto.returned_at,
            cancelled_at=dto.cancelled_at,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class RentalListResponse(BaseModel):
    rentals: list[RentalResponse]
    total_count: int

    @classmethod
    def from_dtos(cls, dtos: list[RentalResult]) -> "RentalListResponse":
        return cls(
            rentals=[RentalResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )


class CreateRentalResponse(BaseModel):
    rental_id: UUID
    status: str
    start_date: datetime
    end_date: datetime
    base_cost: Decimal
    discount: Decimal
    total_cost: Decimal
    currency: str
    transaction_id: str | None = None

    @classmethod
    def from_dto(cls, dto: CreateRentalResult) -> "CreateRentalResponse":
        return cls(
            rental_id=dto.rental_id,
            status=dto.status,
            start_date=dto.start_date,
            end_date=dto.end_date,
            base_cost=dto.base_cost,
            discount=dto.discount,
            total_cost=dto.total_cost,
            currency=dto.currency,
            transaction_id=dto.transaction_id,
        )


class ExtendRentalResponse(BaseModel):
    rental_id: UUID
    previous_end_date: datetime
    new_end_date: datetime
    additional_cost: Decimal
    total_cost: Decimal
    currency: str
    transaction_id: str | None = None

    @classmethod
    def from_dto(cls, dto: ExtendRentalResult) -> "ExtendRentalResponse":
        return cls(
            rental_id=dto.rental_id,
            previous_end_date=dto.previous_end_date,
            new_end_date=dto.new_end_date,
            additional_cost=dto.additional_cost,
            total_cost=dto.total_cost,
            currency=dto.currency,
            transaction_id=dto.transaction_id,
        )


class ReturnRentalResponse(BaseModel):
    """Return outcome with the fees charged."""

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

    @classmethod
    def from_dto(cls, dto: ReturnRentalResult) -> "ReturnRentalResponse":
        return cls(
            rental_id=dto.rental_id,
            returned_at=dto.returned_at,
            late_fee=dto.late_fee,
            damage_fee=dto.damage_fee,
            total_cost=dto.total_cost,
            currency=dto.currency,
            was_late=dto.was_late,
            condition_changed=dto.condition_changed,
            damage_assessment_id=dto.damage_assessment_id,
            transaction_id=dto.transaction_id,
        )


class OverdueRentalResponse(BaseModel):
    rental_id: UUID
    equipment_id: UUID
    member_id: UUID
    status: str
    end_date: datetime
    days_overdue: int
    accrued_late_fee: Decimal
    currency: str

    @classmethod
    def from_dto(cls, dto: OverdueRentalItem) -> "OverdueRentalResponse":
        return cls(
            rental_id=dto.rental_id,
            equipment_id=dto.equipment_id,
            member_id=dto.member_id,
            status=dto.status,
            end_date=dto.end_date,
            days_overdue=dto.days_overdue,
            accrued_late_fee=dto.accrued_late_fee,
            currency=dto.currency,
        )


class OverdueRentalListResponse(BaseModel):
    rentals: list[OverdueRentalResponse]
    total_count: int

    @classmethod
    def from_dtos(cls, dtos: list[OverdueRentalItem]) -> "OverdueRentalListResponse":
        return cls(
            rentals=[OverdueRentalResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )


class ProcessOverdueRentalsResponse(BaseModel):
    processed_count: int
    rental_ids: list[UUID]

    @classmethod
    def from_dto(cls, dto: ProcessOverdueRentalsResult) -> "ProcessOverdueRentalsResponse":
        return cls(processed_count=dto.processed_count, rental_ids=dto.rental_ids)


class DamageAssessmentResponse(BaseModel):
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
    def from_dto(cls, dto: DamageAssessmentResult) -> "DamageAssessmentResponse":
        return cls(
            id=dto.id,
            rental_id=dto.rental_id,
            equipment_id=dto.equipment_id,
            condition_before=dto.condition_before,
            condition_after=dto.condition_after,
            degradation_levels=dto.degradation_levels,
            damage_fee=dto.damage_fee,
            currency=dto.currency,
            notes=dto.notes,
            assessed_by=dto.assessed_by,
            assessed_at=dto.assessed_at,
        )
