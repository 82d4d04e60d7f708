"""Reservation request and response schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import (
    CreateReservationResult,
    FulfillReservationResult,
    ProcessExpiredReservationsResult,
    ReservationResult,
)
from src.domain.protocols import DEFAULT_PAYMENT_METHOD


# =============================================================================
# Request Schemas
# =============================================================================


class CreateReservationRequest(BaseModel):
    equipment_id: UUID
    member_id: UUID
    start_date: datetime
    end_date: datetime


class CancelReservationRequest(BaseModel):
    reason: str | None = Field(None, max_length=500)


class FulfillReservationRequest(BaseModel):
    payment_method: str = Field(DEFAULT_PAYMENT_METHOD, min_length=1)


class ProcessExpiredReservationsRequest(BaseModel):
    as_of: datetime | None = Field(None, description="Reference instant (defaults to now)")


# =============================================================================
# Response Schemas
# =============================================================================


class ReservationResponse(BaseModel):
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
    def from_dto(cls, dto: ReservationResult) -> "ReservationResponse":
        return cls(
            id=dto.id,
            equipment_id=dto.equipment_id,
            member_id=dto.member_id,
            start_date=dto.start_date,
            end_date=dto.end_date,
            status=dto.status,
            cancellation_reason=dto.cancellation_reason,
            rental_id=dto.rental_id,
            confirmed_at=dto.confirmed_at,
            cancelled_at=dto.cancelled_at,
            fulfilled_at=dto.fulfilled_at,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class CreateReservationResponse(BaseModel):
    """New reservation with the cost of renting for the whole period."""

    reservation_id: UUID
    status: str
    start_date: datetime
    end_date: datetime
    estimated_cost: Decimal
    currency: str

    @classmethod
    def from_dto(cls, dto: CreateReservationResult) -> "CreateReservationResponse":
        return cls(
            reservation_id=dto.reservation_id,
            status=dto.status,
            start_date=dto.start_date,
            end_date=dto.end_date,
            estimated_cost=dto.estimated_cost,
            currency=dto.currency,
        )


class FulfillReservationResponse(BaseModel):
    reservation_id: UUID
    rental_id: UUID
    total_cost: Decimal
    currency: str
    transaction_id: str | None = None

    @classmethod
    def from_dto(cls, dto: FulfillReservationResult) -> "FulfillReservationResponse":
        return cls(
            reservation_id=dto.reservation_id,
            rental_id=dto.rental_id,
            total_cost=dto.total_cost,
            currency=dto.currency,
            transaction_id=dto.transaction_id,
        )


class ProcessExpiredReservationsResponse(BaseModel):
    expired_count: int
    reservation_ids: list[UUID]

    @classmethod
    def from_dto(
        cls, dto: ProcessExpiredReservationsResult
    ) -> "ProcessExpiredReservationsResponse":
        return cls(expired_count=dto.expired_count, reservation_ids=dto.reservation_ids)
