"""Member request and response schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import MemberResult


class RegisterMemberRequest(BaseModel):
    """Request to register a member.

    The email is validated and normalized by the domain; duplicates are
    rejected with 409.
    """

    name: str = Field(..., min_length=1, max_length=200, examples=["Ada Lovelace"])
    email: str = Field(..., min_length=3, max_length=320, examples=["ada@example.com"])
    tier: str = Field("basic", description="basic, silver, gold or platinum")


class UpdateMemberTierRequest(BaseModel):
    tier: str = Field(..., description="basic, silver, gold or platinum")


class MemberResponse(BaseModel):
    """Member with the tier rules that apply to them."""

    id: UUID
    name: str
    email: str
    tier: str
    join_date: datetime
    active_rental_count: int
    total_rentals: int
    is_active: bool
    discount_percentage: Decimal
    max_concurrent_rentals: int
    max_rental_days: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: MemberResult) -> "MemberResponse":
        return cls(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            tier=dto.tier,
            join_date=dto.join_date,
            active_rental_count=dto.active_rental_count,
            total_rentals=dto.total_rentals,
            is_active=dto.is_active,
            discount_percentage=dto.discount_percentage,
            max_concurrent_rentals=dto.max_concurrent_rentals,
            max_rental_days=dto.max_rental_days,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )
