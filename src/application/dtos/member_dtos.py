"""Member handler results."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Self
from uuid import UUID

from src.domain.entities import Member


@dataclass
class MemberResult:
    """Single member DTO including the tier rules that apply to them."""

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
    def from_entity(cls, member: Member) -> Self:
        return cls(
            id=member.id,
            name=member.name,
            email=member.email,
            tier=member.tier.value,
            join_date=member.join_date,
            active_rental_count=member.active_rental_count,
            total_rentals=member.total_rentals,
            is_active=member.is_active,
            discount_percentage=member.tier.discount_percentage,
            max_concurrent_rentals=member.tier.max_concurrent_rentals,
            max_rental_days=member.tier.max_rental_days,
            created_at=member.created_at,
            updated_at=member.updated_at,
        )
