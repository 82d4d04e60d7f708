"""Member domain events."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class MemberRegistered(DomainEvent):
    """New member registered."""

    member_id: UUID
    email: str
    tier: str


@dataclass(frozen=True, kw_only=True)
class MemberTierChanged(DomainEvent):
    """Member moved to another tier (upgrade or downgrade)."""

    member_id: UUID
    previous_tier: str
    new_tier: str
