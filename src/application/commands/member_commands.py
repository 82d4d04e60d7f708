"""Member commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterMember:
    """Register a new member.

    Attributes:
        name: Full name.
        email: Email address (unique across members).
        tier: Membership tier value (default "basic").
    """

    name: str
    email: str
    tier: str = "basic"


@dataclass(frozen=True, kw_only=True)
class UpdateMemberTier:
    """Move a member to another tier (upgrade or downgrade)."""

    member_id: UUID
    tier: str
