"""Member queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetMember:
    member_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetMemberRentals:
    """A member's rental history.

    Attributes:
        member_id: Member to look up.
        active_only: Only pending, active and overdue rentals.
    """

    member_id: UUID
    active_only: bool = False
