"""Member error types."""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class MemberError(DomainError):
    """Membership rule violation.

    Covers inactive members, the per-tier concurrent rental limit, members
    with overdue rentals and rental periods longer than the tier allows.
    Limits are reported in details (e.g. {"max_rental_days": "7"}).
    """

    pass
