"""Member domain entity.

A registered customer. The membership tier bounds concurrent rentals and
rental length and sets the discount applied to charges.

Usage:
    member = Member.create(name="Ada Lovelace", email="ada@example.com")
    result = member.start_rental()
    match result:
        case Success():
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import MembershipTier
from src.domain.errors import MemberError
from src.domain.value_objects import Email, MemberId, Money, new_member_id


@dataclass
class Member:
    """Rental customer.

    Attributes:
        id: Unique member identifier.
        name: Full name.
        email: Normalized email address (unique across members).
        tier: Membership tier.
        join_date: When the member registered.
        active_rental_count: Rentals currently open.
        total_rentals: Rentals ever started.
        is_active: Inactive members cannot rent or reserve.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: MemberId
    name: str
    email: str
    tier: MembershipTier = MembershipTier.BASIC
    join_date: datetime = field(default_factory=lambda: datetime.now(UTC))
    active_rental_count: int = 0
    total_rentals: int = 0
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate member after initialization.

        Raises:
            ValueError: If name is empty, email is malformed or counters
                are negative.
        """
        if not self.name or not self.name.strip():
            raise ValueError("Member name cannot be empty")
        self.email = Email(self.email).value
        if self.active_rental_count < 0 or self.total_rentals < 0:
            raise ValueError("Rental counters cannot be negative")

    @classmethod
    def create(
        cls,
        *,
        name: str,
        email: str,
        tier: MembershipTier = MembershipTier.BASIC,
    ) -> "Member":
        return cls(id=new_member_id(), name=name.strip(), email=email, tier=tier)

    # -------------------------------------------------------------------------
    # Tier Rules
    # -------------------------------------------------------------------------

    def can_rent(self) -> bool:
        """Check if the member may start another rental."""
        return self.is_active and self.active_rental_count < self.tier.max_concurrent_rentals

    def max_rental_days(self) -> int:
        return self.tier.max_rental_days

    def discount_percentage(self) -> Decimal:
        return self.tier.discount_percentage

    def apply_discount(self, amount: Money) -> Money:
        """Apply the tier discount to an amount."""
        return amount.apply_percentage_discount(self.tier.discount_percentage)

    def discount_on(self, amount: Money) -> Money:
        """Discount the tier grants on an amount."""
        return amount - self.apply_discount(amount)

    # -------------------------------------------------------------------------
    # State Changes
    # -------------------------------------------------------------------------

    def start_rental(self) -> Result[None, MemberError]:
        """Count a newly opened rental against the member's limit.

        Returns:
            Success(None): Counters incremented.
            Failure(MemberError): MEMBER_INACTIVE or RENTAL_LIMIT_EXCEEDED.
        """
        if not self.is_active:
            return Failure(error=self._inactive_error())
        if self.active_rental_count >= self.tier.max_concurrent_rentals:
            return Failure(
                error=MemberError(
                    code=ErrorCode.RENTAL_LIMIT_EXCEEDED,
                    message=(
                        f"Member has reached the limit of "
                        f"{self.tier.max_concurrent_rentals} concurrent rentals"
                    ),
                    details={
                        "member_id": str(self.id),
                        "tier": self.tier.value,
                        "max_concurrent_rentals": str(self.tier.max_concurrent_rentals),
                    },
                )
            )

        self.active_rental_count += 1
        self.total_rentals += 1
        self._touch()
        return Success(value=None)

    def end_rental(self) -> Result[None, MemberError]:
        """Release a rental slot after return or cancellation."""
        if self.active_rental_count == 0:
            return Failure(
                error=MemberError(
                    code=ErrorCode.RENTAL_NOT_ALLOWED,
                    message="Member has no active rentals to end",
                    details={"member_id": str(self.id)},
                )
            )
        self.active_rental_count -= 1
        self._touch()
        return Success(value=None)

    def upgrade_tier(self, tier: MembershipTier) -> None:
        """Move the member to another tier (upgrades and downgrades)."""
        self.tier = tier
        self._touch()

    def deactivate(self) -> Result[None, MemberError]:
        if self.active_rental_count > 0:
            return Failure(
                error=MemberError(
                    code=ErrorCode.MEMBER_HAS_ACTIVE_RENTALS,
                    message="Member with active rentals cannot be deactivated",
                    details={
                        "member_id": str(self.id),
                        "active_rental_count": str(self.active_rental_count),
                    },
                )
            )
        self.is_active = False
        self._touch()
        return Success(value=None)

    def reactivate(self) -> None:
        self.is_active = True
        self._touch()

    def update_contact(self, *, name: str | None = None, email: str | None = None) -> None:
        """Update name and/or email.

        Raises:
            ValueError: If the new name is empty or the new email is malformed.
        """
        if name is not None:
            if not name.strip():
                raise ValueError("Member name cannot be empty")
            self.name = name.strip()
        if email is not None:
            self.email = Email(email).value
        self._touch()

    def _inactive_error(self) -> MemberError:
        return MemberError(
            code=ErrorCode.MEMBER_INACTIVE,
            message="Member account is inactive",
            details={"member_id": str(self.id)},
        )

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
