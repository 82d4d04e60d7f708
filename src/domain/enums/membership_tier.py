"""Membership tier enumeration.

Each tier bounds how many rentals a member may hold at once, how long a
single rental may last and the discount applied to every charge.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True, slots=True)
class TierBenefits:
    """Per-tier rental rules.

    Attributes:
        discount_percentage: Discount applied to rental and late fees.
        max_concurrent_rentals: Open rentals allowed at the same time.
        max_rental_days: Longest single rental period in days.
        early_reservations: Whether reservations may be placed early.
    """

    discount_percentage: Decimal
    max_concurrent_rentals: int
    max_rental_days: int
    early_reservations: bool


class MembershipTier(str, Enum):
    """Member classification.

    | tier     | discount | concurrent | max days | early reservations |
    |----------|----------|------------|----------|--------------------|
    | BASIC    | 0%       | 2          | 7        | no                 |
    | SILVER   | 5%       | 3          | 14       | no                 |
    | GOLD     | 10%      | 5          | 30       | yes                |
    | PLATINUM | 15%      | 10         | 60       | yes                |
    """

    BASIC = "basic"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"

    @property
    def benefits(self) -> TierBenefits:
        """Rules attached to this tier."""
        return _TIER_BENEFITS[self]

    @property
    def discount_percentage(self) -> Decimal:
        return self.benefits.discount_percentage

    @property
    def max_concurrent_rentals(self) -> int:
        return self.benefits.max_concurrent_rentals

    @property
    def max_rental_days(self) -> int:
        return self.benefits.max_rental_days

    def allows_early_reservations(self) -> bool:
        return self.benefits.early_reservations


_TIER_BENEFITS: dict[MembershipTier, TierBenefits] = {
    MembershipTier.BASIC: TierBenefits(Decimal("0"), 2, 7, False),
    MembershipTier.SILVER: TierBenefits(Decimal("5"), 3, 14, False),
    MembershipTier.GOLD: TierBenefits(Decimal("10"), 5, 30, True),
    MembershipTier.PLATINUM: TierBenefits(Decimal("15"), 10, 60, True),
}
