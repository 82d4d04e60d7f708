"""Member eligibility checks for rentals and reservations.

Shared by CreateRental, CreateReservation and FulfillReservation so that
every path into a rental enforces the same tier rules before any payment
is attempted.
"""

from datetime import datetime

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities import Member
from src.domain.errors import MemberError
from src.domain.protocols import RentalRepository
from src.domain.value_objects import DateRange


class MemberEligibility:
    """Checks whether a member may rent or reserve for a period.

    Dependencies (injected via constructor):
        - RentalRepository: For the member's open rentals
    """

    def __init__(self, rental_repo: RentalRepository) -> None:
        self._rental_repo = rental_repo

    async def check(
        self,
        member: Member,
        period: DateRange,
        now: datetime,
        *,
        starts_rental: bool,
    ) -> Result[None, MemberError]:
        """Validate member status, open rentals and tier limits.

        Args:
            member: Member requesting the rental or reservation.
            period: Requested period.
            now: Reference instant for overdue detection.
            starts_rental: True when a rental slot will be taken now
                (rentals and fulfilment), False for reservations.

        Returns:
            Success(None): Member eligible.
            Failure(MemberError): MEMBER_INACTIVE, RENTAL_LIMIT_EXCEEDED,
                MEMBER_HAS_OVERDUE_RENTALS or RENTAL_PERIOD_EXCEEDS_TIER_LIMIT.
        """
        if not member.is_active:
            return Failure(
                error=MemberError(
                    code=ErrorCode.MEMBER_INACTIVE,
                    message="Member account is inactive",
                    details={"member_id": str(member.id)},
                )
            )

        if starts_rental and not member.can_rent():
            return Failure(
                error=MemberError(
                    code=ErrorCode.RENTAL_LIMIT_EXCEEDED,
                    message=(
                        f"Member has reached the limit of "
                        f"{member.tier.max_concurrent_rentals} concurrent rentals"
                    ),
                    details={
                        "member_id": str(member.id),
                        "tier": member.tier.value,
                        "max_concurrent_rentals": str(member.tier.max_concurrent_rentals),
                    },
                )
            )

        open_rentals = await self._rental_repo.find_by_member(member.id, active_only=True)
        overdue = [r for r in open_rentals if r.is_overdue(now)]
        if overdue:
            return Failure(
                error=MemberError(
                    code=ErrorCode.MEMBER_HAS_OVERDUE_RENTALS,
                    message=f"Member has {len(overdue)} overdue rental(s)",
                    details={
                        "member_id": str(member.id),
                        "overdue_count": str(len(overdue)),
                    },
                )
            )

        return self.check_period(member, period)

    @staticmethod
    def check_period(member: Member, period: DateRange) -> Result[None, MemberError]:
        """Reject periods longer than the member's tier allows."""
        if period.billable_days > member.max_rental_days():
            return Failure(
                error=MemberError(
                    code=ErrorCode.RENTAL_PERIOD_EXCEEDS_TIER_LIMIT,
                    message=(
                        f"Rental of {period.billable_days} days exceeds the "
                        f"{member.max_rental_days()}-day limit for the "
                        f"{member.tier.value} tier"
                    ),
                    details={
                        "member_id": str(member.id),
                        "tier": member.tier.value,
                        "requested_days": str(period.billable_days),
                        "max_rental_days": str(member.max_rental_days()),
                    },
                )
            )
        return Success(value=None)
