"""GetOverdueRentals query handler.

Reports every unreturned rental past its end date, whether or not batch
processing has already flagged it OVERDUE, with the late fee accrued so
far at the member's tier discount.
"""

from datetime import UTC, datetime
from decimal import Decimal

from src.application.dtos import OverdueRentalItem
from src.application.queries.rental_queries import GetOverdueRentals
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import MemberRepository, RentalRepository
from src.domain.value_objects import Money, ensure_utc


class GetOverdueRentalsHandler:
    def __init__(
        self,
        rental_repo: RentalRepository,
        member_repo: MemberRepository,
        daily_late_fee: Money,
    ) -> None:
        self._rental_repo = rental_repo
        self._member_repo = member_repo
        self._daily_late_fee = daily_late_fee

    async def handle(
        self, query: GetOverdueRentals
    ) -> Result[list[OverdueRentalItem], DomainError]:
        now = ensure_utc(query.as_of) if query.as_of is not None else datetime.now(UTC)

        items = []
        for rental in await self._rental_repo.find_overdue(now):
            member = await self._member_repo.find_by_id(rental.member_id)
            discount = member.discount_percentage() if member is not None else Decimal("0")
            accrued = rental.calculate_late_fee(now, self._daily_late_fee, discount)
            items.append(
                OverdueRentalItem(
                    rental_id=rental.id,
                    equipment_id=rental.equipment_id,
                    member_id=rental.member_id,
                    status=rental.status.value,
                    end_date=rental.period.end,
                    days_overdue=rental.days_overdue(now),
                    accrued_late_fee=accrued.amount,
                    currency=accrued.currency,
                )
            )
        return Success(value=items)
