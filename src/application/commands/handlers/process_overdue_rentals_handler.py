"""ProcessOverdueRentals command handler.

Batch job: every ACTIVE rental whose period ended before the reference
instant becomes OVERDUE and a RentalOverdue event is published with the
days overdue and the late fee accrued so far. Rentals already OVERDUE are
left alone, so running the job twice publishes nothing new.
"""

from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from src.application.commands.rental_commands import ProcessOverdueRentals
from src.application.dtos import ProcessOverdueRentalsResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import RentalStatus
from src.domain.events import DomainEvent, RentalOverdue
from src.domain.protocols import EventBusProtocol, MemberRepository, RentalRepository
from src.domain.value_objects import Money, ensure_utc


class ProcessOverdueRentalsHandler:
    """Handler for ProcessOverdueRentals command."""

    def __init__(
        self,
        rental_repo: RentalRepository,
        member_repo: MemberRepository,
        event_bus: EventBusProtocol,
        daily_late_fee: Money,
    ) -> None:
        self._rental_repo = rental_repo
        self._member_repo = member_repo
        self._event_bus = event_bus
        self._daily_late_fee = daily_late_fee

    async def handle(
        self, cmd: ProcessOverdueRentals
    ) -> Result[ProcessOverdueRentalsResult, DomainError]:
        now = ensure_utc(cmd.as_of) if cmd.as_of is not None else datetime.now(UTC)

        overdue = await self._rental_repo.find_overdue(now)

        events: list[DomainEvent] = []
        processed: list[UUID] = []
        for rental in overdue:
            if rental.status != RentalStatus.ACTIVE:
                continue
            if isinstance(rental.mark_overdue(now), Failure):
                continue
            await self._rental_repo.save(rental)

            member = await self._member_repo.find_by_id(rental.member_id)
            discount = member.discount_percentage() if member is not None else Decimal("0")
            accrued = rental.calculate_late_fee(now, self._daily_late_fee, discount)
            events.append(
                RentalOverdue(
                    rental_id=rental.id,
                    member_id=rental.member_id,
                    days_overdue=rental.days_overdue(now),
                    accrued_late_fee=accrued.amount,
                    currency=accrued.currency,
                )
            )
            processed.append(rental.id)

        await self._event_bus.publish_many(events)

        return Success(
            value=ProcessOverdueRentalsResult(
                processed_count=len(processed),
                rental_ids=processed,
            )
        )
