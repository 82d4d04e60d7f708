"""ExtendRental command handler.

Extends an ACTIVE rental to a later end date. The extension window
(current end → new end) must be free of other rentals and reservations,
the whole period must stay within the member's tier limit, and the added
billable days are charged at the daily rate with the tier discount.
"""

from datetime import UTC, datetime, timedelta

from src.application.commands.handlers.lookup_errors import (
    equipment_not_found,
    member_not_found,
    rental_not_found,
)
from src.application.commands.rental_commands import ExtendRental
from src.application.dtos import ExtendRentalResult
from src.application.services import (
    AvailabilityChecker,
    MemberEligibility,
    PaymentCollector,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import RentalStatus
from src.domain.errors import RentalError
from src.domain.events import RentalExtended
from src.domain.protocols import (
    EquipmentRepository,
    EventBusProtocol,
    MemberRepository,
    RentalRepository,
)
from src.domain.value_objects import DateRange, RentalId, ensure_utc


class ExtendRentalHandler:
    """Handler for ExtendRental command."""

    def __init__(
        self,
        rental_repo: RentalRepository,
        equipment_repo: EquipmentRepository,
        member_repo: MemberRepository,
        availability: AvailabilityChecker,
        payments: PaymentCollector,
        event_bus: EventBusProtocol,
    ) -> None:
        self._rental_repo = rental_repo
        self._equipment_repo = equipment_repo
        self._member_repo = member_repo
        self._availability = availability
        self._payments = payments
        self._event_bus = event_bus

    async def handle(self, cmd: ExtendRental) -> Result[ExtendRentalResult, DomainError]:
        """Handle ExtendRental command.

        Returns:
            Success(ExtendRentalResult): Rental extended and extension paid.
            Failure(ValidationError): Neither or both of new_end_date and
                additional_days given, or additional_days not positive.
            Failure(RentalError): INVALID_RENTAL_EXTENSION or
                EQUIPMENT_UNAVAILABLE_FOR_PERIOD.
            Failure(MemberError): RENTAL_PERIOD_EXCEEDS_TIER_LIMIT.
            Failure(PaymentError): PAYMENT_FAILED.
        """
        if (cmd.new_end_date is None) == (cmd.additional_days is None):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Provide exactly one of new_end_date or additional_days",
                    field="new_end_date",
                )
            )
        if cmd.additional_days is not None and cmd.additional_days <= 0:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="additional_days must be positive",
                    field="additional_days",
                )
            )

        rental = await self._rental_repo.find_by_id(RentalId(cmd.rental_id))
        if rental is None:
            return Failure(error=rental_not_found(cmd.rental_id))

        if rental.status != RentalStatus.ACTIVE:
            return Failure(
                error=RentalError(
                    code=ErrorCode.INVALID_RENTAL_EXTENSION,
                    message=f"Only active rentals can be extended (status: {rental.status.value})",
                    details={"rental_id": str(rental.id), "status": rental.status.value},
                )
            )

        previous_period = rental.period
        if cmd.new_end_date is not None:
            new_end = ensure_utc(cmd.new_end_date)
        else:
            new_end = previous_period.end + timedelta(days=cmd.additional_days or 0)
        if new_end <= previous_period.end:
            return Failure(
                error=RentalError(
                    code=ErrorCode.INVALID_RENTAL_EXTENSION,
                    message="New end date must be after the current end date",
                    details={
                        "rental_id": str(rental.id),
                        "current_end_date": previous_period.end.isoformat(),
                    },
                )
            )
        new_period = previous_period.extend_to(new_end)

        member = await self._member_repo.find_by_id(rental.member_id)
        if member is None:
            return Failure(error=member_not_found(rental.member_id))
        within_tier = MemberEligibility.check_period(member, new_period)
        if isinstance(within_tier, Failure):
            return within_tier

        window = DateRange(start=previous_period.end, end=new_end)
        available = await self._availability.ensure_available(
            rental.equipment_id, window, exclude_rental_id=rental.id
        )
        if isinstance(available, Failure):
            return available

        equipment = await self._equipment_repo.find_by_id(rental.equipment_id)
        if equipment is None:
            return Failure(error=equipment_not_found(rental.equipment_id))

        added_days = new_period.billable_days - previous_period.billable_days
        additional_cost = equipment.daily_rate * added_days
        additional_discount = member.discount_on(additional_cost)
        charged = additional_cost - additional_discount

        payment = await self._payments.charge(
            member.id,
            charged,
            f"Extension of {equipment.name} rental ({added_days} days)",
            cmd.payment_method,
        )
        if isinstance(payment, Failure):
            return payment

        extended = rental.extend(
            new_end=new_end,
            additional_cost=additional_cost,
            additional_discount=additional_discount,
            now=datetime.now(UTC),
        )
        if isinstance(extended, Failure):
            return extended

        await self._rental_repo.save(rental)

        await self._event_bus.publish_many(
            [
                RentalExtended(
                    rental_id=rental.id,
                    member_id=rental.member_id,
                    previous_end_date=previous_period.end,
                    new_end_date=new_end,
                    additional_cost=charged.amount,
                    currency=charged.currency,
                ),
                *PaymentCollector.received_events(payment.value),
            ]
        )

        return Success(
            value=ExtendRentalResult(
                rental_id=rental.id,
                previous_end_date=previous_period.end,
                new_end_date=new_end,
                additional_cost=charged.amount,
                total_cost=rental.total_cost.amount,
                currency=rental.total_cost.currency,
                transaction_id=payment.value.transaction_id if payment.value else None,
            )
        )
