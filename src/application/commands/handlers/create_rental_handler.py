"""CreateRental command handler.

Handles rental requests end to end: validation, pricing, payment and
persistence. Nothing is persisted when any check or the payment fails.

Flow:
    1. Parse the period
    2. Equipment exists and is rentable
    3. Member exists, is active, has a free slot and no overdue rentals,
       and the period fits the tier limit
    4. No conflicting rental or reservation for the period
    5. Price: daily rate × billable days, tier discount applied
    6. Charge the member (declines abort the command)
    7. Open the rental, mark the equipment rented, count the member slot
    8. Save everything, then publish RentalCreated and PaymentReceived
"""

from datetime import UTC, datetime

from src.application.commands.handlers.input_parsing import parse_period
from src.application.commands.handlers.lookup_errors import (
    equipment_not_found,
    member_not_found,
)
from src.application.commands.rental_commands import CreateRental
from src.application.dtos import CreateRentalResult
from src.application.services import (
    AvailabilityChecker,
    MemberEligibility,
    PaymentCollector,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Equipment, Rental
from src.domain.errors import EquipmentError
from src.domain.events import RentalCreated
from src.domain.protocols import (
    EquipmentRepository,
    EventBusProtocol,
    MemberRepository,
    RentalRepository,
)
from src.domain.value_objects import EquipmentId, MemberId


def check_equipment_rentable(equipment: Equipment) -> Result[None, EquipmentError]:
    """Reject equipment that is out on a rental or in unrentable condition."""
    if not equipment.condition.is_rentable():
        return Failure(
            error=EquipmentError(
                code=ErrorCode.EQUIPMENT_CONDITION_UNACCEPTABLE,
                message=(
                    f"Equipment '{equipment.name}' is in {equipment.condition.value} "
                    "condition and cannot be rented"
                ),
                details={
                    "equipment_id": str(equipment.id),
                    "condition": equipment.condition.value,
                },
            )
        )
    if not equipment.is_available:
        return Failure(
            error=EquipmentError(
                code=ErrorCode.EQUIPMENT_NOT_AVAILABLE,
                message=f"Equipment '{equipment.name}' is not available",
                details={"equipment_id": str(equipment.id)},
            )
        )
    return Success(value=None)


class CreateRentalHandler:
    """Handler for CreateRental command.

    Dependencies (injected via constructor):
        - EquipmentRepository, MemberRepository, RentalRepository: persistence
        - AvailabilityChecker: period conflict check
        - MemberEligibility: member status and tier rules
        - PaymentCollector: charges the rental total
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        equipment_repo: EquipmentRepository,
        member_repo: MemberRepository,
        rental_repo: RentalRepository,
        availability: AvailabilityChecker,
        eligibility: MemberEligibility,
        payments: PaymentCollector,
        event_bus: EventBusProtocol,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._member_repo = member_repo
        self._rental_repo = rental_repo
        self._availability = availability
        self._eligibility = eligibility
        self._payments = payments
        self._event_bus = event_bus

    async def handle(self, cmd: CreateRental) -> Result[CreateRentalResult, DomainError]:
        """Handle CreateRental command.

        Returns:
            Success(CreateRentalResult): Rental opened and paid.
            Failure(DomainError): Validation, lookup, eligibility,
                availability or payment failure.
        """
        now = datetime.now(UTC)

        period_result = parse_period(cmd.start_date, cmd.end_date)
        if isinstance(period_result, Failure):
            return period_result
        period = period_result.value

        equipment = await self._equipment_repo.find_by_id(EquipmentId(cmd.equipment_id))
        if equipment is None:
            return Failure(error=equipment_not_found(cmd.equipment_id))
        rentable = check_equipment_rentable(equipment)
        if isinstance(rentable, Failure):
            return rentable

        member = await self._member_repo.find_by_id(MemberId(cmd.member_id))
        if member is None:
            return Failure(error=member_not_found(cmd.member_id))
        eligible = await self._eligibility.check(member, period, now, starts_rental=True)
        if isinstance(eligible, Failure):
            return eligible

        available = await self._availability.ensure_available(equipment.id, period)
        if isinstance(available, Failure):
            return available

        base_cost = equipment.calculate_rental_cost(period.billable_days)
        discount = member.discount_on(base_cost)
        rental = Rental.create(
            equipment_id=equipment.id,
            member_id=member.id,
            period=period,
            base_cost=base_cost,
            discount=discount,
            condition_at_start=equipment.condition,
            now=now,
        )

        payment = await self._payments.charge(
            member.id,
            rental.total_cost,
            f"Rental of {equipment.name} ({period.billable_days} days)",
            cmd.payment_method,
        )
        if isinstance(payment, Failure):
            return payment

        marked = equipment.mark_as_rented(rental.id)
        if isinstance(marked, Failure):
            return marked
        started = member.start_rental()
        if isinstance(started, Failure):
            return started

        await self._rental_repo.save(rental)
        await self._equipment_repo.save(equipment)
        await self._member_repo.save(member)

        await self._event_bus.publish_many(
            [
                RentalCreated(
                    rental_id=rental.id,
                    equipment_id=equipment.id,
                    member_id=member.id,
                    start_date=period.start,
                    end_date=period.end,
                    total_cost=rental.total_cost.amount,
                    currency=rental.total_cost.currency,
                ),
                *PaymentCollector.received_events(payment.value),
            ]
        )

        return Success(
            value=CreateRentalResult(
                rental_id=rental.id,
                status=rental.status.value,
                start_date=period.start,
                end_date=period.end,
                base_cost=rental.base_cost.amount,
                discount=rental.discount.amount,
                total_cost=rental.total_cost.amount,
                currency=rental.total_cost.currency,
                transaction_id=payment.value.transaction_id if payment.value else None,
            )
        )
