"""CreateReservation command handler.

Places a PENDING hold on equipment for a future period. Nothing is
charged; the estimated cost is what renting for the whole period would
cost today with the member's tier discount.
"""

from datetime import UTC, datetime

from src.application.commands.handlers.input_parsing import parse_period
from src.application.commands.handlers.lookup_errors import (
    equipment_not_found,
    member_not_found,
)
from src.application.commands.reservation_commands import CreateReservation
from src.application.dtos import CreateReservationResult
from src.application.services import AvailabilityChecker, MemberEligibility
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Reservation
from src.domain.events import ReservationCreated
from src.domain.protocols import (
    EquipmentRepository,
    EventBusProtocol,
    MemberRepository,
    ReservationRepository,
)
from src.domain.value_objects import EquipmentId, MemberId


class CreateReservationHandler:
    """Handler for CreateReservation command.

    Dependencies (injected via constructor):
        - EquipmentRepository, MemberRepository, ReservationRepository
        - AvailabilityChecker: period conflict check
        - MemberEligibility: member status and tier rules
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        equipment_repo: EquipmentRepository,
        member_repo: MemberRepository,
        reservation_repo: ReservationRepository,
        availability: AvailabilityChecker,
        eligibility: MemberEligibility,
        event_bus: EventBusProtocol,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._member_repo = member_repo
        self._reservation_repo = reservation_repo
        self._availability = availability
        self._eligibility = eligibility
        self._event_bus = event_bus

    async def handle(
        self, cmd: CreateReservation
    ) -> Result[CreateReservationResult, DomainError]:
        """Handle CreateReservation command.

        Returns:
            Success(CreateReservationResult): Reservation placed.
            Failure(ReservationError): INVALID_RESERVATION_PERIOD when the
                period has already started.
            Failure(MemberError): Inactive member, overdue rentals or
                period longer than the tier allows.
            Failure(RentalError): EQUIPMENT_UNAVAILABLE_FOR_PERIOD.
        """
        now = datetime.now(UTC)

        period_result = parse_period(cmd.start_date, cmd.end_date)
        if isinstance(period_result, Failure):
            return period_result
        period = period_result.value

        equipment = await self._equipment_repo.find_by_id(EquipmentId(cmd.equipment_id))
        if equipment is None:
            return Failure(error=equipment_not_found(cmd.equipment_id))
        member = await self._member_repo.find_by_id(MemberId(cmd.member_id))
        if member is None:
            return Failure(error=member_not_found(cmd.member_id))

        created = Reservation.create(
            equipment_id=equipment.id,
            member_id=member.id,
            period=period,
            now=now,
        )
        if isinstance(created, Failure):
            return created
        reservation = created.value

        eligible = await self._eligibility.check(member, period, now, starts_rental=False)
        if isinstance(eligible, Failure):
            return eligible

        available = await self._availability.ensure_available(equipment.id, period)
        if isinstance(available, Failure):
            return available

        await self._reservation_repo.save(reservation)

        await self._event_bus.publish(
            ReservationCreated(
                reservation_id=reservation.id,
                equipment_id=equipment.id,
                member_id=member.id,
                start_date=period.start,
                end_date=period.end,
            )
        )

        estimated = member.apply_discount(
            equipment.calculate_rental_cost(period.billable_days)
        )
        return Success(
            value=CreateReservationResult(
                reservation_id=reservation.id,
                status=reservation.status.value,
                start_date=period.start,
                end_date=period.end,
                estimated_cost=estimated.amount,
                currency=estimated.currency,
            )
        )
