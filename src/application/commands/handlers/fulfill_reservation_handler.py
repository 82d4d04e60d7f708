"""FulfillReservation command handler.

Turns a CONFIRMED reservation whose period has started into an ACTIVE
rental for the reserved period. The rental is priced and charged like
CreateRental; the reservation itself no longer blocks the equipment
once fulfilled.
"""

from datetime import UTC, datetime

from src.application.commands.handlers.create_rental_handler import (
    check_equipment_rentable,
)
from src.application.commands.handlers.lookup_errors import (
    equipment_not_found,
    member_not_found,
    reservation_not_found,
)
from src.application.commands.reservation_commands import FulfillReservation
from src.application.dtos import FulfillReservationResult
from src.application.services import (
    AvailabilityChecker,
    MemberEligibility,
    PaymentCollector,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Rental
from src.domain.enums import ReservationStatus
from src.domain.errors import ReservationError
from src.domain.events import RentalCreated, ReservationFulfilled
from src.domain.protocols import (
    EquipmentRepository,
    EventBusProtocol,
    MemberRepository,
    RentalRepository,
    ReservationRepository,
)
from src.domain.value_objects import ReservationId


class FulfillReservationHandler:
    """Handler for FulfillReservation command."""

    def __init__(
        self,
        reservation_repo: ReservationRepository,
        equipment_repo: EquipmentRepository,
        member_repo: MemberRepository,
        rental_repo: RentalRepository,
        availability: AvailabilityChecker,
        eligibility: MemberEligibility,
        payments: PaymentCollector,
        event_bus: EventBusProtocol,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._equipment_repo = equipment_repo
        self._member_repo = member_repo
        self._rental_repo = rental_repo
        self._availability = availability
        self._eligibility = eligibility
        self._payments = payments
        self._event_bus = event_bus

    async def handle(
        self, cmd: FulfillReservation
    ) -> Result[FulfillReservationResult, DomainError]:
        """Handle FulfillReservation command.

        Returns:
            Success(FulfillReservationResult): Rental opened and paid.
            Failure(ReservationError): INVALID_RESERVATION_STATE when not
                confirmed or not yet started.
            Failure(DomainError): Equipment, member, availability or
                payment failure.
        """
        now = datetime.now(UTC)

        reservation = await self._reservation_repo.find_by_id(
            ReservationId(cmd.reservation_id)
        )
        if reservation is None:
            return Failure(error=reservation_not_found(cmd.reservation_id))
        if not reservation.is_ready_to_fulfill(now):
            return Failure(
                error=ReservationError(
                    code=ErrorCode.INVALID_RESERVATION_STATE,
                    message=(
                        "Only confirmed reservations whose period has started "
                        "can be fulfilled"
                        if reservation.status == ReservationStatus.CONFIRMED
                        else f"Cannot fulfill a reservation in status {reservation.status.value}"
                    ),
                    details={
                        "reservation_id": str(reservation.id),
                        "status": reservation.status.value,
                    },
                )
            )

        equipment = await self._equipment_repo.find_by_id(reservation.equipment_id)
        if equipment is None:
            return Failure(error=equipment_not_found(reservation.equipment_id))
        rentable = check_equipment_rentable(equipment)
        if isinstance(rentable, Failure):
            return rentable

        member = await self._member_repo.find_by_id(reservation.member_id)
        if member is None:
            return Failure(error=member_not_found(reservation.member_id))
        eligible = await self._eligibility.check(
            member, reservation.period, now, starts_rental=True
        )
        if isinstance(eligible, Failure):
            return eligible

        available = await self._availability.ensure_available(
            equipment.id, reservation.period, exclude_reservation_id=reservation.id
        )
        if isinstance(available, Failure):
            return available

        base_cost = equipment.calculate_rental_cost(reservation.period.billable_days)
        rental = Rental.create(
            equipment_id=equipment.id,
            member_id=member.id,
            period=reservation.period,
            base_cost=base_cost,
            discount=member.discount_on(base_cost),
            condition_at_start=equipment.condition,
            now=now,
        )

        payment = await self._payments.charge(
            member.id,
            rental.total_cost,
            f"Rental of {equipment.name} (reservation {reservation.id})",
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
        fulfilled = reservation.fulfill(rental.id, now)
        if isinstance(fulfilled, Failure):
            return fulfilled

        await self._rental_repo.save(rental)
        await self._equipment_repo.save(equipment)
        await self._member_repo.save(member)
        await self._reservation_repo.save(reservation)

        await self._event_bus.publish_many(
            [
                RentalCreated(
                    rental_id=rental.id,
                    equipment_id=equipment.id,
                    member_id=member.id,
                    start_date=rental.period.start,
                    end_date=rental.period.end,
                    total_cost=rental.total_cost.amount,
                    currency=rental.total_cost.currency,
                ),
                ReservationFulfilled(
                    reservation_id=reservation.id,
                    rental_id=rental.id,
                    member_id=member.id,
                ),
                *PaymentCollector.received_events(payment.value),
            ]
        )

        return Success(
            value=FulfillReservationResult(
                reservation_id=reservation.id,
                rental_id=rental.id,
                total_cost=rental.total_cost.amount,
                currency=rental.total_cost.currency,
                transaction_id=payment.value.transaction_id if payment.value else None,
            )
        )
