"""CancelRental command handler.

Cancels a PENDING or ACTIVE rental, frees the equipment and the member's
rental slot. Overdue rentals must be returned instead.
"""

from datetime import UTC, datetime

from src.application.commands.handlers.lookup_errors import (
    equipment_not_found,
    member_not_found,
    rental_not_found,
)
from src.application.commands.rental_commands import CancelRental
from src.application.dtos import RentalResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import RentalCancelled
from src.domain.protocols import (
    EquipmentRepository,
    EventBusProtocol,
    MemberRepository,
    RentalRepository,
)
from src.domain.value_objects import RentalId


class CancelRentalHandler:
    """Handler for CancelRental command."""

    def __init__(
        self,
        rental_repo: RentalRepository,
        equipment_repo: EquipmentRepository,
        member_repo: MemberRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._rental_repo = rental_repo
        self._equipment_repo = equipment_repo
        self._member_repo = member_repo
        self._event_bus = event_bus

    async def handle(self, cmd: CancelRental) -> Result[RentalResult, DomainError]:
        """Handle CancelRental command.

        Returns:
            Success(RentalResult): Rental cancelled.
            Failure(RentalError): RENTAL_ALREADY_CANCELLED,
                RENTAL_ALREADY_RETURNED or RENTAL_OVERDUE.
        """
        now = datetime.now(UTC)

        rental = await self._rental_repo.find_by_id(RentalId(cmd.rental_id))
        if rental is None:
            return Failure(error=rental_not_found(cmd.rental_id))

        cancelled = rental.cancel(now)
        if isinstance(cancelled, Failure):
            return cancelled

        equipment = await self._equipment_repo.find_by_id(rental.equipment_id)
        if equipment is None:
            return Failure(error=equipment_not_found(rental.equipment_id))
        member = await self._member_repo.find_by_id(rental.member_id)
        if member is None:
            return Failure(error=member_not_found(rental.member_id))

        if equipment.current_rental_id == rental.id:
            equipment.release()
        slot_freed = member.end_rental()
        if isinstance(slot_freed, Failure):
            return slot_freed

        await self._rental_repo.save(rental)
        await self._equipment_repo.save(equipment)
        await self._member_repo.save(member)

        await self._event_bus.publish(
            RentalCancelled(
                rental_id=rental.id,
                equipment_id=rental.equipment_id,
                member_id=rental.member_id,
            )
        )

        return Success(value=RentalResult.from_entity(rental, now))
