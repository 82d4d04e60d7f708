"""ActivateRental command handler (PENDING → ACTIVE)."""

from datetime import UTC, datetime

from src.application.commands.handlers.lookup_errors import rental_not_found
from src.application.commands.rental_commands import ActivateRental
from src.application.dtos import RentalResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import RentalActivated
from src.domain.protocols import EventBusProtocol, RentalRepository
from src.domain.value_objects import RentalId


class ActivateRentalHandler:
    """Handler for ActivateRental command.

    Fails with INVALID_STATE_TRANSITION unless the rental is PENDING and its
    period has started.
    """

    def __init__(
        self,
        rental_repo: RentalRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._rental_repo = rental_repo
        self._event_bus = event_bus

    async def handle(self, cmd: ActivateRental) -> Result[RentalResult, DomainError]:
        now = datetime.now(UTC)

        rental = await self._rental_repo.find_by_id(RentalId(cmd.rental_id))
        if rental is None:
            return Failure(error=rental_not_found(cmd.rental_id))

        activated = rental.activate(now)
        if isinstance(activated, Failure):
            return activated

        await self._rental_repo.save(rental)
        await self._event_bus.publish(
            RentalActivated(rental_id=rental.id, member_id=rental.member_id)
        )

        return Success(value=RentalResult.from_entity(rental, now))
