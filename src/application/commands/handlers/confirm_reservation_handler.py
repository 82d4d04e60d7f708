"""ConfirmReservation command handler (PENDING → CONFIRMED)."""

from datetime import UTC, datetime

from src.application.commands.handlers.lookup_errors import reservation_not_found
from src.application.commands.reservation_commands import ConfirmReservation
from src.application.dtos import ReservationResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import ReservationConfirmed
from src.domain.protocols import EventBusProtocol, ReservationRepository
from src.domain.value_objects import ReservationId


class ConfirmReservationHandler:
    def __init__(
        self,
        reservation_repo: ReservationRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._event_bus = event_bus

    async def handle(
        self, cmd: ConfirmReservation
    ) -> Result[ReservationResult, DomainError]:
        reservation = await self._reservation_repo.find_by_id(
            ReservationId(cmd.reservation_id)
        )
        if reservation is None:
            return Failure(error=reservation_not_found(cmd.reservation_id))

        confirmed = reservation.confirm(datetime.now(UTC))
        if isinstance(confirmed, Failure):
            return confirmed

        await self._reservation_repo.save(reservation)
        await self._event_bus.publish(
            ReservationConfirmed(
                reservation_id=reservation.id,
                member_id=reservation.member_id,
            )
        )

        return Success(value=ReservationResult.from_entity(reservation))
