"""CancelReservation command handler."""

from datetime import UTC, datetime

from src.application.commands.handlers.lookup_errors import reservation_not_found
from src.application.commands.reservation_commands import CancelReservation
from src.application.dtos import ReservationResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import ReservationCancelled
from src.domain.protocols import EventBusProtocol, ReservationRepository
from src.domain.value_objects import ReservationId


class CancelReservationHandler:
    """Handler for CancelReservation command.

    Only PENDING and CONFIRMED reservations whose period has not ended can
    be cancelled; a second cancellation fails with
    RESERVATION_ALREADY_CANCELLED.
    """

    def __init__(
        self,
        reservation_repo: ReservationRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._event_bus = event_bus

    async def handle(
        self, cmd: CancelReservation
    ) -> Result[ReservationResult, DomainError]:
        reservation = await self._reservation_repo.find_by_id(
            ReservationId(cmd.reservation_id)
        )
        if reservation is None:
            return Failure(error=reservation_not_found(cmd.reservation_id))

        cancelled = reservation.cancel(cmd.reason, datetime.now(UTC))
        if isinstance(cancelled, Failure):
            return cancelled

        await self._reservation_repo.save(reservation)
        await self._event_bus.publish(
            ReservationCancelled(
                reservation_id=reservation.id,
                member_id=reservation.member_id,
                reason=cmd.reason,
            )
        )

        return Success(value=ReservationResult.from_entity(reservation))
