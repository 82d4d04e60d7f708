"""ProcessExpiredReservations command handler.

Batch job: PENDING and CONFIRMED reservations whose period ended without
being fulfilled become EXPIRED and stop blocking the equipment.
"""

from datetime import UTC, datetime
from uuid import UUID

from src.application.commands.reservation_commands import ProcessExpiredReservations
from src.application.dtos import ProcessExpiredReservationsResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import DomainEvent, ReservationExpired
from src.domain.protocols import EventBusProtocol, ReservationRepository
from src.domain.value_objects import ensure_utc


class ProcessExpiredReservationsHandler:
    def __init__(
        self,
        reservation_repo: ReservationRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._event_bus = event_bus

    async def handle(
        self, cmd: ProcessExpiredReservations
    ) -> Result[ProcessExpiredReservationsResult, DomainError]:
        now = ensure_utc(cmd.as_of) if cmd.as_of is not None else datetime.now(UTC)

        expirable = await self._reservation_repo.find_expirable(now)

        events: list[DomainEvent] = []
        expired: list[UUID] = []
        for reservation in expirable:
            if isinstance(reservation.expire(now), Failure):
                continue
            await self._reservation_repo.save(reservation)
            events.append(
                ReservationExpired(
                    reservation_id=reservation.id,
                    member_id=reservation.member_id,
                )
            )
            expired.append(reservation.id)

        await self._event_bus.publish_many(events)

        return Success(
            value=ProcessExpiredReservationsResult(
                expired_count=len(expired),
                reservation_ids=expired,
            )
        )
