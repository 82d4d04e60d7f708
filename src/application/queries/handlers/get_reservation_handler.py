"""GetReservation query handler."""

from src.application.commands.handlers.lookup_errors import reservation_not_found
from src.application.dtos import ReservationResult
from src.application.queries.reservation_queries import GetReservation
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import ReservationRepository
from src.domain.value_objects import ReservationId


class GetReservationHandler:
    def __init__(self, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    async def handle(self, query: GetReservation) -> Result[ReservationResult, DomainError]:
        reservation = await self._reservation_repo.find_by_id(
            ReservationId(query.reservation_id)
        )
        if reservation is None:
            return Failure(error=reservation_not_found(query.reservation_id))
        return Success(value=ReservationResult.from_entity(reservation))
