"""GetRental query handler."""

from datetime import UTC, datetime

from src.application.commands.handlers.lookup_errors import rental_not_found
from src.application.dtos import RentalResult
from src.application.queries.rental_queries import GetRental
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import RentalRepository
from src.domain.value_objects import RentalId


class GetRentalHandler:
    def __init__(self, rental_repo: RentalRepository) -> None:
        self._rental_repo = rental_repo

    async def handle(self, query: GetRental) -> Result[RentalResult, DomainError]:
        rental = await self._rental_repo.find_by_id(RentalId(query.rental_id))
        if rental is None:
            return Failure(error=rental_not_found(query.rental_id))
        return Success(value=RentalResult.from_entity(rental, datetime.now(UTC)))
