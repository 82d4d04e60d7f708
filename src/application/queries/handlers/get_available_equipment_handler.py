"""GetAvailableEquipment query handler.

Without a period this is the current availability flag. With a period an
item must also be rentable right now (flag set, condition acceptable) and
free of conflicting rentals and reservations, the same checks CreateRental
applies before booking.
"""

from src.application.commands.handlers.input_parsing import parse_period
from src.application.dtos import EquipmentResult
from src.application.queries.equipment_queries import GetAvailableEquipment
from src.application.services import AvailabilityChecker
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Equipment
from src.domain.protocols import EquipmentRepository


class GetAvailableEquipmentHandler:
    def __init__(
        self,
        equipment_repo: EquipmentRepository,
        availability: AvailabilityChecker,
        maintenance_interval_days: int,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._availability = availability
        self._maintenance_interval_days = maintenance_interval_days

    async def handle(
        self, query: GetAvailableEquipment
    ) -> Result[list[EquipmentResult], DomainError]:
        """Handle GetAvailableEquipment query.

        Returns:
            Success(list[EquipmentResult]): Matching items, ordered by name.
            Failure(ValidationError): Only one of start_date/end_date given,
                or the period is inverted.
        """
        if query.start_date is None and query.end_date is None:
            items = await self._equipment_repo.find_available(query.category)
            return Success(value=self._to_results(items))

        if query.start_date is None or query.end_date is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="start_date and end_date must be given together",
                    field="start_date" if query.start_date is None else "end_date",
                )
            )

        period_result = parse_period(query.start_date, query.end_date)
        if isinstance(period_result, Failure):
            return period_result
        period = period_result.value

        if query.category is not None:
            candidates = await self._equipment_repo.find_by_category(query.category)
        else:
            candidates = await self._equipment_repo.find_all()

        items = [
            item
            for item in candidates
            if item.is_rentable()
            and await self._availability.is_available(item.id, period)
        ]
        return Success(value=self._to_results(items))

    def _to_results(self, items: list[Equipment]) -> list[EquipmentResult]:
        return [
            EquipmentResult.from_entity(item, self._maintenance_interval_days)
            for item in items
        ]
