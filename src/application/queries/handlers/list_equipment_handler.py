"""ListEquipment query handler."""

from src.application.dtos import EquipmentResult
from src.application.queries.equipment_queries import ListEquipment
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import EquipmentRepository


class ListEquipmentHandler:
    """Handler for ListEquipment query.

    available_only narrows to items flagged available in a rentable
    condition; category narrows to one category. Both can be combined.
    """

    def __init__(
        self,
        equipment_repo: EquipmentRepository,
        maintenance_interval_days: int,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._maintenance_interval_days = maintenance_interval_days

    async def handle(self, query: ListEquipment) -> Result[list[EquipmentResult], DomainError]:
        if query.available_only:
            items = await self._equipment_repo.find_available(query.category)
        elif query.category is not None:
            items = await self._equipment_repo.find_by_category(query.category)
        else:
            items = await self._equipment_repo.find_all()

        return Success(
            value=[
                EquipmentResult.from_entity(item, self._maintenance_interval_days)
                for item in items
            ]
        )
