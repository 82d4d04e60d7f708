"""GetEquipment query handler.

Returns DTO (not domain entity) to prevent leaking domain to presentation.
NO domain events (queries are side-effect free).
"""

from src.application.commands.handlers.lookup_errors import equipment_not_found
from src.application.dtos import EquipmentResult
from src.application.queries.equipment_queries import GetEquipment
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import EquipmentRepository
from src.domain.value_objects import EquipmentId


class GetEquipmentHandler:
    def __init__(
        self,
        equipment_repo: EquipmentRepository,
        maintenance_interval_days: int,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._maintenance_interval_days = maintenance_interval_days

    async def handle(self, query: GetEquipment) -> Result[EquipmentResult, DomainError]:
        equipment = await self._equipment_repo.find_by_id(EquipmentId(query.equipment_id))
        if equipment is None:
            return Failure(error=equipment_not_found(query.equipment_id))
        return Success(
            value=EquipmentResult.from_entity(equipment, self._maintenance_interval_days)
        )
