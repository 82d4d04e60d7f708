"""CreateEquipment command handler.

Adds an item to the inventory. Items created in a non-rentable condition
(poor, damaged, under repair) start unavailable.
"""

from uuid import UUID

from src.application.commands.equipment_commands import CreateEquipment
from src.application.commands.handlers.input_parsing import parse_condition, parse_money
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Equipment
from src.domain.events import EquipmentCreated
from src.domain.protocols import EquipmentRepository, EventBusProtocol


class CreateEquipmentHandler:
    """Handler for CreateEquipment command.

    Dependencies (injected via constructor):
        - EquipmentRepository: For persistence
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        equipment_repo: EquipmentRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._event_bus = event_bus

    async def handle(self, cmd: CreateEquipment) -> Result[UUID, DomainError]:
        """Handle CreateEquipment command.

        Returns:
            Success(UUID): New equipment id.
            Failure(ValidationError): Malformed rate, condition or name.

        Side Effects:
            - Persists the equipment
            - Publishes EquipmentCreated
        """
        condition_result = parse_condition(cmd.condition)
        if isinstance(condition_result, Failure):
            return condition_result
        rate_result = parse_money(cmd.daily_rate, cmd.currency, "daily_rate")
        if isinstance(rate_result, Failure):
            return rate_result

        try:
            equipment = Equipment.create(
                name=cmd.name,
                description=cmd.description,
                category=cmd.category,
                daily_rate=rate_result.value,
                condition=condition_result.value,
                purchase_date=cmd.purchase_date,
            )
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=str(e),
                )
            )

        await self._equipment_repo.save(equipment)

        await self._event_bus.publish(
            EquipmentCreated(
                equipment_id=equipment.id,
                name=equipment.name,
                category=equipment.category,
            )
        )

        return Success(value=equipment.id)
