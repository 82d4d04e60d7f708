"""UpdateEquipment command handler."""

from src.application.commands.equipment_commands import UpdateEquipment
from src.application.commands.handlers.input_parsing import parse_condition, parse_money
from src.application.commands.handlers.lookup_errors import equipment_not_found
from src.application.dtos import EquipmentResult
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.events import EquipmentUpdated
from src.domain.protocols import EquipmentRepository, EventBusProtocol
from src.domain.value_objects import EquipmentId


class UpdateEquipmentHandler:
    """Handler for UpdateEquipment command.

    Applies only the fields present on the command and publishes
    EquipmentUpdated listing what changed. A command with nothing to change
    succeeds without saving or publishing.
    """

    def __init__(
        self,
        equipment_repo: EquipmentRepository,
        event_bus: EventBusProtocol,
        maintenance_interval_days: int,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._event_bus = event_bus
        self._maintenance_interval_days = maintenance_interval_days

    async def handle(self, cmd: UpdateEquipment) -> Result[EquipmentResult, DomainError]:
        equipment = await self._equipment_repo.find_by_id(EquipmentId(cmd.equipment_id))
        if equipment is None:
            return Failure(error=equipment_not_found(cmd.equipment_id))

        changed: list[str] = []

        if cmd.condition is not None:
            condition_result = parse_condition(cmd.condition)
            if isinstance(condition_result, Failure):
                return condition_result
            if condition_result.value != equipment.condition:
                equipment.update_condition(condition_result.value)
                changed.append("condition")

        if cmd.daily_rate is not None:
            rate_result = parse_money(
                cmd.daily_rate, equipment.daily_rate.currency, "daily_rate"
            )
            if isinstance(rate_result, Failure):
                return rate_result
            if rate_result.value != equipment.daily_rate:
                equipment.update_daily_rate(rate_result.value)
                changed.append("daily_rate")

        detail_fields = {
            "name": cmd.name,
            "description": cmd.description,
            "category": cmd.category,
        }
        if any(value is not None for value in detail_fields.values()):
            try:
                equipment.update_details(**detail_fields)
            except ValueError as e:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message=str(e),
                    )
                )
            changed.extend(name for name, value in detail_fields.items() if value is not None)

        # Maintenance last so availability reflects the updated condition
        if cmd.maintenance_performed_at is not None:
            equipment.record_maintenance(cmd.maintenance_performed_at)
            changed.append("last_maintenance_date")

        if changed:
            await self._equipment_repo.save(equipment)
            await self._event_bus.publish(
                EquipmentUpdated(
                    equipment_id=equipment.id,
                    changed_fields=tuple(changed),
                )
            )

        return Success(
            value=EquipmentResult.from_entity(equipment, self._maintenance_interval_days)
        )
