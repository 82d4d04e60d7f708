"""GetEquipmentMaintenanceSchedule query handler."""

from datetime import UTC, datetime

from src.application.dtos import MaintenanceScheduleItem
from src.application.queries.equipment_queries import GetEquipmentMaintenanceSchedule
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import EquipmentRepository
from src.domain.value_objects import ensure_utc


class GetMaintenanceScheduleHandler:
    """Handler for GetEquipmentMaintenanceSchedule query.

    Lists every item with its next scheduled maintenance date, soonest
    first. days_until_due counts calendar days and goes negative once the
    date has passed.
    """

    def __init__(
        self,
        equipment_repo: EquipmentRepository,
        maintenance_interval_days: int,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._interval = maintenance_interval_days

    async def handle(
        self, query: GetEquipmentMaintenanceSchedule
    ) -> Result[list[MaintenanceScheduleItem], DomainError]:
        now = ensure_utc(query.as_of) if query.as_of is not None else datetime.now(UTC)

        if query.needs_maintenance_only:
            items = await self._equipment_repo.find_needing_maintenance(now, self._interval)
        else:
            items = await self._equipment_repo.find_all()

        schedule = []
        for item in items:
            due = item.next_maintenance_due(self._interval)
            schedule.append(
                MaintenanceScheduleItem(
                    equipment_id=item.id,
                    name=item.name,
                    category=item.category,
                    condition=item.condition.value,
                    last_maintenance_date=item.last_maintenance_date,
                    next_maintenance_due=due,
                    days_until_due=(due.date() - now.date()).days,
                    needs_maintenance=item.needs_maintenance(now, self._interval),
                )
            )
        schedule.sort(key=lambda entry: entry.next_maintenance_due)
        return Success(value=schedule)
