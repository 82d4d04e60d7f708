"""Equipment handler dependency factories.

Request-scoped handler instances for inventory operations:
- Commands: create, update (details, rate, condition, maintenance)
- Queries: get, list, availability search, maintenance schedule
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_db_session
from src.core.container.repositories import build_availability_checker

if TYPE_CHECKING:
    from src.application.commands.handlers.create_equipment_handler import (
        CreateEquipmentHandler,
    )
    from src.application.commands.handlers.update_equipment_handler import (
        UpdateEquipmentHandler,
    )
    from src.application.queries.handlers.get_available_equipment_handler import (
        GetAvailableEquipmentHandler,
    )
    from src.application.queries.handlers.get_equipment_handler import (
        GetEquipmentHandler,
    )
    from src.application.queries.handlers.get_maintenance_schedule_handler import (
        GetMaintenanceScheduleHandler,
    )
    from src.application.queries.handlers.list_equipment_handler import (
        ListEquipmentHandler,
    )


# ============================================================================
# Command Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_equipment_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateEquipmentHandler":
    from src.application.commands.handlers.create_equipment_handler import (
        CreateEquipmentHandler,
    )
    from src.infrastructure.persistence.repositories import EquipmentRepository

    return CreateEquipmentHandler(
        equipment_repo=EquipmentRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_update_equipment_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateEquipmentHandler":
    from src.application.commands.handlers.update_equipment_handler import (
        UpdateEquipmentHandler,
    )
    from src.infrastructure.persistence.repositories import EquipmentRepository

    return UpdateEquipmentHandler(
        equipment_repo=EquipmentRepository(session=session),
        event_bus=get_event_bus(),
        maintenance_interval_days=settings.maintenance_interval_days,
    )


# ============================================================================
# Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_get_equipment_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetEquipmentHandler":
    from src.application.queries.handlers.get_equipment_handler import (
        GetEquipmentHandler,
    )
    from src.infrastructure.persistence.repositories import EquipmentRepository

    return GetEquipmentHandler(
        equipment_repo=EquipmentRepository(session=session),
        maintenance_interval_days=settings.maintenance_interval_days,
    )


async def get_list_equipment_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListEquipmentHandler":
    from src.application.queries.handlers.list_equipment_handler import (
        ListEquipmentHandler,
    )
    from src.infrastructure.persistence.repositories import EquipmentRepository

    return ListEquipmentHandler(
        equipment_repo=EquipmentRepository(session=session),
        maintenance_interval_days=settings.maintenance_interval_days,
    )


async def get_available_equipment_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetAvailableEquipmentHandler":
    """Get GetAvailableEquipment query handler (request-scoped).

    Creates handler with:
    - EquipmentRepository (request-scoped)
    - AvailabilityChecker over rentals and reservations (request-scoped)
    """
    from src.application.queries.handlers.get_available_equipment_handler import (
        GetAvailableEquipmentHandler,
    )
    from src.infrastructure.persistence.repositories import EquipmentRepository

    return GetAvailableEquipmentHandler(
        equipment_repo=EquipmentRepository(session=session),
        availability=build_availability_checker(session),
        maintenance_interval_days=settings.maintenance_interval_days,
    )


async def get_maintenance_schedule_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetMaintenanceScheduleHandler":
    from src.application.queries.handlers.get_maintenance_schedule_handler import (
        GetMaintenanceScheduleHandler,
    )
    from src.infrastructure.persistence.repositories import EquipmentRepository

    return GetMaintenanceScheduleHandler(
        equipment_repo=EquipmentRepository(session=session),
        maintenance_interval_days=settings.maintenance_interval_days,
    )
