"""Equipment resource handlers.

Handler functions for inventory endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_equipment             - List inventory (optionally free for a period)
    create_equipment           - Add an item
    get_maintenance_schedule   - Maintenance due dates, soonest first
    get_equipment              - Get item details
    update_equipment           - Update item fields or record maintenance
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from src.application.commands import CreateEquipment, UpdateEquipment
from src.application.commands.handlers.create_equipment_handler import (
    CreateEquipmentHandler,
)
from src.application.commands.handlers.update_equipment_handler import (
    UpdateEquipmentHandler,
)
from src.application.queries import (
    GetAvailableEquipment,
    GetEquipment,
    GetEquipmentMaintenanceSchedule,
    ListEquipment,
)
from src.application.queries.handlers.get_available_equipment_handler import (
    GetAvailableEquipmentHandler,
)
from src.application.queries.handlers.get_equipment_handler import GetEquipmentHandler
from src.application.queries.handlers.get_maintenance_schedule_handler import (
    GetMaintenanceScheduleHandler,
)
from src.application.queries.handlers.list_equipment_handler import ListEquipmentHandler
from src.core.container import (
    get_available_equipment_handler,
    get_create_equipment_handler,
    get_get_equipment_handler,
    get_list_equipment_handler,
    get_maintenance_schedule_handler,
    get_update_equipment_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.schemas.equipment_schemas import (
    CreateEquipmentRequest,
    EquipmentCreatedResponse,
    EquipmentListResponse,
    EquipmentResponse,
    MaintenanceScheduleResponse,
    UpdateEquipmentRequest,
)


async def list_equipment(
    request: Request,
    category: Annotated[
        str | None,
        Query(description="Only items in this category"),
    ] = None,
    available_only: Annotated[
        bool,
        Query(description="Only items not currently rented out"),
    ] = False,
    start_date: Annotated[
        datetime | None,
        Query(description="Period start; with end_date, only items free for the period"),
    ] = None,
    end_date: Annotated[
        datetime | None,
        Query(description="Period end; with start_date, only items free for the period"),
    ] = None,
    list_handler: ListEquipmentHandler = Depends(get_list_equipment_handler),
    available_handler: GetAvailableEquipmentHandler = Depends(
        get_available_equipment_handler
    ),
) -> EquipmentListResponse | JSONResponse:
    """List equipment.

    GET /api/equipment → 200 OK

    When either date is given the request is answered by the period
    availability search, which requires both dates.
    """
    if start_date is not None or end_date is not None:
        result = await available_handler.handle(
            GetAvailableEquipment(
                category=category,
                start_date=start_date,
                end_date=end_date,
            )
        )
    else:
        result = await list_handler.handle(
            ListEquipment(category=category, available_only=available_only)
        )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return EquipmentListResponse.from_dtos(result.value)


async def create_equipment(
    request: Request,
    data: CreateEquipmentRequest,
    handler: CreateEquipmentHandler = Depends(get_create_equipment_handler),
) -> EquipmentCreatedResponse | JSONResponse:
    """Add an item to the inventory.

    POST /api/equipment → 201 Created
    """
    command = CreateEquipment(
        name=data.name,
        description=data.description,
        category=data.category,
        daily_rate=data.daily_rate,
        condition=data.condition,
        purchase_date=data.purchase_date,
        currency=data.currency,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return EquipmentCreatedResponse(id=result.value)


async def get_maintenance_schedule(
    request: Request,
    needs_maintenance_only: Annotated[
        bool,
        Query(description="Only items whose maintenance is due"),
    ] = False,
    handler: GetMaintenanceScheduleHandler = Depends(get_maintenance_schedule_handler),
) -> MaintenanceScheduleResponse | JSONResponse:
    """Maintenance schedule.

    GET /api/equipment/maintenance-schedule → 200 OK
    """
    result = await handler.handle(
        GetEquipmentMaintenanceSchedule(needs_maintenance_only=needs_maintenance_only)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return MaintenanceScheduleResponse.from_dtos(result.value)


async def get_equipment(
    request: Request,
    equipment_id: Annotated[UUID, Path(description="Equipment UUID")],
    handler: GetEquipmentHandler = Depends(get_get_equipment_handler),
) -> EquipmentResponse | JSONResponse:
    """Get equipment details.

    GET /api/equipment/{equipment_id} → 200 OK
    """
    result = await handler.handle(GetEquipment(equipment_id=equipment_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return EquipmentResponse.from_dto(result.value)


async def update_equipment(
    request: Request,
    equipment_id: Annotated[UUID, Path(description="Equipment UUID")],
    data: UpdateEquipmentRequest,
    handler: UpdateEquipmentHandler = Depends(get_update_equipment_handler),
) -> EquipmentResponse | JSONResponse:
    """Update equipment.

    PUT /api/equipment/{equipment_id} → 200 OK
    """
    command = UpdateEquipment(
        equipment_id=equipment_id,
        name=data.name,
        description=data.description,
        category=data.category,
        daily_rate=data.daily_rate,
        condition=data.condition,
        maintenance_performed_at=data.maintenance_performed_at,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return EquipmentResponse.from_dto(result.value)
