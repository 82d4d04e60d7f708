"""Rentals resource handlers.

Handler functions for the rental lifecycle endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_rental            - Rent an item for a period (charges upfront)
    list_overdue_rentals     - Rentals past their end date
    process_overdue_rentals  - Flag overdue rentals (batch)
    get_rental               - Get rental details
    activate_rental          - Start a pending rental
    return_rental            - Return an item (late and damage fees)
    extend_rental            - Move the end date out
    cancel_rental            - Cancel a pending or active rental
    get_damage_assessment    - Damage assessment recorded at return
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands import (
    ActivateRental,
    CancelRental,
    CreateRental,
    ExtendRental,
    ProcessOverdueRentals,
    ReturnRental,
)
from src.application.commands.handlers.activate_rental_handler import (
    ActivateRentalHandler,
)
from src.application.commands.handlers.cancel_rental_handler import CancelRentalHandler
from src.application.commands.handlers.create_rental_handler import CreateRentalHandler
from src.application.commands.handlers.extend_rental_handler import ExtendRentalHandler
from src.application.commands.handlers.process_overdue_rentals_handler import (
    ProcessOverdueRentalsHandler,
)
from src.application.commands.handlers.return_rental_handler import ReturnRentalHandler
from src.application.queries import GetDamageAssessment, GetOverdueRentals, GetRental
from src.application.queries.handlers.get_damage_assessment_handler import (
    GetDamageAssessmentHandler,
)
from src.application.queries.handlers.get_overdue_rentals_handler import (
    GetOverdueRentalsHandler,
)
from src.application.queries.handlers.get_rental_handler import GetRentalHandler
from src.core.container import (
    get_activate_rental_handler,
    get_cancel_rental_handler,
    get_create_rental_handler,
    get_damage_assessment_handler,
    get_extend_rental_handler,
    get_get_rental_handler,
    get_overdue_rentals_handler,
    get_process_overdue_rentals_handler,
    get_return_rental_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.schemas.rental_schemas import (
    CreateRentalRequest,
    CreateRentalResponse,
    DamageAssessmentResponse,
    ExtendRentalRequest,
    ExtendRentalResponse,
    OverdueRentalListResponse,
    ProcessOverdueRentalsRequest,
    ProcessOverdueRentalsResponse,
    RentalResponse,
    ReturnRentalRequest,
    ReturnRentalResponse,
)

RentalId = Annotated[UUID, Path(description="Rental UUID")]


async def create_rental(
    request: Request,
    data: CreateRentalRequest,
    handler: CreateRentalHandler = Depends(get_create_rental_handler),
) -> CreateRentalResponse | JSONResponse:
    """Create a rental.

    POST /api/rentals → 201 Created

    The discounted cost is charged before anything is stored. A declined
    charge returns 402 and leaves no rental behind.
    """
    command = CreateRental(
        equipment_id=data.equipment_id,
        member_id=data.member_id,
        start_date=data.start_date,
        end_date=data.end_date,
        payment_method=data.payment_method,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return CreateRentalResponse.from_dto(result.value)


async def list_overdue_rentals(
    request: Request,
    handler: GetOverdueRentalsHandler = Depends(get_overdue_rentals_handler),
) -> OverdueRentalListResponse | JSONResponse:
    """Rentals past their end date, with the late fee accrued so far.

    GET /api/rentals/overdue → 200 OK
    """
    result = await handler.handle(GetOverdueRentals())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return OverdueRentalListResponse.from_dtos(result.value)


async def process_overdue_rentals(
    request: Request,
    data: ProcessOverdueRentalsRequest | None = None,
    handler: ProcessOverdueRentalsHandler = Depends(get_process_overdue_rentals_handler),
) -> ProcessOverdueRentalsResponse | JSONResponse:
    """Flag active rentals past their end date as overdue.

    POST /api/rentals/overdue/processing → 200 OK
    """
    as_of = data.as_of if data is not None else None
    result = await handler.handle(ProcessOverdueRentals(as_of=as_of))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return ProcessOverdueRentalsResponse.from_dto(result.value)


async def get_rental(
    request: Request,
    rental_id: RentalId,
    handler: GetRentalHandler = Depends(get_get_rental_handler),
) -> RentalResponse | JSONResponse:
    """Get rental details.

    GET /api/rentals/{rental_id} → 200 OK
    """
    result = await handler.handle(GetRental(rental_id=rental_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return RentalResponse.from_dto(result.value)


async def activate_rental(
    request: Request,
    rental_id: RentalId,
    handler: ActivateRentalHandler = Depends(get_activate_rental_handler),
) -> RentalResponse | JSONResponse:
    """Start a pending rental.

    PUT /api/rentals/{rental_id}/activate → 200 OK
    """
    result = await handler.handle(ActivateRental(rental_id=rental_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return RentalResponse.from_dto(result.value)


async def return_rental(
    request: Request,
    rental_id: RentalId,
    data: ReturnRentalRequest,
    handler: ReturnRentalHandler = Depends(get_return_rental_handler),
) -> ReturnRentalResponse | JSONResponse:
    """Return rented equipment.

    PUT /api/rentals/{rental_id}/return → 200 OK

    Late and damage fees are charged together; a worse condition than at
    checkout records a damage assessment.
    """
    command = ReturnRental(
        rental_id=rental_id,
        condition_at_return=data.condition_at_return,
        notes=data.notes,
        assessed_by=data.assessed_by,
        payment_method=data.payment_method,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return ReturnRentalResponse.from_dto(result.value)


async def extend_rental(
    request: Request,
    rental_id: RentalId,
    data: ExtendRentalRequest,
    handler: ExtendRentalHandler = Depends(get_extend_rental_handler),
) -> ExtendRentalResponse | JSONResponse:
    """Extend a rental.

    PUT /api/rentals/{rental_id}/extend → 200 OK
    """
    command = ExtendRental(
        rental_id=rental_id,
        new_end_date=data.new_end_date,
        additional_days=data.additional_days,
        payment_method=data.payment_method,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return ExtendRentalResponse.from_dto(result.value)


async def cancel_rental(
    request: Request,
    rental_id: RentalId,
    handler: CancelRentalHandler = Depends(get_cancel_rental_handler),
) -> RentalResponse | JSONResponse:
    """Cancel a pending or active rental.

    PUT /api/rentals/{rental_id}/cancel → 200 OK
    """
    result = await handler.handle(CancelRental(rental_id=rental_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return RentalResponse.from_dto(result.value)


async def get_damage_assessment(
    request: Request,
    rental_id: RentalId,
    handler: GetDamageAssessmentHandler = Depends(get_damage_assessment_handler),
) -> DamageAssessmentResponse | JSONResponse:
    """Damage assessment recorded when the rental was returned.

    GET /api/rentals/{rental_id}/damage-assessment → 200 OK
    """
    result = await handler.handle(GetDamageAssessment(rental_id=rental_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return DamageAssessmentResponse.from_dto(result.value)
