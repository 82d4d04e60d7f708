"""Reservations resource handlers.

Handlers:
    create_reservation             - Hold an item for a future period
    process_expired_reservations   - Expire holds whose start has passed (batch)
    get_reservation                - Get reservation details
    confirm_reservation            - Confirm a pending hold
    cancel_reservation             - Cancel a hold (PUT .../cancel and DELETE)
    fulfill_reservation            - Turn a confirmed hold into a rental
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands import (
    CancelReservation,
    ConfirmReservation,
    CreateReservation,
    FulfillReservation,
    ProcessExpiredReservations,
)
from src.application.commands.handlers.cancel_reservation_handler import (
    CancelReservationHandler,
)
from src.application.commands.handlers.confirm_reservation_handler import (
    ConfirmReservationHandler,
)
from src.application.commands.handlers.create_reservation_handler import (
    CreateReservationHandler,
)
from src.application.commands.handlers.fulfill_reservation_handler import (
    FulfillReservationHandler,
)
from src.application.commands.handlers.process_expired_reservations_handler import (
    ProcessExpiredReservationsHandler,
)
from src.application.queries import GetReservation
from src.application.queries.handlers.get_reservation_handler import (
    GetReservationHandler,
)
from src.core.container import (
    get_cancel_reservation_handler,
    get_confirm_reservation_handler,
    get_create_reservation_handler,
    get_fulfill_reservation_handler,
    get_get_reservation_handler,
    get_process_expired_reservations_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.schemas.reservation_schemas import (
    CancelReservationRequest,
    CreateReservationRequest,
    CreateReservationResponse,
    FulfillReservationRequest,
    FulfillReservationResponse,
    ProcessExpiredReservationsRequest,
    ProcessExpiredReservationsResponse,
    ReservationResponse,
)

ReservationId = Annotated[UUID, Path(description="Reservation UUID")]


async def create_reservation(
    request: Request,
    data: CreateReservationRequest,
    handler: CreateReservationHandler = Depends(get_create_reservation_handler),
) -> CreateReservationResponse | JSONResponse:
    """Reserve equipment for a future period.

    POST /api/reservations → 201 Created
    """
    command = CreateReservation(
        equipment_id=data.equipment_id,
        member_id=data.member_id,
        start_date=data.start_date,
        end_date=data.end_date,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return CreateReservationResponse.from_dto(result.value)


async def process_expired_reservations(
    request: Request,
    data: ProcessExpiredReservationsRequest | None = None,
    handler: ProcessExpiredReservationsHandler = Depends(
        get_process_expired_reservations_handler
    ),
) -> ProcessExpiredReservationsResponse | JSONResponse:
    """Expire pending and confirmed reservations whose start has passed.

    POST /api/reservations/expired/processing → 200 OK
    """
    as_of = data.as_of if data is not None else None
    result = await handler.handle(ProcessExpiredReservations(as_of=as_of))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return ProcessExpiredReservationsResponse.from_dto(result.value)


async def get_reservation(
    request: Request,
    reservation_id: ReservationId,
    handler: GetReservationHandler = Depends(get_get_reservation_handler),
) -> ReservationResponse | JSONResponse:
    """Get reservation details.

    GET /api/reservations/{reservation_id} → 200 OK
    """
    result = await handler.handle(GetReservation(reservation_id=reservation_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return ReservationResponse.from_dto(result.value)


async def confirm_reservation(
    request: Request,
    reservation_id: ReservationId,
    handler: ConfirmReservationHandler = Depends(get_confirm_reservation_handler),
) -> ReservationResponse | JSONResponse:
    """Confirm a pending reservation.

    PUT /api/reservations/{reservation_id}/confirm → 200 OK
    """
    result = await handler.handle(ConfirmReservation(reservation_id=reservation_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return ReservationResponse.from_dto(result.value)


async def cancel_reservation(
    request: Request,
    reservation_id: ReservationId,
    data: CancelReservationRequest | None = None,
    handler: CancelReservationHandler = Depends(get_cancel_reservation_handler),
) -> ReservationResponse | JSONResponse:
    """Cancel a reservation.

    PUT /api/reservations/{reservation_id}/cancel → 200 OK
    DELETE /api/reservations/{reservation_id} → 200 OK
    """
    reason = data.reason if data is not None else None
    result = await handler.handle(
        CancelReservation(reservation_id=reservation_id, reason=reason)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return ReservationResponse.from_dto(result.value)


async def fulfill_reservation(
    request: Request,
    reservation_id: ReservationId,
    data: FulfillReservationRequest | None = None,
    handler: FulfillReservationHandler = Depends(get_fulfill_reservation_handler),
) -> FulfillReservationResponse | JSONResponse:
    """Turn a confirmed reservation into an active rental.

    POST /api/reservations/{reservation_id}/fulfill → 201 Created
    """
    command = (
        FulfillReservation(reservation_id=reservation_id, payment_method=data.payment_method)
        if data is not None
        else FulfillReservation(reservation_id=reservation_id)
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return FulfillReservationResponse.from_dto(result.value)
