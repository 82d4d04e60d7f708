"""API Route Registry - Single Source of Truth for all resource routes.

Registry structure:
    - 25 endpoints across 4 resource categories
    - Each entry is a RouteMetadata instance with complete specification
    - Handlers reference actual functions from router modules
    - Static paths precede parameterized siblings (FastAPI matches in order)

Usage:
    from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.equipment import (
    create_equipment,
    get_equipment,
    get_maintenance_schedule,
    list_equipment,
    update_equipment,
)
from src.presentation.routers.api.members import (
    get_member,
    list_member_rentals,
    register_member,
    update_member_tier,
)
from src.presentation.routers.api.rentals import (
    activate_rental,
    cancel_rental,
    create_rental,
    extend_rental,
    get_damage_assessment,
    get_rental,
    list_overdue_rentals,
    process_overdue_rentals,
    return_rental,
)
from src.presentation.routers.api.reservations import (
    cancel_reservation,
    confirm_reservation,
    create_reservation,
    fulfill_reservation,
    get_reservation,
    process_expired_reservations,
)
from src.presentation.routers.api.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.equipment_schemas import (
    EquipmentCreatedResponse,
    EquipmentListResponse,
    EquipmentResponse,
    MaintenanceScheduleResponse,
)
from src.schemas.member_schemas import MemberResponse
from src.schemas.rental_schemas import (
    CreateRentalResponse,
    DamageAssessmentResponse,
    ExtendRentalResponse,
    OverdueRentalListResponse,
    ProcessOverdueRentalsResponse,
    RentalListResponse,
    RentalResponse,
    ReturnRentalResponse,
)
from src.schemas.reservation_schemas import (
    CreateReservationResponse,
    FulfillReservationResponse,
    ProcessExpiredReservationsResponse,
    ReservationResponse,
)

_VALIDATION = ErrorSpec(status=400, description="Validation error")
_PAYMENT = ErrorSpec(status=402, description="Payment declined")
_FORBIDDEN = ErrorSpec(status=403, description="Member not allowed to rent")
_CONFLICT = ErrorSpec(status=409, description="Conflicting state")

# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Equipment Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/equipment",
        handler=list_equipment,
        resource="equipment",
        tags=["Equipment"],
        summary="List equipment",
        description=(
            "List inventory, optionally by category or only items not rented out. "
            "With start_date and end_date, only items free for that period."
        ),
        operation_id="list_equipment",
        response_model=EquipmentListResponse,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/equipment",
        handler=create_equipment,
        resource="equipment",
        tags=["Equipment"],
        summary="Create equipment",
        operation_id="create_equipment",
        response_model=EquipmentCreatedResponse,
        status_code=201,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/equipment/maintenance-schedule",
        handler=get_maintenance_schedule,
        resource="equipment",
        tags=["Equipment"],
        summary="Maintenance schedule",
        description="Next maintenance due date per item, soonest first.",
        operation_id="get_maintenance_schedule",
        response_model=MaintenanceScheduleResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/equipment/{equipment_id}",
        handler=get_equipment,
        resource="equipment",
        tags=["Equipment"],
        summary="Get equipment",
        operation_id="get_equipment",
        response_model=EquipmentResponse,
        errors=[ErrorSpec(status=404, description="Equipment not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/equipment/{equipment_id}",
        handler=update_equipment,
        resource="equipment",
        tags=["Equipment"],
        summary="Update equipment",
        description="Update item fields or record performed maintenance.",
        operation_id="update_equipment",
        response_model=EquipmentResponse,
        errors=[
            _VALIDATION,
            ErrorSpec(status=404, description="Equipment not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    # =========================================================================
    # Members Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/members",
        handler=register_member,
        resource="members",
        tags=["Members"],
        summary="Register member",
        operation_id="register_member",
        response_model=MemberResponse,
        status_code=201,
        errors=[
            _VALIDATION,
            ErrorSpec(status=409, description="Email already registered"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/members/{member_id}",
        handler=get_member,
        resource="members",
        tags=["Members"],
        summary="Get member",
        operation_id="get_member",
        response_model=MemberResponse,
        errors=[ErrorSpec(status=404, description="Member not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/members/{member_id}/tier",
        handler=update_member_tier,
        resource="members",
        tags=["Members"],
        summary="Update membership tier",
        operation_id="update_member_tier",
        response_model=MemberResponse,
        errors=[
            _VALIDATION,
            ErrorSpec(status=404, description="Member not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/members/{member_id}/rentals",
        handler=list_member_rentals,
        resource="members",
        tags=["Members"],
        summary="List member rentals",
        operation_id="list_member_rentals",
        response_model=RentalListResponse,
        errors=[ErrorSpec(status=404, description="Member not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    # =========================================================================
    # Rentals Resource (9 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/rentals",
        handler=create_rental,
        resource="rentals",
        tags=["Rentals"],
        summary="Create rental",
        description=(
            "Rent an item for a period. The discounted cost is charged upfront; "
            "the rental starts active when the period has begun, pending otherwise."
        ),
        operation_id="create_rental",
        response_model=CreateRentalResponse,
        status_code=201,
        errors=[
            _VALIDATION,
            _PAYMENT,
            _FORBIDDEN,
            ErrorSpec(status=404, description="Equipment or member not found"),
            ErrorSpec(status=409, description="Equipment not available"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/rentals/overdue",
        handler=list_overdue_rentals,
        resource="rentals",
        tags=["Rentals"],
        summary="List overdue rentals",
        operation_id="list_overdue_rentals",
        response_model=OverdueRentalListResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/rentals/overdue/processing",
        handler=process_overdue_rentals,
        resource="rentals",
        tags=["Rentals"],
        summary="Process overdue rentals",
        description="Flag active rentals past their end date as overdue.",
        operation_id="process_overdue_rentals",
        response_model=ProcessOverdueRentalsResponse,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/rentals/{rental_id}",
        handler=get_rental,
        resource="rentals",
        tags=["Rentals"],
        summary="Get rental",
        operation_id="get_rental",
        response_model=RentalResponse,
        errors=[ErrorSpec(status=404, description="Rental not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/rentals/{rental_id}/activate",
        handler=activate_rental,
        resource="rentals",
        tags=["Rentals"],
        summary="Activate rental",
        operation_id="activate_rental",
        response_model=RentalResponse,
        errors=[
            ErrorSpec(status=404, description="Rental not found"),
            _CONFLICT,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/rentals/{rental_id}/return",
        handler=return_rental,
        resource="rentals",
        tags=["Rentals"],
        summary="Return rental",
        description="Return the item; late and damage fees are charged together.",
        operation_id="return_rental",
        response_model=ReturnRentalResponse,
        errors=[
            _VALIDATION,
            _PAYMENT,
            ErrorSpec(status=404, description="Rental not found"),
            _CONFLICT,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/rentals/{rental_id}/extend",
        handler=extend_rental,
        resource="rentals",
        tags=["Rentals"],
        summary="Extend rental",
        operation_id="extend_rental",
        response_model=ExtendRentalResponse,
        errors=[
            _VALIDATION,
            _PAYMENT,
            ErrorSpec(status=404, description="Rental not found"),
            ErrorSpec(status=409, description="Equipment booked for the extension"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/rentals/{rental_id}/cancel",
        handler=cancel_rental,
        resource="rentals",
        tags=["Rentals"],
        summary="Cancel rental",
        operation_id="cancel_rental",
        response_model=RentalResponse,
        errors=[
            ErrorSpec(status=404, description="Rental not found"),
            _CONFLICT,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/rentals/{rental_id}/damage-assessment",
        handler=get_damage_assessment,
        resource="rentals",
        tags=["Rentals"],
        summary="Get damage assessment",
        operation_id="get_damage_assessment",
        response_model=DamageAssessmentResponse,
        errors=[ErrorSpec(status=404, description="Rental or assessment not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    # =========================================================================
    # Reservations Resource (7 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reservations",
        handler=create_reservation,
        resource="reservations",
        tags=["Reservations"],
        summary="Create reservation",
        operation_id="create_reservation",
        response_model=CreateReservationResponse,
        status_code=201,
        errors=[
            _VALIDATION,
            _FORBIDDEN,
            ErrorSpec(status=404, description="Equipment or member not found"),
            ErrorSpec(status=409, description="Equipment not available"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reservations/expired/processing",
        handler=process_expired_reservations,
        resource="reservations",
        tags=["Reservations"],
        summary="Process expired reservations",
        operation_id="process_expired_reservations",
        response_model=ProcessExpiredReservationsResponse,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/reservations/{reservation_id}",
        handler=get_reservation,
        resource="reservations",
        tags=["Reservations"],
        summary="Get reservation",
        operation_id="get_reservation",
        response_model=ReservationResponse,
        errors=[ErrorSpec(status=404, description="Reservation not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/reservations/{reservation_id}/confirm",
        handler=confirm_reservation,
        resource="reservations",
        tags=["Reservations"],
        summary="Confirm reservation",
        operation_id="confirm_reservation",
        response_model=ReservationResponse,
        errors=[
            ErrorSpec(status=404, description="Reservation not found"),
            _CONFLICT,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/reservations/{reservation_id}/cancel",
        handler=cancel_reservation,
        resource="reservations",
        tags=["Reservations"],
        summary="Cancel reservation",
        operation_id="cancel_reservation",
        response_model=ReservationResponse,
        errors=[
            ErrorSpec(status=404, description="Reservation not found"),
            _CONFLICT,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/reservations/{reservation_id}",
        handler=cancel_reservation,
        resource="reservations",
        tags=["Reservations"],
        summary="Delete reservation",
        description="Alias of the cancel transition.",
        operation_id="delete_reservation",
        response_model=ReservationResponse,
        errors=[
            ErrorSpec(status=404, description="Reservation not found"),
            _CONFLICT,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reservations/{reservation_id}/fulfill",
        handler=fulfill_reservation,
        resource="reservations",
        tags=["Reservations"],
        summary="Fulfill reservation",
        description="Charge and start an active rental from a confirmed reservation.",
        operation_id="fulfill_reservation",
        response_model=FulfillReservationResponse,
        status_code=201,
        errors=[
            _PAYMENT,
            _FORBIDDEN,
            ErrorSpec(status=404, description="Reservation not found"),
            _CONFLICT,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
]
