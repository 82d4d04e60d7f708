"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import CreateRentalRequest, RentalResponse
"""

from src.schemas.common_schemas import HealthResponse
from src.schemas.equipment_schemas import (
    CreateEquipmentRequest,
    EquipmentCreatedResponse,
    EquipmentListResponse,
    EquipmentResponse,
    MaintenanceScheduleItemResponse,
    MaintenanceScheduleResponse,
    UpdateEquipmentRequest,
)
from src.schemas.member_schemas import (
    MemberResponse,
    RegisterMemberRequest,
    UpdateMemberTierRequest,
)
from src.schemas.rental_schemas import (
    CreateRentalRequest,
    CreateRentalResponse,
    DamageAssessmentResponse,
    ExtendRentalRequest,
    ExtendRentalResponse,
    OverdueRentalListResponse,
    OverdueRentalResponse,
    ProcessOverdueRentalsRequest,
    ProcessOverdueRentalsResponse,
    RentalListResponse,
    RentalResponse,
    ReturnRentalRequest,
    ReturnRentalResponse,
)
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

__all__ = [
    # Common
    "HealthResponse",
    # Equipment
    "CreateEquipmentRequest",
    "EquipmentCreatedResponse",
    "EquipmentListResponse",
    "EquipmentResponse",
    "MaintenanceScheduleItemResponse",
    "MaintenanceScheduleResponse",
    "UpdateEquipmentRequest",
    # Members
    "MemberResponse",
    "RegisterMemberRequest",
    "UpdateMemberTierRequest",
    # Rentals
    "CreateRentalRequest",
    "CreateRentalResponse",
    "DamageAssessmentResponse",
    "ExtendRentalRequest",
    "ExtendRentalResponse",
    "OverdueRentalListResponse",
    "OverdueRentalResponse",
    "ProcessOverdueRentalsRequest",
    "ProcessOverdueRentalsResponse",
    "RentalListResponse",
    "RentalResponse",
    "ReturnRentalRequest",
    "ReturnRentalResponse",
    # Reservations
    "CancelReservationRequest",
    "CreateReservationRequest",
    "CreateReservationResponse",
    "FulfillReservationRequest",
    "FulfillReservationResponse",
    "ProcessExpiredReservationsRequest",
    "ProcessExpiredReservationsResponse",
    "ReservationResponse",
]
