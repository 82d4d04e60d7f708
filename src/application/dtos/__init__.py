"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.
They transfer data from the application layer to the presentation layer.

Note:
    DTOs are NOT the same as:
    - Domain entities (returned only inside the application layer)
    - API schemas (Pydantic models in presentation layer)
"""

from src.application.dtos.equipment_dtos import EquipmentResult, MaintenanceScheduleItem
from src.application.dtos.member_dtos import MemberResult
from src.application.dtos.rental_dtos import (
    CreateRentalResult,
    DamageAssessmentResult,
    ExtendRentalResult,
    OverdueRentalItem,
    ProcessOverdueRentalsResult,
    RentalResult,
    ReturnRentalResult,
)
from src.application.dtos.reservation_dtos import (
    CreateReservationResult,
    FulfillReservationResult,
    ProcessExpiredReservationsResult,
    ReservationResult,
)

__all__ = [
    # Equipment
    "EquipmentResult",
    "MaintenanceScheduleItem",
    # Members
    "MemberResult",
    # Rentals
    "CreateRentalResult",
    "DamageAssessmentResult",
    "ExtendRentalResult",
    "OverdueRentalItem",
    "ProcessOverdueRentalsResult",
    "RentalResult",
    "ReturnRentalResult",
    # Reservations
    "CreateReservationResult",
    "FulfillReservationResult",
    "ProcessExpiredReservationsResult",
    "ReservationResult",
]
