"""Queries - Read operations that don't change state.

Queries represent requests for data. They are immutable dataclasses with
descriptive names (GetRental, ListEquipment).
"""

from src.application.queries.equipment_queries import (
    GetAvailableEquipment,
    GetEquipment,
    GetEquipmentMaintenanceSchedule,
    ListEquipment,
)
from src.application.queries.member_queries import GetMember, GetMemberRentals
from src.application.queries.rental_queries import (
    GetDamageAssessment,
    GetOverdueRentals,
    GetRental,
)
from src.application.queries.reservation_queries import GetReservation

__all__ = [
    "GetAvailableEquipment",
    "GetDamageAssessment",
    "GetEquipment",
    "GetEquipmentMaintenanceSchedule",
    "GetMember",
    "GetMemberRentals",
    "GetOverdueRentals",
    "GetRental",
    "GetReservation",
    "ListEquipment",
]
