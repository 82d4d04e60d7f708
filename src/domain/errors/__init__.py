"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import RentalError, ReservationError
"""

from src.domain.errors.equipment_error import EquipmentError
from src.domain.errors.member_error import MemberError
from src.domain.errors.payment_error import PaymentError
from src.domain.errors.rental_error import RentalError
from src.domain.errors.reservation_error import ReservationError

__all__ = [
    "EquipmentError",
    "MemberError",
    "PaymentError",
    "RentalError",
    "ReservationError",
]
