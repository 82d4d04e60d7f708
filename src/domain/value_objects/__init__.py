"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.date_range import DateRange, ensure_utc
from src.domain.value_objects.email import Email, is_valid_email
from src.domain.value_objects.identifiers import (
    DamageAssessmentId,
    EquipmentId,
    MemberId,
    RentalId,
    ReservationId,
    new_damage_assessment_id,
    new_equipment_id,
    new_member_id,
    new_rental_id,
    new_reservation_id,
)
from src.domain.value_objects.money import (
    VALID_CURRENCIES,
    CurrencyMismatchError,
    Money,
    validate_currency,
)

__all__ = [
    "CurrencyMismatchError",
    "DamageAssessmentId",
    "DateRange",
    "Email",
    "EquipmentId",
    "MemberId",
    "Money",
    "RentalId",
    "ReservationId",
    "VALID_CURRENCIES",
    "ensure_utc",
    "is_valid_email",
    "new_damage_assessment_id",
    "new_equipment_id",
    "new_member_id",
    "new_rental_id",
    "new_reservation_id",
    "validate_currency",
]
