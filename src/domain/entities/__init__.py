"""Domain entities.

Mutable dataclasses holding business state. Each entity validates its own
invariants and exposes state transitions that return Result types.
"""

from src.domain.entities.damage_assessment import (
    DAMAGE_FEE_BANDS,
    DamageAssessment,
    calculate_damage_fee,
)
from src.domain.entities.equipment import DEFAULT_MAINTENANCE_INTERVAL_DAYS, Equipment
from src.domain.entities.member import Member
from src.domain.entities.rental import Rental
from src.domain.entities.reservation import Reservation

__all__ = [
    "DAMAGE_FEE_BANDS",
    "DEFAULT_MAINTENANCE_INTERVAL_DAYS",
    "DamageAssessment",
    "Equipment",
    "Member",
    "Rental",
    "Reservation",
    "calculate_damage_fee",
]
