"""Repository implementations (SQLAlchemy adapters for domain protocols)."""

from src.infrastructure.persistence.repositories.damage_assessment_repository import (
    DamageAssessmentRepository,
)
from src.infrastructure.persistence.repositories.equipment_repository import (
    EquipmentRepository,
)
from src.infrastructure.persistence.repositories.member_repository import (
    MemberRepository,
)
from src.infrastructure.persistence.repositories.rental_repository import (
    RentalRepository,
)
from src.infrastructure.persistence.repositories.reservation_repository import (
    ReservationRepository,
)

__all__ = [
    "DamageAssessmentRepository",
    "EquipmentRepository",
    "MemberRepository",
    "RentalRepository",
    "ReservationRepository",
]
