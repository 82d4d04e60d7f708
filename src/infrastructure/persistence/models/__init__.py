"""Database models.

Importing this package registers every table on BaseModel.metadata
(used by Database.create_all and Alembic autogenerate).
"""

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel
from src.infrastructure.persistence.models.damage_assessment import DamageAssessment
from src.infrastructure.persistence.models.equipment import Equipment
from src.infrastructure.persistence.models.member import Member
from src.infrastructure.persistence.models.rental import Rental
from src.infrastructure.persistence.models.reservation import Reservation

__all__ = [
    "BaseModel",
    "BaseMutableModel",
    "DamageAssessment",
    "Equipment",
    "Member",
    "Rental",
    "Reservation",
]
