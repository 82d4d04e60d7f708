"""DamageAssessment database model.

Write-once record (no updated_at), one per returned rental with damage.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class DamageAssessment(BaseModel):
    """Damage assessment model."""

    __tablename__ = "damage_assessments"

    rental_id: Mapped[UUID] = mapped_column(
        ForeignKey("rentals.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
        comment="FK to rentals table (one assessment per rental)",
    )

    equipment_id: Mapped[UUID] = mapped_column(
        ForeignKey("equipment.id", ondelete="RESTRICT"),
        nullable=False,
        comment="FK to equipment table",
    )

    condition_before: Mapped[str] = mapped_column(String(20), nullable=False)
    condition_after: Mapped[str] = mapped_column(String(20), nullable=False)

    degradation_levels: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Condition levels lost",
    )

    damage_fee: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        comment="Fee charged for the damage",
    )

    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default="USD",
    )

    notes: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Inspector notes",
    )

    assessed_by: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Inspector name",
    )

    assessed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Inspection timestamp",
    )
