"""Equipment database model.

Architecture:
    - Daily rate stored as Numeric(19, 4) with separate currency column
    - Condition stored as lowercase enum value
    - current_rental_id is a plain UUID (no FK, avoids a rentals ↔ equipment cycle)
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Equipment(BaseMutableModel):
    """Equipment model for inventory storage.

    Indexes:
        - ix_equipment_category: category filter
        - ix_equipment_is_available: availability filter
    """

    __tablename__ = "equipment"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Free-text description",
    )

    category: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Category slug",
    )

    daily_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        comment="Price per billable day",
    )

    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default="USD",
        comment="ISO 4217 currency code",
    )

    condition: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="Condition (excellent, good, fair, poor, damaged, under_repair)",
    )

    is_available: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        index=True,
        comment="False while rented or withdrawn",
    )

    current_rental_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        nullable=True,
        comment="Rental currently holding the item",
    )

    purchase_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="When the item entered the inventory",
    )

    last_maintenance_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Last recorded maintenance",
    )
