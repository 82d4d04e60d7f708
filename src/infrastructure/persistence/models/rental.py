"""Rental database model.

Architecture:
    - Period stored as start_date/end_date columns (closed interval)
    - Cost breakdown stored as Numeric(19, 4) columns sharing one currency
    - Composite index on (equipment_id, status) backs the conflict lookup
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Rental(BaseMutableModel):
    """Rental model.

    Fields:
        equipment_id: FK to equipment table
        member_id: FK to members table
        start_date / end_date: rental period
        status: pending, active, overdue, returned, cancelled
        base_cost, discount, late_fee, damage_fee, total_cost: cost breakdown
        currency: ISO 4217 code for every amount
        condition_at_start / condition_at_return: equipment condition values
        returned_at / cancelled_at: terminal timestamps
    """

    __tablename__ = "rentals"
    __table_args__ = (
        Index("ix_rentals_equipment_status", "equipment_id", "status"),
        Index("ix_rentals_status_end_date", "status", "end_date"),
    )

    equipment_id: Mapped[UUID] = mapped_column(
        ForeignKey("equipment.id", ondelete="RESTRICT"),
        nullable=False,
        comment="FK to equipment table",
    )

    member_id: Mapped[UUID] = mapped_column(
        ForeignKey("members.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        comment="FK to members table",
    )

    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Rental period start",
    )

    end_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Rental period end",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="Lifecycle status",
    )

    base_cost: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        comment="Daily rate times billable days",
    )

    discount: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        default=Decimal("0"),
        comment="Tier discount granted",
    )

    late_fee: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        default=Decimal("0"),
        comment="Late fee charged at return",
    )

    damage_fee: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        default=Decimal("0"),
        comment="Damage fee charged at return",
    )

    total_cost: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        comment="Amount owed",
    )

    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default="USD",
        comment="ISO 4217 currency code",
    )

    condition_at_start: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="Equipment condition when handed over",
    )

    condition_at_return: Mapped[str | None] = mapped_column(
        String(20),
        nullable=True,
        comment="Equipment condition when returned",
    )

    returned_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Return timestamp",
    )

    cancelled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Cancellation timestamp",
    )
