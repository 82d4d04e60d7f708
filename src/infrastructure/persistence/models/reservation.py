"""Reservation database model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Reservation(BaseMutableModel):
    """Reservation model.

    Indexes:
        - ix_reservations_equipment_status: conflict lookup
        - ix_reservations_member_id: member history
    """

    __tablename__ = "reservations"
    __table_args__ = (
        Index("ix_reservations_equipment_status", "equipment_id", "status"),
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
        comment="Reserved period start",
    )

    end_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Reserved period end",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="pending, confirmed, cancelled, fulfilled, expired",
    )

    confirmed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    cancelled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    fulfilled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    cancellation_reason: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Reason given at cancellation",
    )

    rental_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        nullable=True,
        comment="Rental created on fulfilment",
    )
