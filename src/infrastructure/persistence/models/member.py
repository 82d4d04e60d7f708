"""Member database model."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Member(BaseMutableModel):
    """Member model.

    Indexes:
        - ix_members_email: unique email lookup
    """

    __tablename__ = "members"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Full name",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Normalized email address",
    )

    tier: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="basic",
        comment="Membership tier (basic, silver, gold, platinum)",
    )

    join_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Registration date",
    )

    active_rental_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Rentals currently open",
    )

    total_rentals: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Rentals ever started",
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Inactive members cannot rent or reserve",
    )
