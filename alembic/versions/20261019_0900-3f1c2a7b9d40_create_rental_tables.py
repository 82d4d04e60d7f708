"""create_rental_tables

Revision ID: 3f1c2a7b9d40
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a7b9d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(mutable: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]
    if mutable:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.func.now(),
                nullable=False,
            )
        )
    return columns


def _money(name: str, comment: str, default: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.Numeric(precision=19, scale=4),
        nullable=False,
        server_default=sa.text("0") if default else None,
        comment=comment,
    )


def upgrade() -> None:
    """Create equipment, members, rentals, reservations and damage_assessments."""
    op.create_table(
        "equipment",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column("name", sa.String(length=255), nullable=False, comment="Display name"),
        sa.Column("description", sa.Text(), nullable=False, comment="Free-text description"),
        sa.Column("category", sa.String(length=100), nullable=False, comment="Category slug"),
        _money("daily_rate", "Price per billable day"),
        sa.Column("currency", sa.String(length=3), nullable=False, comment="ISO 4217 currency code"),
        sa.Column(
            "condition",
            sa.String(length=20),
            nullable=False,
            comment="Condition (excellent, good, fair, poor, damaged, under_repair)",
        ),
        sa.Column(
            "is_available",
            sa.Boolean(),
            nullable=False,
            comment="False while rented or withdrawn",
        ),
        sa.Column(
            "current_rental_id",
            sa.Uuid(),
            nullable=True,
            comment="Rental currently holding the item",
        ),
        sa.Column(
            "purchase_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When the item entered the inventory",
        ),
        sa.Column(
            "last_maintenance_date",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Last recorded maintenance",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_equipment_category", "equipment", ["category"])
    op.create_index("ix_equipment_is_available", "equipment", ["is_available"])

    op.create_table(
        "members",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column("name", sa.String(length=255), nullable=False, comment="Full name"),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Normalized email address",
        ),
        sa.Column(
            "tier",
            sa.String(length=20),
            nullable=False,
            comment="Membership tier (basic, silver, gold, platinum)",
        ),
        sa.Column(
            "join_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Registration date",
        ),
        sa.Column(
            "active_rental_count",
            sa.Integer(),
            nullable=False,
            comment="Rentals currently open",
        ),
        sa.Column("total_rentals", sa.Integer(), nullable=False, comment="Rentals ever started"),
        sa.Column(
            "is_active",
            sa.Boolean(),
            nullable=False,
            comment="Inactive members cannot rent or reserve",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_members_email", "members", ["email"], unique=True)

    op.create_table(
        "rentals",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column("equipment_id", sa.Uuid(), nullable=False, comment="FK to equipment table"),
        sa.Column("member_id", sa.Uuid(), nullable=False, comment="FK to members table"),
        sa.Column(
            "start_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Rental period start",
        ),
        sa.Column(
            "end_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Rental period end",
        ),
        sa.Column("status", sa.String(length=20), nullable=False, comment="Lifecycle status"),
        _money("base_cost", "Daily rate times billable days"),
        _money("discount", "Tier discount granted", default=True),
        _money("late_fee", "Late fee charged at return", default=True),
        _money("damage_fee", "Damage fee charged at return", default=True),
        _money("total_cost", "Amount owed"),
        sa.Column("currency", sa.String(length=3), nullable=False, comment="ISO 4217 currency code"),
        sa.Column(
            "condition_at_start",
            sa.String(length=20),
            nullable=False,
            comment="Equipment condition when handed over",
        ),
        sa.Column(
            "condition_at_return",
            sa.String(length=20),
            nullable=True,
            comment="Equipment condition when returned",
        ),
        sa.Column(
            "returned_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Return timestamp",
        ),
        sa.Column(
            "cancelled_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Cancellation timestamp",
        ),
        sa.ForeignKeyConstraint(["equipment_id"], ["equipment.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_rentals_member_id", "rentals", ["member_id"])
    op.create_index("ix_rentals_equipment_status", "rentals", ["equipment_id", "status"])
    op.create_index("ix_rentals_status_end_date", "rentals", ["status", "end_date"])

    op.create_table(
        "reservations",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column("equipment_id", sa.Uuid(), nullable=False, comment="FK to equipment table"),
        sa.Column("member_id", sa.Uuid(), nullable=False, comment="FK to members table"),
        sa.Column(
            "start_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Reserved period start",
        ),
        sa.Column(
            "end_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Reserved period end",
        ),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="pending, confirmed, cancelled, fulfilled, expired",
        ),
        sa.Column("confirmed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("cancelled_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("fulfilled_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "cancellation_reason",
            sa.Text(),
            nullable=True,
            comment="Reason given at cancellation",
        ),
        sa.Column(
            "rental_id",
            sa.Uuid(),
            nullable=True,
            comment="Rental created on fulfilment",
        ),
        sa.ForeignKeyConstraint(["equipment_id"], ["equipment.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_reservations_member_id", "reservations", ["member_id"])
    op.create_index(
        "ix_reservations_equipment_status",
        "reservations",
        ["equipment_id", "status"],
    )

    op.create_table(
        "damage_assessments",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(mutable=False),
        sa.Column(
            "rental_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to rentals table (one assessment per rental)",
        ),
        sa.Column("equipment_id", sa.Uuid(), nullable=False, comment="FK to equipment table"),
        sa.Column("condition_before", sa.String(length=20), nullable=False),
        sa.Column("condition_after", sa.String(length=20), nullable=False),
        sa.Column(
            "degradation_levels",
            sa.Integer(),
            nullable=False,
            comment="Condition levels lost",
        ),
        _money("damage_fee", "Fee charged for the damage"),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("notes", sa.Text(), nullable=False, comment="Inspector notes"),
        sa.Column("assessed_by", sa.String(length=255), nullable=False, comment="Inspector name"),
        sa.Column(
            "assessed_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Inspection timestamp",
        ),
        sa.ForeignKeyConstraint(["rental_id"], ["rentals.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["equipment_id"], ["equipment.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_damage_assessments_rental_id",
        "damage_assessments",
        ["rental_id"],
        unique=True,
    )


def downgrade() -> None:
    """Drop all rental tables."""
    op.drop_index("ix_damage_assessments_rental_id", table_name="damage_assessments")
    op.drop_table("damage_assessments")
    op.drop_index("ix_reservations_equipment_status", table_name="reservations")
    op.drop_index("ix_reservations_member_id", table_name="reservations")
    op.drop_table("reservations")
    op.drop_index("ix_rentals_status_end_date", table_name="rentals")
    op.drop_index("ix_rentals_equipment_status", table_name="rentals")
    op.drop_index("ix_rentals_member_id", table_name="rentals")
    op.drop_table("rentals")
    op.drop_index("ix_members_email", table_name="members")
    op.drop_table("members")
    op.drop_index("ix_equipment_is_available", table_name="equipment")
    op.drop_index("ix_equipment_category", table_name="equipment")
    op.drop_table("equipment")
