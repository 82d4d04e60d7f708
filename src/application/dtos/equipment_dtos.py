"""Equipment handler results.

Money value objects are flattened into amount + currency fields so the
presentation layer never handles domain types.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Self
from uuid import UUID

from src.domain.entities import Equipment


@dataclass
class EquipmentResult:
    """Single equipment item DTO.

    Attributes:
        id: Equipment identifier.
        name: Display name.
        description: Free-text description.
        category: Category slug.
        daily_rate: Price per billable day.
        currency: ISO 4217 code of daily_rate.
        condition: Condition value (e.g. "good").
        purchase_date: When the item entered the inventory.
        is_available: Availability flag.
        current_rental_id: Rental holding the item, if any.
        last_maintenance_date: Last recorded maintenance.
        next_maintenance_due: Next scheduled maintenance date.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    name: str
    description: str
    category: str
    daily_rate: Decimal
    currency: str
    condition: str
    purchase_date: datetime
    is_available: bool
    current_rental_id: UUID | None
    last_maintenance_date: datetime | None
    next_maintenance_due: datetime
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, equipment: Equipment, maintenance_interval_days: int) -> Self:
        return cls(
            id=equipment.id,
            name=equipment.name,
            description=equipment.description,
            category=equipment.category,
            daily_rate=equipment.daily_rate.amount,
            currency=equipment.daily_rate.currency,
            condition=equipment.condition.value,
            purchase_date=equipment.purchase_date,
            is_available=equipment.is_available,
            current_rental_id=equipment.current_rental_id,
            last_maintenance_date=equipment.last_maintenance_date,
            next_maintenance_due=equipment.next_maintenance_due(maintenance_interval_days),
            created_at=equipment.created_at,
            updated_at=equipment.updated_at,
        )


@dataclass
class MaintenanceScheduleItem:
    """One row of the maintenance schedule.

    Attributes:
        equipment_id: Equipment identifier.
        name: Display name.
        category: Category slug.
        condition: Condition value.
        last_maintenance_date: Last recorded maintenance.
        next_maintenance_due: Next scheduled maintenance date.
        days_until_due: Days until next_maintenance_due (negative when late).
        needs_maintenance: Due now or condition requires repair.
    """

    equipment_id: UUID
    name: str
    category: str
    condition: str
    last_maintenance_date: datetime | None
    next_maintenance_due: datetime
    days_until_due: int
    needs_maintenance: bool
