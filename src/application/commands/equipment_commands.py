"""Equipment commands (CQRS write operations).

Commands represent intent to change the inventory. All commands are
immutable (frozen=True) and use keyword-only arguments (kw_only=True).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateEquipment:
    """Add an item to the inventory.

    Attributes:
        name: Display name.
        description: Free-text description.
        category: Category slug.
        daily_rate: Price per billable day.
        condition: Condition value (e.g. "excellent").
        purchase_date: When the item was acquired.
        currency: ISO 4217 code for daily_rate.

    Example:
        >>> command = CreateEquipment(
        ...     name="Hammer drill",
        ...     description="18V cordless",
        ...     category="power-tools",
        ...     daily_rate=Decimal("25.00"),
        ...     condition="excellent",
        ...     purchase_date=datetime(2025, 3, 1, tzinfo=UTC),
        ... )
        >>> result = await handler.handle(command)
    """

    name: str
    description: str
    category: str
    daily_rate: Decimal
    condition: str
    purchase_date: datetime
    currency: str = "USD"


@dataclass(frozen=True, kw_only=True)
class UpdateEquipment:
    """Change descriptive fields, rate or condition, or record maintenance.

    Every field except equipment_id is optional; None leaves it unchanged.
    """

    equipment_id: UUID
    name: str | None = None
    description: str | None = None
    category: str | None = None
    daily_rate: Decimal | None = None
    condition: str | None = None
    maintenance_performed_at: datetime | None = None
