"""Equipment queries (CQRS read operations).

Queries represent requests for data. They are immutable dataclasses and
never change state.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetEquipment:
    equipment_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListEquipment:
    """List the inventory.

    Attributes:
        category: Optional category filter.
        available_only: Only items flagged available and rentable.
    """

    category: str | None = None
    available_only: bool = False


@dataclass(frozen=True, kw_only=True)
class GetAvailableEquipment:
    """Equipment free to rent.

    Without a period, returns items currently flagged available. With a
    period (both dates), returns rentable items with no conflicting rental
    or reservation during it.
    """

    category: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class GetEquipmentMaintenanceSchedule:
    as_of: datetime | None = None
    needs_maintenance_only: bool = False
