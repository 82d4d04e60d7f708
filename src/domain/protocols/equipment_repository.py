"""EquipmentRepository protocol for equipment persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from datetime import datetime
from typing import Protocol

from src.domain.entities.equipment import Equipment
from src.domain.value_objects import EquipmentId


class EquipmentRepository(Protocol):
    """Equipment repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve equipment by ID
        find_all: Retrieve the whole inventory
        find_by_category: Retrieve equipment in a category
        find_available: Retrieve equipment flagged available
        find_needing_maintenance: Retrieve equipment due for maintenance
        save: Create or update equipment
        delete: Remove equipment
        exists: Check equipment exists
        count: Count inventory items
    """

    async def find_by_id(self, equipment_id: EquipmentId) -> Equipment | None:
        """Find equipment by ID.

        Returns:
            Equipment if found, None otherwise.
        """
        ...

    async def find_all(self) -> list[Equipment]:
        """Return every equipment item ordered by name."""
        ...

    async def find_by_category(self, category: str) -> list[Equipment]:
        ...

    async def find_available(self, category: str | None = None) -> list[Equipment]:
        """Find equipment with is_available set, optionally in one category."""
        ...

    async def find_needing_maintenance(
        self, now: datetime, interval_days: int
    ) -> list[Equipment]:
        """Find equipment past its maintenance interval or needing repair.

        Args:
            now: Reference instant.
            interval_days: Days between scheduled maintenance.
        """
        ...

    async def save(self, equipment: Equipment) -> None:
        """Create or update equipment (upsert)."""
        ...

    async def delete(self, equipment_id: EquipmentId) -> None:
        ...

    async def exists(self, equipment_id: EquipmentId) -> bool:
        ...

    async def count(self) -> int:
        ...
