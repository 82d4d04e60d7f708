"""RentalRepository protocol for rental persistence.

The conflict lookup is the persistence half of the availability rule: a
period is free for an equipment item when no open rental (PENDING, ACTIVE,
OVERDUE) overlaps it under closed-interval overlap.
"""

from datetime import datetime
from typing import Protocol

from src.domain.entities.rental import Rental
from src.domain.enums import RentalStatus
from src.domain.value_objects import DateRange, EquipmentId, MemberId, RentalId


class RentalRepository(Protocol):
    """Rental repository protocol (port).

    Methods:
        find_by_id: Retrieve rental by ID
        find_by_member: Retrieve a member's rentals
        find_by_equipment: Retrieve an equipment item's rentals
        find_by_status: Retrieve rentals in one status
        find_overdue: Retrieve ACTIVE/OVERDUE rentals past their end
        find_conflicting: Retrieve open rentals overlapping a period
        save: Create or update rental
    """

    async def find_by_id(self, rental_id: RentalId) -> Rental | None:
        ...

    async def find_by_member(
        self, member_id: MemberId, active_only: bool = False
    ) -> list[Rental]:
        """Find a member's rentals, newest first.

        Args:
            member_id: Renting member.
            active_only: If True, return only open rentals.
        """
        ...

    async def find_by_equipment(self, equipment_id: EquipmentId) -> list[Rental]:
        ...

    async def find_by_status(self, status: RentalStatus) -> list[Rental]:
        ...

    async def find_overdue(self, now: datetime) -> list[Rental]:
        """Find ACTIVE or OVERDUE rentals whose period ended before now."""
        ...

    async def find_conflicting(
        self,
        equipment_id: EquipmentId,
        period: DateRange,
        exclude_rental_id: RentalId | None = None,
    ) -> list[Rental]:
        """Find open rentals of the equipment overlapping period.

        Args:
            equipment_id: Equipment to check.
            period: Requested period (closed interval).
            exclude_rental_id: Rental to ignore (used when extending it).
        """
        ...

    async def save(self, rental: Rental) -> None:
        ...
