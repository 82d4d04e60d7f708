"""ReservationRepository protocol for reservation persistence."""

from datetime import datetime
from typing import Protocol

from src.domain.entities.reservation import Reservation
from src.domain.value_objects import DateRange, EquipmentId, MemberId, ReservationId


class ReservationRepository(Protocol):
    """Reservation repository protocol (port).

    Methods:
        find_by_id: Retrieve reservation by ID
        find_by_member: Retrieve a member's reservations
        find_by_equipment: Retrieve an equipment item's reservations
        find_conflicting: Retrieve blocking reservations overlapping a period
        find_expirable: Retrieve blocking reservations whose period ended
        save: Create or update reservation
    """

    async def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        ...

    async def find_by_member(self, member_id: MemberId) -> list[Reservation]:
        ...

    async def find_by_equipment(self, equipment_id: EquipmentId) -> list[Reservation]:
        ...

    async def find_conflicting(
        self,
        equipment_id: EquipmentId,
        period: DateRange,
        exclude_reservation_id: ReservationId | None = None,
    ) -> list[Reservation]:
        """Find PENDING/CONFIRMED reservations of the equipment overlapping period."""
        ...

    async def find_expirable(self, now: datetime) -> list[Reservation]:
        """Find PENDING/CONFIRMED reservations whose period ended before now."""
        ...

    async def save(self, reservation: Reservation) -> None:
        ...
