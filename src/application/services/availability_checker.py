"""Equipment availability service.

Centralizes the period availability rule shared by rental creation,
extension, reservation and the available-equipment query.

Rule:
    Equipment is free during a period when no open rental (pending, active,
    overdue) and no pending or confirmed reservation of that equipment
    overlaps the period. Overlap is closed-interval: touching boundaries
    conflict.

Usage:
    checker = AvailabilityChecker(rental_repo, reservation_repo)
    result = await checker.ensure_available(equipment_id, period)
"""

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import RentalError
from src.domain.protocols import RentalRepository, ReservationRepository
from src.domain.value_objects import DateRange, EquipmentId, RentalId, ReservationId


class AvailabilityChecker:
    """Service for checking equipment availability over a period.

    Dependencies (injected via constructor):
        - RentalRepository: For conflicting rental lookup
        - ReservationRepository: For conflicting reservation lookup
    """

    def __init__(
        self,
        rental_repo: RentalRepository,
        reservation_repo: ReservationRepository,
    ) -> None:
        self._rental_repo = rental_repo
        self._reservation_repo = reservation_repo

    async def is_available(
        self,
        equipment_id: EquipmentId,
        period: DateRange,
        *,
        exclude_rental_id: RentalId | None = None,
        exclude_reservation_id: ReservationId | None = None,
    ) -> bool:
        """Check that nothing holds the equipment during period.

        Args:
            equipment_id: Equipment to check.
            period: Requested period.
            exclude_rental_id: Rental to ignore (the one being extended).
            exclude_reservation_id: Reservation to ignore (the one being
                fulfilled).

        Returns:
            True when no rental or reservation conflicts.
        """
        rentals = await self._rental_repo.find_conflicting(
            equipment_id, period, exclude_rental_id=exclude_rental_id
        )
        if rentals:
            return False
        reservations = await self._reservation_repo.find_conflicting(
            equipment_id, period, exclude_reservation_id=exclude_reservation_id
        )
        return not reservations

    async def ensure_available(
        self,
        equipment_id: EquipmentId,
        period: DateRange,
        *,
        exclude_rental_id: RentalId | None = None,
        exclude_reservation_id: ReservationId | None = None,
    ) -> Result[None, RentalError]:
        """Same check as is_available, as a Result for command handlers.

        Returns:
            Success(None): Equipment free for the period.
            Failure(RentalError): EQUIPMENT_UNAVAILABLE_FOR_PERIOD.
        """
        if await self.is_available(
            equipment_id,
            period,
            exclude_rental_id=exclude_rental_id,
            exclude_reservation_id=exclude_reservation_id,
        ):
            return Success(value=None)
        return Failure(
            error=RentalError(
                code=ErrorCode.EQUIPMENT_UNAVAILABLE_FOR_PERIOD,
                message="Equipment is already booked for part of the requested period",
                details={
                    "equipment_id": str(equipment_id),
                    "start_date": period.start.isoformat(),
                    "end_date": period.end.isoformat(),
                },
            )
        )
