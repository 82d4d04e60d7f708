"""Reservation domain entity.

A future-dated hold on one equipment item for a member. PENDING and
CONFIRMED reservations block the equipment for their period; fulfilment
turns a confirmed reservation into an active rental.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import ReservationStatus
from src.domain.errors import ReservationError
from src.domain.value_objects import (
    DateRange,
    EquipmentId,
    MemberId,
    RentalId,
    ReservationId,
    ensure_utc,
    new_reservation_id,
)


@dataclass
class Reservation:
    """Equipment reservation.

    Attributes:
        id: Unique reservation identifier.
        equipment_id: Reserved equipment.
        member_id: Member holding the reservation.
        period: Reserved period (starts in the future when created).
        status: Lifecycle status.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
        confirmed_at: Confirmation timestamp.
        cancelled_at: Cancellation timestamp.
        fulfilled_at: Fulfilment timestamp.
        cancellation_reason: Reason given at cancellation.
        rental_id: Rental created on fulfilment.
    """

    id: ReservationId
    equipment_id: EquipmentId
    member_id: MemberId
    period: DateRange
    status: ReservationStatus = ReservationStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    confirmed_at: datetime | None = None
    cancelled_at: datetime | None = None
    fulfilled_at: datetime | None = None
    cancellation_reason: str | None = None
    rental_id: RentalId | None = None

    @classmethod
    def create(
        cls,
        *,
        equipment_id: EquipmentId,
        member_id: MemberId,
        period: DateRange,
        now: datetime,
    ) -> Result["Reservation", ReservationError]:
        """Place a PENDING reservation.

        Returns:
            Success(Reservation): New reservation.
            Failure(ReservationError): INVALID_RESERVATION_PERIOD when the
                period has already started.
        """
        if period.has_started(now):
            return Failure(
                error=ReservationError(
                    code=ErrorCode.INVALID_RESERVATION_PERIOD,
                    message="Reservation period must start in the future",
                    details={"start_date": period.start.isoformat()},
                )
            )
        now = ensure_utc(now)
        return Success(
            value=cls(
                id=new_reservation_id(),
                equipment_id=equipment_id,
                member_id=member_id,
                period=period,
                created_at=now,
                updated_at=now,
            )
        )

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def blocks(self, period: DateRange) -> bool:
        """Check if this reservation holds the equipment during period."""
        return self.status.blocks_equipment() and self.period.overlaps(period)

    def is_ready_to_fulfill(self, now: datetime) -> bool:
        return self.status == ReservationStatus.CONFIRMED and self.period.has_started(now)

    # -------------------------------------------------------------------------
    # State Transitions
    # -------------------------------------------------------------------------

    def confirm(self, now: datetime) -> Result[None, ReservationError]:
        if self.status != ReservationStatus.PENDING:
            return Failure(error=self._state_error("confirm"))
        if self.period.has_started(now):
            return Failure(
                error=ReservationError(
                    code=ErrorCode.INVALID_RESERVATION_STATE,
                    message="Cannot confirm a reservation whose period has started",
                    details={"reservation_id": str(self.id)},
                )
            )
        self.status = ReservationStatus.CONFIRMED
        self.confirmed_at = ensure_utc(now)
        self._touch(now)
        return Success(value=None)

    def cancel(self, reason: str | None, now: datetime) -> Result[None, ReservationError]:
        """Cancel a PENDING or CONFIRMED reservation that has not ended."""
        if self.status == ReservationStatus.CANCELLED:
            return Failure(
                error=ReservationError(
                    code=ErrorCode.RESERVATION_ALREADY_CANCELLED,
                    message="Reservation has already been cancelled",
                    details={"reservation_id": str(self.id)},
                )
            )
        if not self.status.blocks_equipment():
            return Failure(error=self._state_error("cancel"))
        if self.period.has_ended(now):
            return Failure(
                error=ReservationError(
                    code=ErrorCode.INVALID_RESERVATION_STATE,
                    message="Cannot cancel a reservation whose period has ended",
                    details={"reservation_id": str(self.id)},
                )
            )
        self.status = ReservationStatus.CANCELLED
        self.cancellation_reason = reason
        self.cancelled_at = ensure_utc(now)
        self._touch(now)
        return Success(value=None)

    def fulfill(self, rental_id: RentalId, now: datetime) -> Result[None, ReservationError]:
        """Mark a started CONFIRMED reservation as turned into a rental."""
        if self.status != ReservationStatus.CONFIRMED:
            return Failure(error=self._state_error("fulfill"))
        if not self.period.has_started(now):
            return Failure(
                error=ReservationError(
                    code=ErrorCode.INVALID_RESERVATION_STATE,
                    message="Reservation period has not started yet",
                    details={
                        "reservation_id": str(self.id),
                        "start_date": self.period.start.isoformat(),
                    },
                )
            )
        self.status = ReservationStatus.FULFILLED
        self.rental_id = rental_id
        self.fulfilled_at = ensure_utc(now)
        self._touch(now)
        return Success(value=None)

    def expire(self, now: datetime) -> Result[None, ReservationError]:
        """Expire a blocking reservation whose period ended unfulfilled."""
        if not self.status.blocks_equipment():
            return Failure(error=self._state_error("expire"))
        if not self.period.has_ended(now):
            return Failure(
                error=ReservationError(
                    code=ErrorCode.INVALID_RESERVATION_STATE,
                    message="Reservation period has not ended yet",
                    details={"reservation_id": str(self.id)},
                )
            )
        self.status = ReservationStatus.EXPIRED
        self._touch(now)
        return Success(value=None)

    def _state_error(self, action: str) -> ReservationError:
        return ReservationError(
            code=ErrorCode.INVALID_RESERVATION_STATE,
            message=f"Cannot {action} a reservation in status {self.status.value}",
            details={"reservation_id": str(self.id), "status": self.status.value},
        )

    def _touch(self, now: datetime) -> None:
        self.updated_at = ensure_utc(now)
