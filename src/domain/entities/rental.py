"""Rental domain entity.

A loan of one equipment item to one member for a bounded period. The rental
owns its state machine and cost breakdown.

State machine:
    PENDING ──activate──▶ ACTIVE ──return──▶ RETURNED
       │                    │
       │                    ├──mark_overdue──▶ OVERDUE ──return──▶ RETURNED
       │                    │
       └──────cancel────────┴──cancel──▶ CANCELLED

OVERDUE is only entered through batch processing (mark_overdue). Whether a
rental is late right now is answered by is_overdue(now), which never mutates.

Cost breakdown:
    total_cost = base_cost - discount + late_fee + damage_fee
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import EquipmentCondition, RentalStatus
from src.domain.errors import RentalError
from src.domain.value_objects import (
    DateRange,
    EquipmentId,
    MemberId,
    Money,
    RentalId,
    ensure_utc,
    new_rental_id,
)


@dataclass
class Rental:
    """Equipment rental.

    Attributes:
        id: Unique rental identifier.
        equipment_id: Rented equipment.
        member_id: Renting member.
        period: Agreed rental period.
        status: Lifecycle status.
        base_cost: Daily rate times billable days (before discount).
        discount: Tier discount granted on base and extension costs.
        late_fee: Late fee charged at return.
        damage_fee: Damage fee charged at return.
        total_cost: Amount owed (zero once cancelled).
        condition_at_start: Equipment condition when handed over.
        condition_at_return: Equipment condition when returned.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
        returned_at: Return timestamp.
        cancelled_at: Cancellation timestamp.
    """

    id: RentalId
    equipment_id: EquipmentId
    member_id: MemberId
    period: DateRange
    status: RentalStatus
    base_cost: Money
    discount: Money
    total_cost: Money
    condition_at_start: EquipmentCondition
    late_fee: Money = field(default_factory=Money.zero)
    damage_fee: Money = field(default_factory=Money.zero)
    condition_at_return: EquipmentCondition | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    returned_at: datetime | None = None
    cancelled_at: datetime | None = None

    @classmethod
    def create(
        cls,
        *,
        equipment_id: EquipmentId,
        member_id: MemberId,
        period: DateRange,
        base_cost: Money,
        discount: Money,
        condition_at_start: EquipmentCondition,
        now: datetime,
    ) -> "Rental":
        """Open a rental.

        The rental starts ACTIVE when its period has already begun and
        PENDING when the period lies in the future.

        Raises:
            ValueError: If the discount exceeds the base cost.
        """
        status = RentalStatus.ACTIVE if period.has_started(now) else RentalStatus.PENDING
        return cls(
            id=new_rental_id(),
            equipment_id=equipment_id,
            member_id=member_id,
            period=period,
            status=status,
            base_cost=base_cost,
            discount=discount,
            total_cost=base_cost - discount,
            condition_at_start=condition_at_start,
            created_at=ensure_utc(now),
            updated_at=ensure_utc(now),
        )

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_open(self) -> bool:
        return self.status.is_open()

    def is_overdue(self, now: datetime) -> bool:
        """Check if the rental is past its end without being returned."""
        return (
            self.status in (RentalStatus.ACTIVE, RentalStatus.OVERDUE)
            and self.period.has_ended(now)
        )

    def days_overdue(self, now: datetime) -> int:
        if not self.is_overdue(now):
            return 0
        return self.period.days_overdue(now)

    def calculate_late_fee(
        self,
        now: datetime,
        daily_late_fee: Money,
        discount_percentage: Decimal = Decimal("0"),
    ) -> Money:
        """Late fee accrued as of now.

        Args:
            now: Reference instant.
            daily_late_fee: Fee per overdue day before discount.
            discount_percentage: Member tier discount.

        Returns:
            Money: days overdue × daily fee, with the discount applied.
        """
        days = self.days_overdue(now)
        if days == 0:
            return Money.zero(daily_late_fee.currency)
        return (daily_late_fee * days).apply_percentage_discount(discount_percentage)

    # -------------------------------------------------------------------------
    # State Transitions
    # -------------------------------------------------------------------------

    def activate(self, now: datetime) -> Result[None, RentalError]:
        """Start a PENDING rental once its period has begun."""
        if self.status != RentalStatus.PENDING:
            return Failure(error=self._transition_error("activate"))
        if not self.period.has_started(now):
            return Failure(
                error=RentalError(
                    code=ErrorCode.INVALID_STATE_TRANSITION,
                    message="Rental period has not started yet",
                    details={
                        "rental_id": str(self.id),
                        "start_date": self.period.start.isoformat(),
                    },
                )
            )
        self.status = RentalStatus.ACTIVE
        self._touch(now)
        return Success(value=None)

    def mark_overdue(self, now: datetime) -> Result[None, RentalError]:
        """Flag an ACTIVE rental whose period has ended as OVERDUE."""
        if self.status != RentalStatus.ACTIVE:
            return Failure(error=self._transition_error("mark overdue"))
        if not self.period.has_ended(now):
            return Failure(
                error=RentalError(
                    code=ErrorCode.INVALID_STATE_TRANSITION,
                    message="Rental period has not ended yet",
                    details={"rental_id": str(self.id)},
                )
            )
        self.status = RentalStatus.OVERDUE
        self._touch(now)
        return Success(value=None)

    def return_rental(
        self,
        *,
        condition: EquipmentCondition,
        late_fee: Money,
        damage_fee: Money,
        now: datetime,
    ) -> Result[None, RentalError]:
        """Close the rental and settle fees.

        Returns:
            Success(None): Rental RETURNED, total recomputed.
            Failure(RentalError): RENTAL_ALREADY_RETURNED for a second
                return, INVALID_STATE_TRANSITION for PENDING or CANCELLED.
        """
        if self.status == RentalStatus.RETURNED:
            return Failure(
                error=RentalError(
                    code=ErrorCode.RENTAL_ALREADY_RETURNED,
                    message="Rental has already been returned",
                    details={"rental_id": str(self.id)},
                )
            )
        if self.status not in (RentalStatus.ACTIVE, RentalStatus.OVERDUE):
            return Failure(error=self._transition_error("return"))

        self.condition_at_return = condition
        self.late_fee = late_fee
        self.damage_fee = damage_fee
        self.total_cost = self.base_cost - self.discount + late_fee + damage_fee
        self.status = RentalStatus.RETURNED
        self.returned_at = ensure_utc(now)
        self._touch(now)
        return Success(value=None)

    def extend(
        self,
        *,
        new_end: datetime,
        additional_cost: Money,
        additional_discount: Money,
        now: datetime | None = None,
    ) -> Result[None, RentalError]:
        """Push the end of an ACTIVE rental later and add its cost."""
        if self.status != RentalStatus.ACTIVE:
            return Failure(
                error=RentalError(
                    code=ErrorCode.INVALID_RENTAL_EXTENSION,
                    message=f"Only active rentals can be extended (status: {self.status.value})",
                    details={"rental_id": str(self.id), "status": self.status.value},
                )
            )
        if ensure_utc(new_end) <= self.period.end:
            return Failure(
                error=RentalError(
                    code=ErrorCode.INVALID_RENTAL_EXTENSION,
                    message="New end date must be after the current end date",
                    details={
                        "rental_id": str(self.id),
                        "current_end_date": self.period.end.isoformat(),
                    },
                )
            )

        self.period = self.period.extend_to(new_end)
        self.base_cost = self.base_cost + additional_cost
        self.discount = self.discount + additional_discount
        self.total_cost = self.base_cost - self.discount + self.late_fee + self.damage_fee
        self._touch(now or datetime.now(UTC))
        return Success(value=None)

    def cancel(self, now: datetime) -> Result[None, RentalError]:
        """Cancel a PENDING or ACTIVE rental; nothing is owed afterwards."""
        match self.status:
            case RentalStatus.RETURNED:
                return Failure(
                    error=RentalError(
                        code=ErrorCode.RENTAL_ALREADY_RETURNED,
                        message="Returned rentals cannot be cancelled",
                        details={"rental_id": str(self.id)},
                    )
                )
            case RentalStatus.CANCELLED:
                return Failure(
                    error=RentalError(
                        code=ErrorCode.RENTAL_ALREADY_CANCELLED,
                        message="Rental has already been cancelled",
                        details={"rental_id": str(self.id)},
                    )
                )
            case RentalStatus.OVERDUE:
                return Failure(
                    error=RentalError(
                        code=ErrorCode.RENTAL_OVERDUE,
                        message="Overdue rentals must be returned, not cancelled",
                        details={"rental_id": str(self.id)},
                    )
                )

        self.status = RentalStatus.CANCELLED
        self.total_cost = Money.zero(self.total_cost.currency)
        self.cancelled_at = ensure_utc(now)
        self._touch(now)
        return Success(value=None)

    def _transition_error(self, action: str) -> RentalError:
        return RentalError(
            code=ErrorCode.INVALID_STATE_TRANSITION,
            message=f"Cannot {action} a rental in status {self.status.value}",
            details={"rental_id": str(self.id), "status": self.status.value},
        )

    def _touch(self, now: datetime) -> None:
        self.updated_at = ensure_utc(now)
