"""Equipment domain entity.

A rentable item in the inventory. Equipment tracks its own condition,
whether it is currently out on a rental and when it was last maintained.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Construction errors raise ValueError (programming errors)
    - Business rule violations return Failure(EquipmentError)
    - NO domain events (emitted by command handlers after persistence)

Usage:
    from src.domain.entities import Equipment
    from src.domain.enums import EquipmentCondition
    from src.domain.value_objects import Money

    drill = Equipment.create(
        name="Hammer drill",
        description="18V cordless",
        category="power-tools",
        daily_rate=Money.of("25.00"),
        condition=EquipmentCondition.EXCELLENT,
        purchase_date=datetime(2025, 3, 1, tzinfo=UTC),
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import EquipmentCondition
from src.domain.errors import EquipmentError
from src.domain.value_objects import (
    EquipmentId,
    Money,
    RentalId,
    ensure_utc,
    new_equipment_id,
)

DEFAULT_MAINTENANCE_INTERVAL_DAYS = 90


@dataclass
class Equipment:
    """Rentable equipment item.

    Attributes:
        id: Unique equipment identifier.
        name: Display name.
        description: Free-text description.
        category: Category slug used for filtering.
        daily_rate: Price per billable day (never negative).
        condition: Current physical condition.
        purchase_date: When the item entered the inventory.
        is_available: False while rented or withdrawn.
        current_rental_id: Rental currently holding the item, if any.
        last_maintenance_date: Last recorded maintenance, if any.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: EquipmentId
    name: str
    description: str
    category: str
    daily_rate: Money
    condition: EquipmentCondition
    purchase_date: datetime
    is_available: bool = True
    current_rental_id: RentalId | None = None
    last_maintenance_date: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate equipment after initialization.

        Raises:
            ValueError: If name or category is empty.
        """
        if not self.name or not self.name.strip():
            raise ValueError("Equipment name cannot be empty")
        if not self.category or not self.category.strip():
            raise ValueError("Equipment category cannot be empty")
        self.purchase_date = ensure_utc(self.purchase_date)
        if self.last_maintenance_date is not None:
            self.last_maintenance_date = ensure_utc(self.last_maintenance_date)

    @classmethod
    def create(
        cls,
        *,
        name: str,
        description: str,
        category: str,
        daily_rate: Money,
        condition: EquipmentCondition,
        purchase_date: datetime,
    ) -> "Equipment":
        """Create new equipment, available only if its condition is rentable."""
        return cls(
            id=new_equipment_id(),
            name=name.strip(),
            description=description,
            category=category.strip(),
            daily_rate=daily_rate,
            condition=condition,
            purchase_date=purchase_date,
            is_available=condition.is_rentable(),
        )

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_rentable(self) -> bool:
        """Check if the item can go out on a new rental right now."""
        return self.is_available and self.condition.is_rentable()

    def is_rented(self) -> bool:
        return self.current_rental_id is not None

    def next_maintenance_due(
        self, interval_days: int = DEFAULT_MAINTENANCE_INTERVAL_DAYS
    ) -> datetime:
        """Date the next scheduled maintenance is due."""
        baseline = self.last_maintenance_date or self.purchase_date
        return baseline + timedelta(days=interval_days)

    def needs_maintenance(
        self,
        now: datetime,
        interval_days: int = DEFAULT_MAINTENANCE_INTERVAL_DAYS,
    ) -> bool:
        """Check if the item is due for maintenance or needs repair.

        Args:
            now: Reference instant.
            interval_days: Days between scheduled maintenance.

        Returns:
            True if more than interval_days have passed since the last
            maintenance (or purchase, if never maintained), or if the
            condition requires repair.
        """
        if self.condition.needs_repair():
            return True
        return ensure_utc(now) > self.next_maintenance_due(interval_days)

    def calculate_rental_cost(self, days: int) -> Money:
        """Base cost for renting the item for a number of days.

        Raises:
            ValueError: If days is not positive.
        """
        if days <= 0:
            raise ValueError("Rental days must be positive")
        return self.daily_rate * days

    # -------------------------------------------------------------------------
    # State Changes
    # -------------------------------------------------------------------------

    def mark_as_rented(self, rental_id: RentalId) -> Result[None, EquipmentError]:
        """Hand the item over to a rental.

        Returns:
            Success(None): Item now held by the rental.
            Failure(EquipmentError): Not available or condition unacceptable.
        """
        if not self.is_available:
            return Failure(
                error=EquipmentError(
                    code=ErrorCode.EQUIPMENT_NOT_AVAILABLE,
                    message=f"Equipment '{self.name}' is not available",
                    details={"equipment_id": str(self.id)},
                )
            )
        if not self.condition.is_rentable():
            return Failure(
                error=EquipmentError(
                    code=ErrorCode.EQUIPMENT_CONDITION_UNACCEPTABLE,
                    message=(
                        f"Equipment '{self.name}' is in {self.condition.value} "
                        "condition and cannot be rented"
                    ),
                    details={
                        "equipment_id": str(self.id),
                        "condition": self.condition.value,
                    },
                )
            )

        self.is_available = False
        self.current_rental_id = rental_id
        self._touch()
        return Success(value=None)

    def mark_as_returned(
        self, condition: EquipmentCondition
    ) -> Result[None, EquipmentError]:
        """Take the item back from its rental in the given condition."""
        if self.current_rental_id is None:
            return Failure(
                error=EquipmentError(
                    code=ErrorCode.EQUIPMENT_NOT_RENTED,
                    message=f"Equipment '{self.name}' is not currently rented",
                    details={"equipment_id": str(self.id)},
                )
            )

        self.condition = condition
        self.current_rental_id = None
        self.is_available = condition.is_rentable()
        self._touch()
        return Success(value=None)

    def release(self) -> None:
        """Free the item after its rental was cancelled (condition unchanged)."""
        self.current_rental_id = None
        self.is_available = self.condition.is_rentable()
        self._touch()

    def update_condition(self, condition: EquipmentCondition) -> None:
        self.condition = condition
        if not self.is_rented():
            self.is_available = condition.is_rentable()
        self._touch()

    def update_details(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        category: str | None = None,
    ) -> None:
        """Update descriptive fields (None leaves a field unchanged).

        Raises:
            ValueError: If name or category would become empty.
        """
        if name is not None:
            if not name.strip():
                raise ValueError("Equipment name cannot be empty")
            self.name = name.strip()
        if description is not None:
            self.description = description
        if category is not None:
            if not category.strip():
                raise ValueError("Equipment category cannot be empty")
            self.category = category.strip()
        self._touch()

    def update_daily_rate(self, daily_rate: Money) -> None:
        self.daily_rate = daily_rate
        self._touch()

    def record_maintenance(self, at: datetime) -> None:
        """Record completed maintenance.

        Restores availability when the item is in rentable condition and not
        out on a rental.
        """
        self.last_maintenance_date = ensure_utc(at)
        if not self.is_rented() and self.condition.is_rentable():
            self.is_available = True
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
