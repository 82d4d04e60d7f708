"""DamageAssessment domain entity.

Records the condition change found when a rental is returned and the fee
charged for it. One assessment exists per rental return that detected
degradation.

Fee bands (by condition levels lost):
    0 → $0, 1 → $50, 2 → $150, 3 → $300, 4 or more → $500
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal

from src.domain.enums import EquipmentCondition
from src.domain.value_objects import (
    DamageAssessmentId,
    EquipmentId,
    Money,
    RentalId,
    new_damage_assessment_id,
)

DAMAGE_FEE_BANDS: tuple[Decimal, ...] = (
    Decimal("0"),
    Decimal("50"),
    Decimal("150"),
    Decimal("300"),
    Decimal("500"),
)


def calculate_damage_fee(
    before: EquipmentCondition,
    after: EquipmentCondition,
    currency: str = "USD",
) -> Money:
    """Damage fee for a condition change.

    Unchanged or improved condition costs nothing; otherwise the fee grows
    with the number of levels lost and is capped at the highest band.

    Example:
        >>> str(calculate_damage_fee(EquipmentCondition.FAIR, EquipmentCondition.DAMAGED))
        '$150.00'
    """
    levels = EquipmentCondition.degradation_levels(before, after)
    band = DAMAGE_FEE_BANDS[min(levels, len(DAMAGE_FEE_BANDS) - 1)]
    return Money(band, currency)


@dataclass
class DamageAssessment:
    """Damage found at rental return.

    Attributes:
        id: Unique assessment identifier.
        rental_id: Returned rental.
        equipment_id: Inspected equipment.
        condition_before: Condition when the rental started.
        condition_after: Condition at return.
        degradation_levels: Levels lost between the two.
        damage_fee: Fee charged for the damage.
        notes: Inspector notes.
        assessed_by: Inspector name.
        assessed_at: Inspection timestamp.
    """

    id: DamageAssessmentId
    rental_id: RentalId
    equipment_id: EquipmentId
    condition_before: EquipmentCondition
    condition_after: EquipmentCondition
    degradation_levels: int
    damage_fee: Money
    notes: str = ""
    assessed_by: str = "system"
    assessed_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.assessed_by or not self.assessed_by.strip():
            raise ValueError("Assessor name cannot be empty")

    @classmethod
    def create(
        cls,
        *,
        rental_id: RentalId,
        equipment_id: EquipmentId,
        condition_before: EquipmentCondition,
        condition_after: EquipmentCondition,
        notes: str = "",
        assessed_by: str = "system",
        assessed_at: datetime | None = None,
    ) -> "DamageAssessment":
        """Assess a return, deriving degradation and fee from the conditions."""
        return cls(
            id=new_damage_assessment_id(),
            rental_id=rental_id,
            equipment_id=equipment_id,
            condition_before=condition_before,
            condition_after=condition_after,
            degradation_levels=EquipmentCondition.degradation_levels(
                condition_before, condition_after
            ),
            damage_fee=calculate_damage_fee(condition_before, condition_after),
            notes=notes,
            assessed_by=assessed_by.strip() if assessed_by else assessed_by,
            assessed_at=assessed_at or datetime.now(UTC),
        )

    def has_condition_degraded(self) -> bool:
        return self.degradation_levels > 0

    def update_notes(self, notes: str) -> None:
        self.notes = notes
