"""Equipment condition enumeration.

Conditions are totally ordered from best to worst. Degradation between two
conditions is the number of steps moved towards the worse end of the scale.
"""

from enum import Enum


class EquipmentCondition(str, Enum):
    """Physical condition of a piece of equipment.

    **Ordering** (best to worst):
        EXCELLENT < GOOD < FAIR < POOR < DAMAGED < UNDER_REPAIR

    **Rentable**: EXCELLENT, GOOD, FAIR
    **Needs repair**: DAMAGED, UNDER_REPAIR
    """

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    DAMAGED = "damaged"
    UNDER_REPAIR = "under_repair"

    @property
    def rank(self) -> int:
        """Position on the condition scale (0 = EXCELLENT)."""
        return _CONDITION_ORDER.index(self)

    def is_rentable(self) -> bool:
        """Check if equipment in this condition may be rented out."""
        return self in (
            EquipmentCondition.EXCELLENT,
            EquipmentCondition.GOOD,
            EquipmentCondition.FAIR,
        )

    def needs_repair(self) -> bool:
        """Check if equipment in this condition must be repaired."""
        return self in (EquipmentCondition.DAMAGED, EquipmentCondition.UNDER_REPAIR)

    @staticmethod
    def degradation_levels(
        before: "EquipmentCondition",
        after: "EquipmentCondition",
    ) -> int:
        """Count condition steps lost between two inspections.

        Args:
            before: Condition when the rental started.
            after: Condition at return.

        Returns:
            int: Number of levels degraded, never negative. Improvements
                count as zero.

        Example:
            >>> EquipmentCondition.degradation_levels(
            ...     EquipmentCondition.GOOD, EquipmentCondition.DAMAGED
            ... )
            3
        """
        return max(0, after.rank - before.rank)


_CONDITION_ORDER: tuple[EquipmentCondition, ...] = (
    EquipmentCondition.EXCELLENT,
    EquipmentCondition.GOOD,
    EquipmentCondition.FAIR,
    EquipmentCondition.POOR,
    EquipmentCondition.DAMAGED,
    EquipmentCondition.UNDER_REPAIR,
)
