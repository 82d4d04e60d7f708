"""Unit tests for domain enums.

Tests cover:
- EquipmentCondition ordering, rentability and degradation levels
- MembershipTier benefits table
- Rental and reservation status groupings
"""

from decimal import Decimal

import pytest

from src.domain.enums import (
    EquipmentCondition,
    MembershipTier,
    RentalStatus,
    ReservationStatus,
)


@pytest.mark.unit
class TestEquipmentCondition:
    def test_ranks_follow_best_to_worst_order(self):
        ranks = [condition.rank for condition in EquipmentCondition]

        assert ranks == [0, 1, 2, 3, 4, 5]

    @pytest.mark.parametrize(
        "condition",
        [EquipmentCondition.EXCELLENT, EquipmentCondition.GOOD, EquipmentCondition.FAIR],
    )
    def test_rentable_conditions(self, condition):
        assert condition.is_rentable()
        assert not condition.needs_repair()

    def test_poor_is_neither_rentable_nor_in_repair(self):
        assert not EquipmentCondition.POOR.is_rentable()
        assert not EquipmentCondition.POOR.needs_repair()

    @pytest.mark.parametrize(
        "condition", [EquipmentCondition.DAMAGED, EquipmentCondition.UNDER_REPAIR]
    )
    def test_repair_conditions(self, condition):
        assert condition.needs_repair()
        assert not condition.is_rentable()

    @pytest.mark.parametrize(
        ("before", "after", "expected"),
        [
            (EquipmentCondition.EXCELLENT, EquipmentCondition.EXCELLENT, 0),
            (EquipmentCondition.EXCELLENT, EquipmentCondition.GOOD, 1),
            (EquipmentCondition.GOOD, EquipmentCondition.DAMAGED, 3),
            (EquipmentCondition.EXCELLENT, EquipmentCondition.UNDER_REPAIR, 5),
            (EquipmentCondition.FAIR, EquipmentCondition.EXCELLENT, 0),
        ],
    )
    def test_degradation_levels(self, before, after, expected):
        assert EquipmentCondition.degradation_levels(before, after) == expected

    def test_values_round_trip_from_strings(self):
        assert EquipmentCondition("under_repair") is EquipmentCondition.UNDER_REPAIR


@pytest.mark.unit
class TestMembershipTier:
    @pytest.mark.parametrize(
        ("tier", "discount", "concurrent", "max_days", "early"),
        [
            (MembershipTier.BASIC, Decimal("0"), 2, 7, False),
            (MembershipTier.SILVER, Decimal("5"), 3, 14, False),
            (MembershipTier.GOLD, Decimal("10"), 5, 30, True),
            (MembershipTier.PLATINUM, Decimal("15"), 10, 60, True),
        ],
    )
    def test_benefits(self, tier, discount, concurrent, max_days, early):
        assert tier.discount_percentage == discount
        assert tier.max_concurrent_rentals == concurrent
        assert tier.max_rental_days == max_days
        assert tier.allows_early_reservations() is early


@pytest.mark.unit
class TestStatusGroupings:
    def test_open_rental_statuses(self):
        open_statuses = {s for s in RentalStatus if s.is_open()}

        assert open_statuses == {
            RentalStatus.PENDING,
            RentalStatus.ACTIVE,
            RentalStatus.OVERDUE,
        }

    def test_terminal_rental_statuses(self):
        assert RentalStatus.RETURNED.is_terminal()
        assert RentalStatus.CANCELLED.is_terminal()
        assert not RentalStatus.OVERDUE.is_terminal()

    def test_blocking_reservation_statuses(self):
        blocking = {s for s in ReservationStatus if s.blocks_equipment()}

        assert blocking == {ReservationStatus.PENDING, ReservationStatus.CONFIRMED}
