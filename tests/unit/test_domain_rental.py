"""Unit tests for the Rental entity.

Tests cover:
- Creation (PENDING vs ACTIVE from the period start)
- Overdue detection and late fee accrual
- State machine transitions (activate, mark_overdue, return, extend, cancel)
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import Rental
from src.domain.enums import EquipmentCondition, RentalStatus
from src.domain.value_objects import DateRange, Money, new_equipment_id, new_member_id
from tests.conftest import create_rental, utc

PERIOD = DateRange(utc(2026, 5, 1), utc(2026, 5, 4))


def _create(now):
    return Rental.create(
        equipment_id=new_equipment_id(),
        member_id=new_member_id(),
        period=PERIOD,
        base_cost=Money.of("75.00"),
        discount=Money.of("7.50"),
        condition_at_start=EquipmentCondition.EXCELLENT,
        now=now,
    )


@pytest.mark.unit
class TestRentalCreation:
    def test_started_period_creates_active_rental(self):
        rental = _create(now=utc(2026, 5, 1, 8))

        assert rental.status == RentalStatus.ACTIVE
        assert rental.total_cost == Money.of("67.50")
        assert rental.late_fee.is_zero()
        assert rental.damage_fee.is_zero()

    def test_future_period_creates_pending_rental(self):
        rental = _create(now=utc(2026, 4, 20))

        assert rental.status == RentalStatus.PENDING

    def test_discount_above_base_cost_rejected(self):
        with pytest.raises(ValueError):
            Rental.create(
                equipment_id=new_equipment_id(),
                member_id=new_member_id(),
                period=PERIOD,
                base_cost=Money.of("10.00"),
                discount=Money.of("20.00"),
                condition_at_start=EquipmentCondition.GOOD,
                now=utc(2026, 5, 1),
            )


@pytest.mark.unit
class TestRentalOverdue:
    def test_not_overdue_before_end(self):
        rental = create_rental(period=PERIOD)

        assert not rental.is_overdue(utc(2026, 5, 3))
        assert rental.days_overdue(utc(2026, 5, 3)) == 0

    def test_overdue_after_end(self):
        rental = create_rental(period=PERIOD)

        assert rental.is_overdue(utc(2026, 5, 5))
        assert rental.days_overdue(utc(2026, 5, 5, 6)) == 2

    def test_returned_rental_never_overdue(self):
        rental = create_rental(period=PERIOD, status=RentalStatus.RETURNED)

        assert not rental.is_overdue(utc(2026, 6, 1))

    def test_late_fee_applies_tier_discount(self):
        rental = create_rental(period=PERIOD)

        fee = rental.calculate_late_fee(
            utc(2026, 5, 7), Money.of("10.00"), Decimal("10")
        )

        assert fee == Money.of("27.00")

    def test_late_fee_zero_when_on_time(self):
        rental = create_rental(period=PERIOD)

        assert rental.calculate_late_fee(utc(2026, 5, 2), Money.of("10.00")).is_zero()


@pytest.mark.unit
class TestRentalActivate:
    def test_activate_pending_after_start(self):
        rental = create_rental(period=PERIOD, status=RentalStatus.PENDING)

        assert isinstance(rental.activate(utc(2026, 5, 1, 1)), Success)
        assert rental.status == RentalStatus.ACTIVE

    def test_activate_before_start_fails(self):
        rental = create_rental(period=PERIOD, status=RentalStatus.PENDING)

        result = rental.activate(utc(2026, 4, 30))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_STATE_TRANSITION
        assert rental.status == RentalStatus.PENDING

    def test_activate_active_fails(self):
        result = create_rental(period=PERIOD).activate(utc(2026, 5, 2))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_STATE_TRANSITION


@pytest.mark.unit
class TestRentalMarkOverdue:
    def test_mark_overdue_after_end(self):
        rental = create_rental(period=PERIOD)

        assert isinstance(rental.mark_overdue(utc(2026, 5, 5)), Success)
        assert rental.status == RentalStatus.OVERDUE

    def test_mark_overdue_before_end_fails(self):
        result = create_rental(period=PERIOD).mark_overdue(utc(2026, 5, 3))

        assert isinstance(result, Failure)

    def test_mark_overdue_twice_fails(self):
        rental = create_rental(period=PERIOD, status=RentalStatus.OVERDUE)

        assert isinstance(rental.mark_overdue(utc(2026, 5, 5)), Failure)


@pytest.mark.unit
class TestRentalReturn:
    def test_return_recomputes_total(self):
        rental = create_rental(period=PERIOD, base_cost="75.00", discount="7.50")

        result = rental.return_rental(
            condition=EquipmentCondition.GOOD,
            late_fee=Money.of("20.00"),
            damage_fee=Money.of("50.00"),
            now=utc(2026, 5, 6),
        )

        assert isinstance(result, Success)
        assert rental.status == RentalStatus.RETURNED
        assert rental.total_cost == Money.of("137.50")
        assert rental.condition_at_return == EquipmentCondition.GOOD
        assert rental.returned_at == utc(2026, 5, 6)

    def test_return_overdue_rental(self):
        rental = create_rental(period=PERIOD, status=RentalStatus.OVERDUE)

        result = rental.return_rental(
            condition=EquipmentCondition.EXCELLENT,
            late_fee=Money.of("10.00"),
            damage_fee=Money.zero(),
            now=utc(2026, 5, 5),
        )

        assert isinstance(result, Success)

    def test_second_return_fails(self):
        rental = create_rental(period=PERIOD, status=RentalStatus.RETURNED)

        result = rental.return_rental(
            condition=EquipmentCondition.GOOD,
            late_fee=Money.zero(),
            damage_fee=Money.zero(),
            now=utc(2026, 5, 4),
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RENTAL_ALREADY_RETURNED

    @pytest.mark.parametrize("status", [RentalStatus.PENDING, RentalStatus.CANCELLED])
    def test_return_from_non_open_state_fails(self, status):
        rental = create_rental(period=PERIOD, status=status)

        result = rental.return_rental(
            condition=EquipmentCondition.GOOD,
            late_fee=Money.zero(),
            damage_fee=Money.zero(),
            now=utc(2026, 5, 4),
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_STATE_TRANSITION


@pytest.mark.unit
class TestRentalExtend:
    def test_extend_active_rental(self):
        rental = create_rental(period=PERIOD, base_cost="75.00", discount="7.50")

        result = rental.extend(
            new_end=PERIOD.end + timedelta(days=2),
            additional_cost=Money.of("50.00"),
            additional_discount=Money.of("5.00"),
        )

        assert isinstance(result, Success)
        assert rental.period.end == utc(2026, 5, 6)
        assert rental.base_cost == Money.of("125.00")
        assert rental.discount == Money.of("12.50")
        assert rental.total_cost == Money.of("112.50")

    def test_extend_to_earlier_end_fails(self):
        rental = create_rental(period=PERIOD)

        result = rental.extend(
            new_end=PERIOD.end,
            additional_cost=Money.zero(),
            additional_discount=Money.zero(),
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_RENTAL_EXTENSION

    @pytest.mark.parametrize(
        "status", [RentalStatus.PENDING, RentalStatus.OVERDUE, RentalStatus.RETURNED]
    )
    def test_extend_non_active_fails(self, status):
        rental = create_rental(period=PERIOD, status=status)

        result = rental.extend(
            new_end=PERIOD.end + timedelta(days=1),
            additional_cost=Money.of("25.00"),
            additional_discount=Money.zero(),
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_RENTAL_EXTENSION


@pytest.mark.unit
class TestRentalCancel:
    @pytest.mark.parametrize("status", [RentalStatus.PENDING, RentalStatus.ACTIVE])
    def test_cancel_zeroes_total(self, status):
        rental = create_rental(period=PERIOD, status=status)

        result = rental.cancel(utc(2026, 5, 2))

        assert isinstance(result, Success)
        assert rental.status == RentalStatus.CANCELLED
        assert rental.total_cost.is_zero()
        assert rental.cancelled_at == utc(2026, 5, 2)

    @pytest.mark.parametrize(
        ("status", "code"),
        [
            (RentalStatus.RETURNED, ErrorCode.RENTAL_ALREADY_RETURNED),
            (RentalStatus.CANCELLED, ErrorCode.RENTAL_ALREADY_CANCELLED),
            (RentalStatus.OVERDUE, ErrorCode.RENTAL_OVERDUE),
        ],
    )
    def test_cancel_rejected(self, status, code):
        result = create_rental(period=PERIOD, status=status).cancel(utc(2026, 5, 2))

        assert isinstance(result, Failure)
        assert result.error.code == code
