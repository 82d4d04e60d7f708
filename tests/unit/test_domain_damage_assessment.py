"""Unit tests for damage fees and the DamageAssessment entity."""

from itertools import product

import pytest

from src.domain.entities import DamageAssessment, calculate_damage_fee
from src.domain.enums import EquipmentCondition
from src.domain.value_objects import Money, new_equipment_id, new_rental_id
from tests.conftest import utc

EXPECTED_BAND_BY_LEVELS = {1: "50", 2: "150", 3: "300", 4: "500"}


@pytest.mark.unit
class TestCalculateDamageFee:
    @pytest.mark.parametrize(
        ("before", "after", "fee"),
        [
            (EquipmentCondition.GOOD, EquipmentCondition.GOOD, "0"),
            (EquipmentCondition.GOOD, EquipmentCondition.EXCELLENT, "0"),
            (EquipmentCondition.EXCELLENT, EquipmentCondition.GOOD, "50"),
            (EquipmentCondition.FAIR, EquipmentCondition.DAMAGED, "150"),
            (EquipmentCondition.GOOD, EquipmentCondition.DAMAGED, "300"),
            (EquipmentCondition.EXCELLENT, EquipmentCondition.DAMAGED, "500"),
            (EquipmentCondition.EXCELLENT, EquipmentCondition.UNDER_REPAIR, "500"),
        ],
    )
    def test_fee_bands(self, before, after, fee):
        assert calculate_damage_fee(before, after) == Money.of(fee)

    @pytest.mark.parametrize(("before", "after"), list(product(EquipmentCondition, repeat=2)))
    def test_every_condition_pair(self, before, after):
        levels = after.rank - before.rank
        expected = "0" if levels <= 0 else EXPECTED_BAND_BY_LEVELS.get(levels, "500")

        assert calculate_damage_fee(before, after) == Money.of(expected)

    def test_fee_uses_given_currency(self):
        fee = calculate_damage_fee(
            EquipmentCondition.EXCELLENT, EquipmentCondition.GOOD, "EUR"
        )

        assert fee.currency == "EUR"


@pytest.mark.unit
class TestDamageAssessment:
    def test_create_derives_levels_and_fee(self):
        assessment = DamageAssessment.create(
            rental_id=new_rental_id(),
            equipment_id=new_equipment_id(),
            condition_before=EquipmentCondition.GOOD,
            condition_after=EquipmentCondition.DAMAGED,
            notes="Cracked housing",
            assessed_by=" Grace ",
            assessed_at=utc(2026, 5, 4),
        )

        assert assessment.degradation_levels == 3
        assert assessment.damage_fee == Money.of("300.00")
        assert assessment.assessed_by == "Grace"
        assert assessment.has_condition_degraded()

    def test_blank_assessor_rejected(self):
        with pytest.raises(ValueError):
            DamageAssessment.create(
                rental_id=new_rental_id(),
                equipment_id=new_equipment_id(),
                condition_before=EquipmentCondition.GOOD,
                condition_after=EquipmentCondition.FAIR,
                assessed_by="   ",
            )

    def test_update_notes(self):
        assessment = DamageAssessment.create(
            rental_id=new_rental_id(),
            equipment_id=new_equipment_id(),
            condition_before=EquipmentCondition.GOOD,
            condition_after=EquipmentCondition.FAIR,
        )

        assessment.update_notes("Scratched")

        assert assessment.notes == "Scratched"
