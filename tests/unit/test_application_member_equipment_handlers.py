"""Unit tests for member and equipment command handlers.

Tests cover:
- RegisterMemberHandler: registration, duplicate email, tier/email validation
- UpdateMemberTierHandler: tier change event, no-op on same tier
- CreateEquipmentHandler: creation, condition and rate validation
- UpdateEquipmentHandler: partial updates, maintenance, no-op updates
"""

from datetime import timedelta
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.application.commands.equipment_commands import CreateEquipment, UpdateEquipment
from src.application.commands.handlers.create_equipment_handler import (
    CreateEquipmentHandler,
)
from src.application.commands.handlers.register_member_handler import (
    RegisterMemberHandler,
)
from src.application.commands.handlers.update_equipment_handler import (
    UpdateEquipmentHandler,
)
from src.application.commands.handlers.update_member_tier_handler import (
    UpdateMemberTierHandler,
)
from src.application.commands.member_commands import RegisterMember, UpdateMemberTier
from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Success
from src.domain.enums import EquipmentCondition, MembershipTier
from src.domain.events import (
    EquipmentCreated,
    EquipmentUpdated,
    MemberRegistered,
    MemberTierChanged,
)
from src.domain.value_objects import Money, new_equipment_id
from tests.conftest import create_equipment, create_member, utc


@pytest.fixture
def member_repo():
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    return repo


@pytest.mark.unit
class TestRegisterMemberHandler:
    async def test_register_new_member(self, member_repo, mock_event_bus):
        handler = RegisterMemberHandler(member_repo, mock_event_bus)

        result = await handler.handle(
            RegisterMember(name="Grace Hopper", email="grace@Navy.MIL", tier="gold")
        )

        assert isinstance(result, Success)
        assert result.value.email == "grace@navy.mil"
        assert result.value.tier == "gold"
        assert result.value.discount_percentage == Decimal("10")
        assert result.value.max_concurrent_rentals == 5
        member_repo.save.assert_awaited_once()
        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, MemberRegistered)
        assert event.member_id == result.value.id

    async def test_tier_defaults_to_basic(self, member_repo, mock_event_bus):
        handler = RegisterMemberHandler(member_repo, mock_event_bus)

        result = await handler.handle(RegisterMember(name="Ada", email="ada@example.com"))

        assert result.value.tier == "basic"
        assert result.value.active_rental_count == 0

    async def test_duplicate_email_conflicts(self, member_repo, mock_event_bus):
        member_repo.find_by_email.return_value = create_member(email="ada@example.com")
        handler = RegisterMemberHandler(member_repo, mock_event_bus)

        result = await handler.handle(RegisterMember(name="Ada", email="ada@example.com"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        member_repo.save.assert_not_called()
        mock_event_bus.publish.assert_not_called()

    async def test_invalid_email(self, member_repo, mock_event_bus):
        handler = RegisterMemberHandler(member_repo, mock_event_bus)

        result = await handler.handle(RegisterMember(name="Ada", email="not-an-email"))

        assert result.error.code == ErrorCode.INVALID_EMAIL
        assert result.error.field == "email"

    async def test_unknown_tier(self, member_repo, mock_event_bus):
        handler = RegisterMemberHandler(member_repo, mock_event_bus)

        result = await handler.handle(
            RegisterMember(name="Ada", email="ada@example.com", tier="diamond")
        )

        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.field == "tier"

    async def test_blank_name(self, member_repo, mock_event_bus):
        handler = RegisterMemberHandler(member_repo, mock_event_bus)

        result = await handler.handle(RegisterMember(name="  ", email="ada@example.com"))

        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.field == "name"


@pytest.mark.unit
class TestUpdateMemberTierHandler:
    async def test_upgrade_publishes_tier_change(self, member_repo, mock_event_bus):
        member = create_member(tier=MembershipTier.BASIC)
        member_repo.find_by_id.return_value = member
        handler = UpdateMemberTierHandler(member_repo, mock_event_bus)

        result = await handler.handle(UpdateMemberTier(member_id=member.id, tier="platinum"))

        assert result.value.tier == "platinum"
        assert result.value.max_rental_days == 60
        member_repo.save.assert_awaited_once_with(member)
        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, MemberTierChanged)
        assert event.previous_tier == "basic"
        assert event.new_tier == "platinum"

    async def test_same_tier_is_noop(self, member_repo, mock_event_bus):
        member = create_member(tier=MembershipTier.SILVER)
        member_repo.find_by_id.return_value = member
        handler = UpdateMemberTierHandler(member_repo, mock_event_bus)

        result = await handler.handle(UpdateMemberTier(member_id=member.id, tier="silver"))

        assert isinstance(result, Success)
        member_repo.save.assert_not_called()
        mock_event_bus.publish.assert_not_called()

    async def test_unknown_member(self, member_repo, mock_event_bus):
        member_repo.find_by_id.return_value = None
        handler = UpdateMemberTierHandler(member_repo, mock_event_bus)

        result = await handler.handle(
            UpdateMemberTier(member_id=create_member().id, tier="gold")
        )

        assert result.error.code == ErrorCode.MEMBER_NOT_FOUND


def create_command(**overrides):
    fields = {
        "name": "  Concrete mixer ",
        "description": "Electric, 140 L",
        "category": "masonry",
        "daily_rate": Decimal("45.00"),
        "condition": "good",
        "purchase_date": utc(2025, 3, 1),
    }
    fields.update(overrides)
    return CreateEquipment(**fields)


@pytest.mark.unit
class TestCreateEquipmentHandler:
    async def test_create_equipment(self, mock_event_bus):
        equipment_repo = AsyncMock()
        handler = CreateEquipmentHandler(equipment_repo, mock_event_bus)

        result = await handler.handle(create_command())

        assert isinstance(result, Success)
        saved = equipment_repo.save.await_args.args[0]
        assert saved.id == result.value
        assert saved.name == "Concrete mixer"
        assert saved.daily_rate == Money.of("45.00")
        assert saved.is_available
        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, EquipmentCreated)
        assert event.category == "masonry"

    async def test_unrentable_condition_starts_unavailable(self, mock_event_bus):
        equipment_repo = AsyncMock()
        handler = CreateEquipmentHandler(equipment_repo, mock_event_bus)

        await handler.handle(create_command(condition="under_repair"))

        assert not equipment_repo.save.await_args.args[0].is_available

    async def test_invalid_condition(self, mock_event_bus):
        equipment_repo = AsyncMock()
        handler = CreateEquipmentHandler(equipment_repo, mock_event_bus)

        result = await handler.handle(create_command(condition="mint"))

        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.field == "condition"
        equipment_repo.save.assert_not_called()

    async def test_negative_rate(self, mock_event_bus):
        handler = CreateEquipmentHandler(AsyncMock(), mock_event_bus)

        result = await handler.handle(create_command(daily_rate=Decimal("-1.00")))

        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.field == "daily_rate"

    async def test_blank_name(self, mock_event_bus):
        handler = CreateEquipmentHandler(AsyncMock(), mock_event_bus)

        result = await handler.handle(create_command(name=" "))

        assert result.error.code == ErrorCode.VALIDATION_FAILED


@pytest.mark.unit
class TestUpdateEquipmentHandler:
    async def test_applies_only_given_fields(self, mock_event_bus):
        equipment = create_equipment(daily_rate="25.00")
        equipment_repo = AsyncMock()
        equipment_repo.find_by_id.return_value = equipment
        handler = UpdateEquipmentHandler(equipment_repo, mock_event_bus, 90)

        result = await handler.handle(
            UpdateEquipment(
                equipment_id=equipment.id,
                daily_rate=Decimal("30.00"),
                category="drills",
            )
        )

        assert result.value.daily_rate == Decimal("30.00")
        assert result.value.category == "drills"
        assert result.value.name == "Hammer drill"
        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, EquipmentUpdated)
        assert event.changed_fields == ("daily_rate", "category")

    async def test_damaging_available_item_makes_it_unavailable(self, mock_event_bus):
        equipment = create_equipment()
        equipment_repo = AsyncMock()
        equipment_repo.find_by_id.return_value = equipment
        handler = UpdateEquipmentHandler(equipment_repo, mock_event_bus, 90)

        result = await handler.handle(
            UpdateEquipment(equipment_id=equipment.id, condition="damaged")
        )

        assert result.value.condition == "damaged"
        assert result.value.is_available is False

    async def test_maintenance_resets_schedule(self, mock_event_bus):
        equipment = create_equipment(purchase_date=utc(2025, 1, 1))
        equipment_repo = AsyncMock()
        equipment_repo.find_by_id.return_value = equipment
        handler = UpdateEquipmentHandler(equipment_repo, mock_event_bus, 90)

        result = await handler.handle(
            UpdateEquipment(
                equipment_id=equipment.id, maintenance_performed_at=utc(2026, 5, 1)
            )
        )

        assert result.value.last_maintenance_date == utc(2026, 5, 1)
        assert result.value.next_maintenance_due == utc(2026, 5, 1) + timedelta(days=90)
        assert mock_event_bus.publish.await_args.args[0].changed_fields == (
            "last_maintenance_date",
        )

    async def test_unchanged_values_skip_save(self, mock_event_bus):
        equipment = create_equipment(daily_rate="25.00", condition=EquipmentCondition.GOOD)
        equipment_repo = AsyncMock()
        equipment_repo.find_by_id.return_value = equipment
        handler = UpdateEquipmentHandler(equipment_repo, mock_event_bus, 90)

        result = await handler.handle(
            UpdateEquipment(
                equipment_id=equipment.id, daily_rate=Decimal("25.00"), condition="good"
            )
        )

        assert isinstance(result, Success)
        equipment_repo.save.assert_not_called()
        mock_event_bus.publish.assert_not_called()

    async def test_unknown_equipment(self, mock_event_bus):
        equipment_repo = AsyncMock()
        equipment_repo.find_by_id.return_value = None
        handler = UpdateEquipmentHandler(equipment_repo, mock_event_bus, 90)

        result = await handler.handle(UpdateEquipment(equipment_id=new_equipment_id()))

        assert result.error.code == ErrorCode.EQUIPMENT_NOT_FOUND

    async def test_blank_name_rejected(self, mock_event_bus):
        equipment = create_equipment()
        equipment_repo = AsyncMock()
        equipment_repo.find_by_id.return_value = equipment
        handler = UpdateEquipmentHandler(equipment_repo, mock_event_bus, 90)

        result = await handler.handle(UpdateEquipment(equipment_id=equipment.id, name=" "))

        assert result.error.code == ErrorCode.VALIDATION_FAILED
        equipment_repo.save.assert_not_called()
