"""Unit tests for query handlers.

Tests cover:
- Equipment lookups, listing filters and period availability search
- Maintenance schedule ordering and days_until_due
- Rental, overdue and damage assessment lookups
- Member and member-rental lookups
- Reservation lookups
"""

from datetime import timedelta
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.application.queries.equipment_queries import (
    GetAvailableEquipment,
    GetEquipment,
    GetEquipmentMaintenanceSchedule,
    ListEquipment,
)
from src.application.queries.handlers.get_available_equipment_handler import (
    GetAvailableEquipmentHandler,
)
from src.application.queries.handlers.get_damage_assessment_handler import (
    GetDamageAssessmentHandler,
)
from src.application.queries.handlers.get_equipment_handler import GetEquipmentHandler
from src.application.queries.handlers.get_maintenance_schedule_handler import (
    GetMaintenanceScheduleHandler,
)
from src.application.queries.handlers.get_overdue_rentals_handler import (
    GetOverdueRentalsHandler,
)
from src.application.queries.handlers.get_rental_handler import GetRentalHandler
from src.application.queries.handlers.get_reservation_handler import (
    GetReservationHandler,
)
from src.application.queries.handlers.list_equipment_handler import ListEquipmentHandler
from src.application.queries.handlers.member_query_handlers import (
    GetMemberHandler,
    GetMemberRentalsHandler,
)
from src.application.queries.member_queries import GetMember, GetMemberRentals
from src.application.queries.rental_queries import (
    GetDamageAssessment,
    GetOverdueRentals,
    GetRental,
)
from src.application.queries.reservation_queries import GetReservation
from src.application.services import AvailabilityChecker
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import DamageAssessment
from src.domain.enums import EquipmentCondition, MembershipTier
from src.domain.value_objects import (
    DateRange,
    new_equipment_id,
    new_member_id,
    new_rental_id,
    new_reservation_id,
)
from tests.conftest import (
    create_equipment,
    create_member,
    create_rental,
    create_reservation,
    period_from_now,
    utc,
)


@pytest.mark.unit
class TestEquipmentQueries:
    async def test_get_equipment(self):
        equipment = create_equipment(purchase_date=utc(2026, 1, 1))
        repo = AsyncMock()
        repo.find_by_id.return_value = equipment
        handler = GetEquipmentHandler(repo, 90)

        result = await handler.handle(GetEquipment(equipment_id=equipment.id))

        assert result.value.id == equipment.id
        assert result.value.daily_rate == Decimal("25.00")
        assert result.value.next_maintenance_due == utc(2026, 4, 1)

    async def test_get_unknown_equipment(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetEquipmentHandler(repo, 90).handle(
            GetEquipment(equipment_id=new_equipment_id())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EQUIPMENT_NOT_FOUND

    async def test_list_available_in_category(self):
        repo = AsyncMock()
        repo.find_available.return_value = [create_equipment()]
        handler = ListEquipmentHandler(repo, 90)

        result = await handler.handle(ListEquipment(category="power-tools", available_only=True))

        assert len(result.value) == 1
        repo.find_available.assert_awaited_once_with("power-tools")
        repo.find_by_category.assert_not_called()

    async def test_list_by_category(self):
        repo = AsyncMock()
        repo.find_by_category.return_value = []
        handler = ListEquipmentHandler(repo, 90)

        result = await handler.handle(ListEquipment(category="ladders"))

        assert result.value == []
        repo.find_by_category.assert_awaited_once_with("ladders")

    async def test_list_all(self):
        repo = AsyncMock()
        repo.find_all.return_value = [create_equipment(), create_equipment(name="Sander")]

        result = await ListEquipmentHandler(repo, 90).handle(ListEquipment())

        assert [item.name for item in result.value] == ["Hammer drill", "Sander"]


@pytest.mark.unit
class TestGetAvailableEquipment:
    @pytest.fixture
    def rental_repo(self):
        repo = AsyncMock()
        repo.find_conflicting.return_value = []
        return repo

    @pytest.fixture
    def reservation_repo(self):
        repo = AsyncMock()
        repo.find_conflicting.return_value = []
        return repo

    async def test_without_period_uses_availability_flag(self, rental_repo, reservation_repo):
        equipment_repo = AsyncMock()
        equipment_repo.find_available.return_value = [create_equipment()]
        handler = GetAvailableEquipmentHandler(
            equipment_repo, AvailabilityChecker(rental_repo, reservation_repo), 90
        )

        result = await handler.handle(GetAvailableEquipment())

        assert len(result.value) == 1
        equipment_repo.find_available.assert_awaited_once_with(None)
        rental_repo.find_conflicting.assert_not_called()

    async def test_period_search_excludes_booked_and_unrentable(
        self, rental_repo, reservation_repo
    ):
        free = create_equipment(name="Free")
        booked = create_equipment(name="Booked")
        broken = create_equipment(name="Broken", condition=EquipmentCondition.DAMAGED)
        equipment_repo = AsyncMock()
        equipment_repo.find_all.return_value = [free, booked, broken]

        async def conflicts(equipment_id, period, exclude_rental_id=None):
            return [create_rental(equipment=booked)] if equipment_id == booked.id else []

        rental_repo.find_conflicting.side_effect = conflicts
        handler = GetAvailableEquipmentHandler(
            equipment_repo, AvailabilityChecker(rental_repo, reservation_repo), 90
        )
        period = period_from_now(3, 2)

        result = await handler.handle(
            GetAvailableEquipment(start_date=period.start, end_date=period.end)
        )

        assert [item.name for item in result.value] == ["Free"]

    async def test_period_search_excludes_items_out_on_rental(
        self, rental_repo, reservation_repo
    ):
        free = create_equipment(name="Free")
        out = create_equipment(name="Out", is_available=False)
        equipment_repo = AsyncMock()
        equipment_repo.find_all.return_value = [free, out]
        handler = GetAvailableEquipmentHandler(
            equipment_repo, AvailabilityChecker(rental_repo, reservation_repo), 90
        )
        period = period_from_now(30, 2)

        result = await handler.handle(
            GetAvailableEquipment(start_date=period.start, end_date=period.end)
        )

        assert [item.name for item in result.value] == ["Free"]

    async def test_period_search_within_category(self, rental_repo, reservation_repo):
        equipment_repo = AsyncMock()
        equipment_repo.find_by_category.return_value = []
        handler = GetAvailableEquipmentHandler(
            equipment_repo, AvailabilityChecker(rental_repo, reservation_repo), 90
        )
        period = period_from_now(3, 2)

        await handler.handle(
            GetAvailableEquipment(category="ladders", start_date=period.start, end_date=period.end)
        )

        equipment_repo.find_by_category.assert_awaited_once_with("ladders")

    async def test_half_open_period_rejected(self, rental_repo, reservation_repo):
        handler = GetAvailableEquipmentHandler(
            AsyncMock(), AvailabilityChecker(rental_repo, reservation_repo), 90
        )

        result = await handler.handle(GetAvailableEquipment(start_date=utc(2026, 6, 1)))

        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.field == "end_date"

    async def test_inverted_period_rejected(self, rental_repo, reservation_repo):
        handler = GetAvailableEquipmentHandler(
            AsyncMock(), AvailabilityChecker(rental_repo, reservation_repo), 90
        )

        result = await handler.handle(
            GetAvailableEquipment(start_date=utc(2026, 6, 5), end_date=utc(2026, 6, 1))
        )

        assert result.error.code == ErrorCode.INVALID_DATE_RANGE


@pytest.mark.unit
class TestGetMaintenanceSchedule:
    async def test_schedule_sorted_soonest_first(self):
        recent = create_equipment(name="Recent", purchase_date=utc(2026, 4, 1))
        old = create_equipment(name="Old", purchase_date=utc(2026, 1, 1))
        repo = AsyncMock()
        repo.find_all.return_value = [recent, old]
        handler = GetMaintenanceScheduleHandler(repo, 90)

        result = await handler.handle(GetEquipmentMaintenanceSchedule(as_of=utc(2026, 4, 10)))

        assert [item.name for item in result.value] == ["Old", "Recent"]
        old_item = result.value[0]
        assert old_item.next_maintenance_due == utc(2026, 4, 1)
        assert old_item.days_until_due == -9
        assert old_item.needs_maintenance is True
        assert result.value[1].days_until_due == 81
        assert result.value[1].needs_maintenance is False

    async def test_needs_maintenance_only_queries_repository(self):
        repo = AsyncMock()
        repo.find_needing_maintenance.return_value = []
        handler = GetMaintenanceScheduleHandler(repo, 30)
        as_of = utc(2026, 4, 10)

        await handler.handle(
            GetEquipmentMaintenanceSchedule(as_of=as_of, needs_maintenance_only=True)
        )

        repo.find_needing_maintenance.assert_awaited_once_with(as_of, 30)
        repo.find_all.assert_not_called()


@pytest.mark.unit
class TestRentalQueries:
    async def test_get_rental_reports_live_overdue(self):
        rental = create_rental(period=period_from_now(-3.5, 2))
        repo = AsyncMock()
        repo.find_by_id.return_value = rental

        result = await GetRentalHandler(repo).handle(GetRental(rental_id=rental.id))

        assert result.value.status == "active"
        assert result.value.is_overdue is True
        assert result.value.days_overdue == 2

    async def test_get_unknown_rental(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetRentalHandler(repo).handle(GetRental(rental_id=new_rental_id()))

        assert result.error.code == ErrorCode.RENTAL_NOT_FOUND

    async def test_overdue_rentals_with_accrued_fee(self, daily_late_fee):
        member = create_member(tier=MembershipTier.GOLD)
        rental = create_rental(member=member, period=DateRange(utc(2026, 5, 1), utc(2026, 5, 4)))
        rental_repo = AsyncMock()
        rental_repo.find_overdue.return_value = [rental]
        member_repo = AsyncMock()
        member_repo.find_by_id.return_value = member
        handler = GetOverdueRentalsHandler(rental_repo, member_repo, daily_late_fee)

        result = await handler.handle(GetOverdueRentals(as_of=utc(2026, 5, 7)))

        item = result.value[0]
        assert item.rental_id == rental.id
        assert item.days_overdue == 3
        assert item.accrued_late_fee == Decimal("27.00")
        assert item.end_date == utc(2026, 5, 4)

    async def test_damage_assessment_lookup(self):
        rental = create_rental()
        assessment = DamageAssessment.create(
            rental_id=rental.id,
            equipment_id=rental.equipment_id,
            condition_before=EquipmentCondition.EXCELLENT,
            condition_after=EquipmentCondition.FAIR,
        )
        rental_repo = AsyncMock()
        rental_repo.find_by_id.return_value = rental
        assessment_repo = AsyncMock()
        assessment_repo.find_by_rental.return_value = assessment

        result = await GetDamageAssessmentHandler(rental_repo, assessment_repo).handle(
            GetDamageAssessment(rental_id=rental.id)
        )

        assert result.value.id == assessment.id
        assert result.value.degradation_levels == 2
        assert result.value.damage_fee == Decimal("150.00")

    async def test_damage_assessment_missing(self):
        rental_repo = AsyncMock()
        rental_repo.find_by_id.return_value = create_rental()
        assessment_repo = AsyncMock()
        assessment_repo.find_by_rental.return_value = None

        result = await GetDamageAssessmentHandler(rental_repo, assessment_repo).handle(
            GetDamageAssessment(rental_id=new_rental_id())
        )

        assert result.error.code == ErrorCode.DAMAGE_ASSESSMENT_NOT_FOUND

    async def test_damage_assessment_for_unknown_rental(self):
        rental_repo = AsyncMock()
        rental_repo.find_by_id.return_value = None
        assessment_repo = AsyncMock()

        result = await GetDamageAssessmentHandler(rental_repo, assessment_repo).handle(
            GetDamageAssessment(rental_id=new_rental_id())
        )

        assert result.error.code == ErrorCode.RENTAL_NOT_FOUND
        assessment_repo.find_by_rental.assert_not_called()


@pytest.mark.unit
class TestMemberQueries:
    async def test_get_member(self):
        member = create_member(tier=MembershipTier.SILVER)
        repo = AsyncMock()
        repo.find_by_id.return_value = member

        result = await GetMemberHandler(repo).handle(GetMember(member_id=member.id))

        assert result.value.tier == "silver"
        assert result.value.max_rental_days == 14

    async def test_get_unknown_member(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetMemberHandler(repo).handle(GetMember(member_id=new_member_id()))

        assert result.error.code == ErrorCode.MEMBER_NOT_FOUND

    async def test_member_rentals(self):
        member = create_member()
        member_repo = AsyncMock()
        member_repo.exists.return_value = True
        rental_repo = AsyncMock()
        rental_repo.find_by_member.return_value = [create_rental(member=member)]

        result = await GetMemberRentalsHandler(member_repo, rental_repo).handle(
            GetMemberRentals(member_id=member.id, active_only=True)
        )

        assert len(result.value) == 1
        rental_repo.find_by_member.assert_awaited_once_with(member.id, active_only=True)

    async def test_member_rentals_unknown_member(self):
        member_repo = AsyncMock()
        member_repo.exists.return_value = False
        rental_repo = AsyncMock()

        result = await GetMemberRentalsHandler(member_repo, rental_repo).handle(
            GetMemberRentals(member_id=new_member_id())
        )

        assert result.error.code == ErrorCode.MEMBER_NOT_FOUND
        rental_repo.find_by_member.assert_not_called()


@pytest.mark.unit
class TestReservationQueries:
    async def test_get_reservation(self):
        reservation = create_reservation()
        repo = AsyncMock()
        repo.find_by_id.return_value = reservation

        result = await GetReservationHandler(repo).handle(
            GetReservation(reservation_id=reservation.id)
        )

        assert isinstance(result, Success)
        assert result.value.status == "pending"
        assert result.value.end_date - result.value.start_date == timedelta(days=3)

    async def test_get_unknown_reservation(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetReservationHandler(repo).handle(
            GetReservation(reservation_id=new_reservation_id())
        )

        assert result.error.code == ErrorCode.RESERVATION_NOT_FOUND
