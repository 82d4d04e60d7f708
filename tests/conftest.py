"""Pytest configuration and shared test helpers.

This configuration ensures:
1. Settings load in the testing environment against in-memory SQLite
2. Async tests are marked automatically
3. Integration tests get a fresh database per test
4. Domain entities can be built with one call and sensible defaults
"""

import os

# Must run before anything imports src.core.config (settings load at import)
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import asyncio  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from decimal import Decimal  # noqa: E402
from unittest.mock import AsyncMock, Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.domain.entities import Equipment, Member, Rental, Reservation  # noqa: E402
from src.domain.enums import (  # noqa: E402
    EquipmentCondition,
    MembershipTier,
    RentalStatus,
    ReservationStatus,
)
from src.domain.value_objects import (  # noqa: E402
    DateRange,
    Money,
    new_equipment_id,
    new_member_id,
    new_rental_id,
    new_reservation_id,
)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real (in-memory SQLite) database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Entity Helpers
# =============================================================================


def utc(year: int, month: int, day: int, hour: int = 0) -> datetime:
    """Shorthand for a UTC datetime."""
    return datetime(year, month, day, hour, tzinfo=UTC)


def period_from_now(start_in_days: float, days: float) -> DateRange:
    """Period starting start_in_days from now (negative = in the past)."""
    start = datetime.now(UTC) + timedelta(days=start_in_days)
    return DateRange(start, start + timedelta(days=days))


def create_equipment(
    name: str = "Hammer drill",
    category: str = "power-tools",
    daily_rate: str = "25.00",
    condition: EquipmentCondition = EquipmentCondition.EXCELLENT,
    purchase_date: datetime | None = None,
    **overrides,
) -> Equipment:
    """Helper to create Equipment for testing.

    Usage:
        drill = create_equipment()
        broken = create_equipment(condition=EquipmentCondition.DAMAGED)
    """
    fields = {
        "id": new_equipment_id(),
        "name": name,
        "description": "Test equipment",
        "category": category,
        "daily_rate": Money.of(daily_rate),
        "condition": condition,
        "purchase_date": purchase_date or datetime.now(UTC) - timedelta(days=30),
        "is_available": condition.is_rentable(),
    }
    fields.update(overrides)
    return Equipment(**fields)


def create_member(
    name: str = "Ada Lovelace",
    email: str | None = None,
    tier: MembershipTier = MembershipTier.BASIC,
    **overrides,
) -> Member:
    """Helper to create a Member for testing (unique email by default)."""
    member_id = overrides.pop("id", new_member_id())
    fields = {
        "id": member_id,
        "name": name,
        "email": email or f"member-{member_id.hex[:12]}@example.com",
        "tier": tier,
    }
    fields.update(overrides)
    return Member(**fields)


def create_rental(
    equipment: Equipment | None = None,
    member: Member | None = None,
    period: DateRange | None = None,
    status: RentalStatus = RentalStatus.ACTIVE,
    base_cost: str = "75.00",
    discount: str = "0.00",
    condition_at_start: EquipmentCondition = EquipmentCondition.EXCELLENT,
    **overrides,
) -> Rental:
    """Helper to create a Rental in any status for testing.

    Default: ACTIVE rental that started a day ago and ends in two days.
    """
    base = Money.of(base_cost)
    off = Money.of(discount)
    fields = {
        "id": new_rental_id(),
        "equipment_id": equipment.id if equipment else new_equipment_id(),
        "member_id": member.id if member else new_member_id(),
        "period": period or period_from_now(-1, 3),
        "status": status,
        "base_cost": base,
        "discount": off,
        "total_cost": base - off,
        "condition_at_start": condition_at_start,
    }
    fields.update(overrides)
    return Rental(**fields)


def create_reservation(
    equipment: Equipment | None = None,
    member: Member | None = None,
    period: DateRange | None = None,
    status: ReservationStatus = ReservationStatus.PENDING,
    **overrides,
) -> Reservation:
    """Helper to create a Reservation in any status for testing.

    Default: PENDING reservation starting in five days for three days.
    """
    fields = {
        "id": new_reservation_id(),
        "equipment_id": equipment.id if equipment else new_equipment_id(),
        "member_id": member.id if member else new_member_id(),
        "period": period or period_from_now(5, 3),
        "status": status,
    }
    fields.update(overrides)
    return Reservation(**fields)


# =============================================================================
# Reusable Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Usage:
        def test_something(mock_logger):
            service = MyService(logger=mock_logger)
            service.do_something()
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    return logger


@pytest.fixture
def mock_event_bus():
    """Provide a mock event bus recording publish/publish_many calls."""
    event_bus = AsyncMock()
    event_bus.publish = AsyncMock(return_value=None)
    event_bus.publish_many = AsyncMock(return_value=None)
    return event_bus


@pytest.fixture
def daily_late_fee() -> Money:
    return Money(Decimal("10.00"))


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory SQLite Database with all tables created.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                repo = RentalRepository(session=session)
                ...
    """
    from src.infrastructure.persistence.database import Database

    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    """Provide one session on the fresh test database."""
    async with test_database.get_session() as session:
        yield session


async def load_fresh(database, repository_class, entity_id):
    """Read an entity back through a new session (bypasses the identity map)."""
    async with database.get_session() as session:
        return await repository_class(session).find_by_id(entity_id)
