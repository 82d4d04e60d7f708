"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Catch-all handlers
- Handler failure doesn't break others (fail-open)
- Unsubscribe (returned callable and explicit)
- publish_many ordering
- Handler counting and clearing

Architecture:
- Unit tests with mocked logger
- Tests fail-open behavior (critical requirement)
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.events import (
    DomainEvent,
    MemberRegistered,
    RentalActivated,
    RentalCreated,
)
from src.domain.value_objects import new_equipment_id, new_member_id, new_rental_id
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from tests.conftest import utc


def rental_created() -> RentalCreated:
    return RentalCreated(
        rental_id=new_rental_id(),
        equipment_id=new_equipment_id(),
        member_id=new_member_id(),
        start_date=utc(2026, 5, 1),
        end_date=utc(2026, 5, 4),
        total_cost=Decimal("67.50"),
    )


def member_registered() -> MemberRegistered:
    return MemberRegistered(member_id=new_member_id(), email="ada@example.com", tier="basic")


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    """Test basic subscribe/publish flow."""

    async def test_subscribe_and_publish_single_handler(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event = rental_created()
        event_bus.subscribe(RentalCreated, handler)
        await event_bus.publish(event)

        assert received == [event]

    async def test_handlers_only_receive_their_event_type(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event_bus.subscribe(RentalCreated, handler)
        await event_bus.publish(member_registered())

        assert received == []

    async def test_catch_all_handler_receives_every_event(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[str] = []

        async def audit(event: DomainEvent) -> None:
            received.append(type(event).__name__)

        event_bus.subscribe_to_all(audit)
        await event_bus.publish(rental_created())
        await event_bus.publish(member_registered())

        assert received == ["RentalCreated", "MemberRegistered"]

    async def test_publish_with_no_handlers_is_noop(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(rental_created())

        mock_logger.debug.assert_not_called()


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    """Test fail-open behavior (critical requirement)."""

    async def test_failing_handler_does_not_stop_others(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        calls: list[str] = []

        async def failing_handler(event: DomainEvent) -> None:
            raise RuntimeError("notification backend down")

        async def working_handler(event: DomainEvent) -> None:
            calls.append("working")

        event_bus.subscribe(RentalCreated, failing_handler)
        event_bus.subscribe(RentalCreated, working_handler)

        await event_bus.publish(rental_created())

        assert calls == ["working"]
        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args[0] == "event_handler_failed"
        assert kwargs["event_type"] == "RentalCreated"
        assert kwargs["handler_name"] == "failing_handler"
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error_message"] == "notification backend down"


@pytest.mark.unit
class TestInMemoryEventBusSubscriptions:
    async def test_returned_callable_unsubscribes(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        calls: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            calls.append(event)

        unsubscribe = event_bus.subscribe(RentalCreated, handler)
        unsubscribe()
        await event_bus.publish(rental_created())

        assert calls == []
        assert event_bus.handler_count(RentalCreated) == 0

    async def test_catch_all_unsubscribe(self):
        event_bus = InMemoryEventBus(logger=MagicMock())

        async def handler(event: DomainEvent) -> None:
            pass

        unsubscribe = event_bus.subscribe_to_all(handler)
        unsubscribe()
        unsubscribe()

        assert event_bus.handler_count() == 0

    def test_unsubscribe_unknown_handler_is_noop(self):
        event_bus = InMemoryEventBus(logger=MagicMock())

        async def handler(event: DomainEvent) -> None:
            pass

        event_bus.unsubscribe(RentalCreated, handler)

        assert event_bus.handler_count() == 0

    def test_handler_count_includes_catch_all(self):
        event_bus = InMemoryEventBus(logger=MagicMock())

        async def handler(event: DomainEvent) -> None:
            pass

        event_bus.subscribe(RentalCreated, handler)
        event_bus.subscribe(RentalActivated, handler)
        event_bus.subscribe_to_all(handler)

        assert event_bus.handler_count(RentalCreated) == 2
        assert event_bus.handler_count(MemberRegistered) == 1
        assert event_bus.handler_count() == 3

        event_bus.clear_all_handlers()

        assert event_bus.handler_count() == 0


@pytest.mark.unit
class TestInMemoryEventBusPublishMany:
    async def test_events_delivered_in_order(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[str] = []

        async def handler(event: DomainEvent) -> None:
            received.append(type(event).__name__)

        event_bus.subscribe_to_all(handler)
        await event_bus.publish_many(
            [
                rental_created(),
                RentalActivated(rental_id=new_rental_id(), member_id=new_member_id()),
                member_registered(),
            ]
        )

        assert received == ["RentalCreated", "RentalActivated", "MemberRegistered"]
