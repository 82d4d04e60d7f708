"""Notification event handler.

Translates domain events into member notifications through
NotificationServiceProtocol. Runs as an ordinary event subscriber, so a
failing notification is logged by the event bus and never undoes the
business operation that published the event.

Subscriptions (wired in src/core/container/events.py):
    RentalCreated        → notify_rental_created
    RentalReturned       → notify_rental_returned
    RentalOverdue        → notify_rental_overdue
    ReservationCreated   → notify_reservation_created
    ReservationConfirmed → notify_reservation_confirmed
    ReservationCancelled → notify_reservation_cancelled
    EquipmentDamaged     → notify_equipment_damaged
    PaymentReceived      → notify_payment_received
    PaymentFailed        → notify_payment_failed
"""

from collections.abc import Awaitable, Callable

from src.domain.events import (
    DomainEvent,
    EquipmentDamaged,
    PaymentFailed,
    PaymentReceived,
    RentalCreated,
    RentalOverdue,
    RentalReturned,
    ReservationCancelled,
    ReservationConfirmed,
    ReservationCreated,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol, Unsubscribe
from src.domain.protocols.notification_service_protocol import (
    NotificationServiceProtocol,
)
from src.domain.value_objects import (
    MemberId,
    Money,
    RentalId,
    ReservationId,
)


class NotificationEventHandler:
    """Sends member notifications for rental, reservation and payment events.

    Attributes:
        _notifications: Notification adapter (from container).
    """

    def __init__(self, notifications: NotificationServiceProtocol) -> None:
        self._notifications = notifications

    def register(self, event_bus: EventBusProtocol) -> list[Unsubscribe]:
        """Subscribe every handler method to its event type."""
        routes: list[tuple[type[DomainEvent], Callable[..., Awaitable[None]]]] = [
            (RentalCreated, self.handle_rental_created),
            (RentalReturned, self.handle_rental_returned),
            (RentalOverdue, self.handle_rental_overdue),
            (ReservationCreated, self.handle_reservation_created),
            (ReservationConfirmed, self.handle_reservation_confirmed),
            (ReservationCancelled, self.handle_reservation_cancelled),
            (EquipmentDamaged, self.handle_equipment_damaged),
            (PaymentReceived, self.handle_payment_received),
            (PaymentFailed, self.handle_payment_failed),
        ]
        return [event_bus.subscribe(event_type, handler) for event_type, handler in routes]

    # =========================================================================
    # Rentals
    # =========================================================================

    async def handle_rental_created(self, event: RentalCreated) -> None:
        await self._notifications.notify_rental_created(
            member_id=MemberId(event.member_id),
            rental_id=RentalId(event.rental_id),
            end_date=event.end_date,
            total_cost=Money(event.total_cost, event.currency),
        )

    async def handle_rental_returned(self, event: RentalReturned) -> None:
        await self._notifications.notify_rental_returned(
            member_id=MemberId(event.member_id),
            rental_id=RentalId(event.rental_id),
            total_cost=Money(event.total_cost, event.currency),
        )

    async def handle_rental_overdue(self, event: RentalOverdue) -> None:
        await self._notifications.notify_rental_overdue(
            member_id=MemberId(event.member_id),
            rental_id=RentalId(event.rental_id),
            days_overdue=event.days_overdue,
            accrued_late_fee=Money(event.accrued_late_fee, event.currency),
        )

    # =========================================================================
    # Reservations
    # =========================================================================

    async def handle_reservation_created(self, event: ReservationCreated) -> None:
        await self._notifications.notify_reservation_created(
            member_id=MemberId(event.member_id),
            reservation_id=ReservationId(event.reservation_id),
            start_date=event.start_date,
        )

    async def handle_reservation_confirmed(self, event: ReservationConfirmed) -> None:
        await self._notifications.notify_reservation_confirmed(
            member_id=MemberId(event.member_id),
            reservation_id=ReservationId(event.reservation_id),
        )

    async def handle_reservation_cancelled(self, event: ReservationCancelled) -> None:
        await self._notifications.notify_reservation_cancelled(
            member_id=MemberId(event.member_id),
            reservation_id=ReservationId(event.reservation_id),
            reason=event.reason,
        )

    # =========================================================================
    # Equipment and payments
    # =========================================================================

    async def handle_equipment_damaged(self, event: EquipmentDamaged) -> None:
        await self._notifications.notify_equipment_damaged(
            member_id=MemberId(event.member_id),
            rental_id=RentalId(event.rental_id),
            damage_fee=Money(event.damage_fee, event.currency),
        )

    async def handle_payment_received(self, event: PaymentReceived) -> None:
        await self._notifications.notify_payment_received(
            member_id=MemberId(event.member_id),
            amount=Money(event.amount, event.currency),
            transaction_id=event.transaction_id,
        )

    async def handle_payment_failed(self, event: PaymentFailed) -> None:
        await self._notifications.notify_payment_failed(
            member_id=MemberId(event.member_id),
            amount=Money(event.amount, event.currency),
            reason=event.reason,
        )
