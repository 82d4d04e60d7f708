"""NotificationServiceProtocol for member notifications.

Notifications are side effects of domain events. Delivery failures must not
affect the business operation that triggered them; the event bus isolates
handler failures.
"""

from datetime import datetime
from typing import Protocol

from src.domain.enums import NotificationChannel
from src.domain.value_objects import MemberId, Money, RentalId, ReservationId


class NotificationServiceProtocol(Protocol):
    """Protocol for member notification adapters.

    Every method accepts an optional channel; adapters pick their default
    (EMAIL) when None.
    """

    async def notify_rental_created(
        self,
        member_id: MemberId,
        rental_id: RentalId,
        end_date: datetime,
        total_cost: Money,
        channel: NotificationChannel | None = None,
    ) -> None:
        ...

    async def notify_rental_returned(
        self,
        member_id: MemberId,
        rental_id: RentalId,
        total_cost: Money,
        channel: NotificationChannel | None = None,
    ) -> None:
        ...

    async def notify_rental_overdue(
        self,
        member_id: MemberId,
        rental_id: RentalId,
        days_overdue: int,
        accrued_late_fee: Money,
        channel: NotificationChannel | None = None,
    ) -> None:
        ...

    async def notify_reservation_created(
        self,
        member_id: MemberId,
        reservation_id: ReservationId,
        start_date: datetime,
        channel: NotificationChannel | None = None,
    ) -> None:
        ...

    async def notify_reservation_confirmed(
        self,
        member_id: MemberId,
        reservation_id: ReservationId,
        channel: NotificationChannel | None = None,
    ) -> None:
        ...

    async def notify_reservation_cancelled(
        self,
        member_id: MemberId,
        reservation_id: ReservationId,
        reason: str | None = None,
        channel: NotificationChannel | None = None,
    ) -> None:
        ...

    async def notify_equipment_damaged(
        self,
        member_id: MemberId,
        rental_id: RentalId,
        damage_fee: Money,
        channel: NotificationChannel | None = None,
    ) -> None:
        ...

    async def notify_payment_received(
        self,
        member_id: MemberId,
        amount: Money,
        transaction_id: str,
        channel: NotificationChannel | None = None,
    ) -> None:
        ...

    async def notify_payment_failed(
        self,
        member_id: MemberId,
        amount: Money,
        reason: str,
        channel: NotificationChannel | None = None,
    ) -> None:
        ...
