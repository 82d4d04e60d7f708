"""Console notification adapter.

Implements NotificationServiceProtocol by writing one structured log line
per notification instead of delivering email/SMS. Real delivery channels are
out of scope; the log line carries everything a delivery adapter would need
(recipient, template, subject, channel).
"""

from datetime import datetime

from src.domain.enums import NotificationChannel
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects import MemberId, Money, RentalId, ReservationId


class ConsoleNotificationService:
    """Logs notifications as `notification_sent` events.

    Attributes:
        _logger: Logger protocol implementation (from container).
        _default_channel: Channel used when callers pass None.
        sent_count: Notifications emitted since creation.
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        default_channel: NotificationChannel = NotificationChannel.EMAIL,
    ) -> None:
        self._logger = logger
        self._default_channel = default_channel
        self.sent_count = 0

    def _send(
        self,
        *,
        template: str,
        subject: str,
        member_id: MemberId,
        channel: NotificationChannel | None,
        **context: str | int | None,
    ) -> None:
        self.sent_count += 1
        self._logger.info(
            "notification_sent",
            template=template,
            subject=subject,
            member_id=str(member_id),
            channel=(channel or self._default_channel).value,
            **context,
        )

    async def notify_rental_created(
        self,
        member_id: MemberId,
        rental_id: RentalId,
        end_date: datetime,
        total_cost: Money,
        channel: NotificationChannel | None = None,
    ) -> None:
        self._send(
            template="rental_created",
            subject="Your rental is confirmed",
            member_id=member_id,
            channel=channel,
            rental_id=str(rental_id),
            end_date=end_date.isoformat(),
            total_cost=str(total_cost),
        )

    async def notify_rental_returned(
        self,
        member_id: MemberId,
        rental_id: RentalId,
        total_cost: Money,
        channel: NotificationChannel | None = None,
    ) -> None:
        self._send(
            template="rental_returned",
            subject="Thanks for returning your rental",
            member_id=member_id,
            channel=channel,
            rental_id=str(rental_id),
            total_cost=str(total_cost),
        )

    async def notify_rental_overdue(
        self,
        member_id: MemberId,
        rental_id: RentalId,
        days_overdue: int,
        accrued_late_fee: Money,
        channel: NotificationChannel | None = None,
    ) -> None:
        self._send(
            template="rental_overdue",
            subject="Your rental is overdue",
            member_id=member_id,
            channel=channel,
            rental_id=str(rental_id),
            days_overdue=days_overdue,
            accrued_late_fee=str(accrued_late_fee),
        )

    async def notify_reservation_created(
        self,
        member_id: MemberId,
        reservation_id: ReservationId,
        start_date: datetime,
        channel: NotificationChannel | None = None,
    ) -> None:
        self._send(
            template="reservation_created",
            subject="Reservation received",
            member_id=member_id,
            channel=channel,
            reservation_id=str(reservation_id),
            start_date=start_date.isoformat(),
        )

    async def notify_reservation_confirmed(
        self,
        member_id: MemberId,
        reservation_id: ReservationId,
        channel: NotificationChannel | None = None,
    ) -> None:
        self._send(
            template="reservation_confirmed",
            subject="Reservation confirmed",
            member_id=member_id,
            channel=channel,
            reservation_id=str(reservation_id),
        )

    async def notify_reservation_cancelled(
        self,
        member_id: MemberId,
        reservation_id: ReservationId,
        reason: str | None = None,
        channel: NotificationChannel | None = None,
    ) -> None:
        self._send(
            template="reservation_cancelled",
            subject="Reservation cancelled",
            member_id=member_id,
            channel=channel,
            reservation_id=str(reservation_id),
            reason=reason,
        )

    async def notify_equipment_damaged(
        self,
        member_id: MemberId,
        rental_id: RentalId,
        damage_fee: Money,
        channel: NotificationChannel | None = None,
    ) -> None:
        self._send(
            template="equipment_damaged",
            subject="Damage found on returned equipment",
            member_id=member_id,
            channel=channel,
            rental_id=str(rental_id),
            damage_fee=str(damage_fee),
        )

    async def notify_payment_received(
        self,
        member_id: MemberId,
        amount: Money,
        transaction_id: str,
        channel: NotificationChannel | None = None,
    ) -> None:
        self._send(
            template="payment_received",
            subject="Payment received",
            member_id=member_id,
            channel=channel,
            amount=str(amount),
            transaction_id=transaction_id,
        )

    async def notify_payment_failed(
        self,
        member_id: MemberId,
        amount: Money,
        reason: str,
        channel: NotificationChannel | None = None,
    ) -> None:
        self._send(
            template="payment_failed",
            subject="Payment could not be processed",
            member_id=member_id,
            channel=channel,
            amount=str(amount),
            reason=reason,
        )
