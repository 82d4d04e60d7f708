"""Payment collection service.

Wraps the payment port for command handlers:
    - zero amounts are not sent to the gateway
    - declines publish PaymentFailed immediately (the command aborts)
    - successful charges are turned into PaymentReceived events that the
      handler publishes together with its own events after persistence
"""

from src.core.result import Failure, Result, Success
from src.domain.errors import PaymentError
from src.domain.events import PaymentFailed, PaymentReceived
from src.domain.protocols import (
    EventBusProtocol,
    PaymentReceipt,
    PaymentServiceProtocol,
)
from src.domain.value_objects import MemberId, Money


class PaymentCollector:
    """Charges members and reports declines.

    Dependencies (injected via constructor):
        - PaymentServiceProtocol: Payment gateway adapter
        - EventBusProtocol: For PaymentFailed events
    """

    def __init__(
        self,
        payment_service: PaymentServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._payment_service = payment_service
        self._event_bus = event_bus

    async def charge(
        self,
        member_id: MemberId,
        amount: Money,
        description: str,
        method: str,
    ) -> Result[PaymentReceipt | None, PaymentError]:
        """Charge a member.

        Args:
            member_id: Member to charge.
            amount: Amount owed (zero is a no-op).
            description: Receipt description.
            method: Payment method identifier.

        Returns:
            Success(PaymentReceipt): Charge captured.
            Success(None): Nothing owed.
            Failure(PaymentError): Gateway declined; PaymentFailed published.
        """
        if amount.is_zero():
            return Success(value=None)

        result = await self._payment_service.process_payment(
            member_id, amount, description, method
        )
        match result:
            case Success(value=receipt):
                return Success(value=receipt)
            case Failure(error=error):
                await self._event_bus.publish(
                    PaymentFailed(
                        member_id=member_id,
                        amount=amount.amount,
                        currency=amount.currency,
                        description=description,
                        reason=error.message,
                    )
                )
                return Failure(error=error)

    @staticmethod
    def received_events(receipt: PaymentReceipt | None) -> list[PaymentReceived]:
        """PaymentReceived event for a receipt (empty when nothing was charged)."""
        if receipt is None:
            return []
        return [
            PaymentReceived(
                member_id=receipt.member_id,
                transaction_id=receipt.transaction_id,
                amount=receipt.amount.amount,
                currency=receipt.amount.currency,
                description=receipt.description,
            )
        ]
