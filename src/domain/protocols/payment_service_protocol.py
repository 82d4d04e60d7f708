"""PaymentServiceProtocol for charging members.

Architecture:
    - Command handlers charge through this port before persisting changes
    - A Failure aborts the command (nothing is saved)
    - Adapters: MockPaymentService (bundled); real gateways are out of scope
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from src.core.result import Result
from src.domain.enums import PaymentStatus
from src.domain.errors import PaymentError
from src.domain.value_objects import MemberId, Money

DEFAULT_PAYMENT_METHOD = "card"


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentReceipt:
    """Successful charge.

    Attributes:
        transaction_id: Gateway transaction reference.
        member_id: Charged member.
        amount: Amount charged.
        processing_fee: Gateway fee (informational, not billed to member).
        status: Payment status (SUCCEEDED for the mock gateway).
        method: Payment method used.
        description: What the charge was for.
        processed_at: When the charge was captured.
    """

    transaction_id: str
    member_id: MemberId
    amount: Money
    processing_fee: Money
    status: PaymentStatus
    method: str
    description: str
    processed_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class PaymentServiceProtocol(Protocol):
    """Protocol for payment gateway adapters."""

    async def process_payment(
        self,
        member_id: MemberId,
        amount: Money,
        description: str,
        method: str = DEFAULT_PAYMENT_METHOD,
    ) -> Result[PaymentReceipt, PaymentError]:
        """Charge a member.

        Args:
            member_id: Member to charge.
            amount: Positive amount to charge.
            description: Human-readable reason shown on the receipt.
            method: Payment method identifier ("card", "cash", ...).

        Returns:
            Success(PaymentReceipt): Charge captured.
            Failure(PaymentError): PAYMENT_FAILED (declined, invalid amount).
        """
        ...
