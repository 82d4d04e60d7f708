"""Mock payment gateway.

Implements PaymentServiceProtocol without external calls. Charges succeed
immediately unless the adapter is configured to decline, which lets tests
and local environments exercise the 402 path (PAYMENT_FAIL_ALL=true).

Processing fee model (informational): 2.5% of the amount + $0.30.
"""

from decimal import Decimal

from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import PaymentStatus
from src.domain.errors import PaymentError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.payment_service_protocol import (
    DEFAULT_PAYMENT_METHOD,
    PaymentReceipt,
)
from src.domain.value_objects import MemberId, Money

PROCESSING_FEE_PERCENT = Decimal("2.5")
PROCESSING_FEE_FIXED = Decimal("0.30")


class MockPaymentService:
    """In-process payment gateway.

    Attributes:
        _logger: Logger for charge outcomes.
        _fail_all: Decline every charge when True.
        receipts: Receipts issued since creation (newest last).
    """

    def __init__(self, logger: LoggerProtocol, *, fail_all: bool = False) -> None:
        self._logger = logger
        self._fail_all = fail_all
        self.receipts: list[PaymentReceipt] = []

    @staticmethod
    def calculate_processing_fee(amount: Money) -> Money:
        return amount.percentage_of(PROCESSING_FEE_PERCENT) + Money(
            PROCESSING_FEE_FIXED, amount.currency
        )

    async def process_payment(
        self,
        member_id: MemberId,
        amount: Money,
        description: str,
        method: str = DEFAULT_PAYMENT_METHOD,
    ) -> Result[PaymentReceipt, PaymentError]:
        """Charge a member.

        Returns:
            Success(PaymentReceipt): Charge captured.
            Failure(PaymentError): Zero amount or declined by configuration.
        """
        if not amount.is_positive():
            return Failure(
                error=PaymentError(
                    code=ErrorCode.PAYMENT_FAILED,
                    message="Payment amount must be positive",
                    details={"amount": str(amount.amount), "currency": amount.currency},
                )
            )

        if self._fail_all:
            self._logger.warning(
                "payment_declined",
                member_id=str(member_id),
                amount=str(amount.amount),
                currency=amount.currency,
                method=method,
            )
            return Failure(
                error=PaymentError(
                    code=ErrorCode.PAYMENT_FAILED,
                    message="Payment was declined",
                    details={
                        "amount": str(amount.amount),
                        "currency": amount.currency,
                        "method": method,
                    },
                )
            )

        receipt = PaymentReceipt(
            transaction_id=f"mock_{uuid7().hex}",
            member_id=member_id,
            amount=amount,
            processing_fee=self.calculate_processing_fee(amount),
            status=PaymentStatus.SUCCEEDED,
            method=method,
            description=description,
        )
        self.receipts.append(receipt)
        self._logger.info(
            "payment_processed",
            member_id=str(member_id),
            transaction_id=receipt.transaction_id,
            amount=str(amount.amount),
            currency=amount.currency,
            method=method,
        )
        return Success(value=receipt)
