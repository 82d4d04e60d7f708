"""Unit tests for MockPaymentService.

Tests cover:
- Successful charges (receipt, transaction id, processing fee)
- Declines when configured to fail
- Non-positive amounts
"""

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import PaymentStatus
from src.domain.value_objects import Money, new_member_id
from src.infrastructure.payments import MockPaymentService


@pytest.mark.unit
class TestMockPaymentService:
    async def test_successful_charge_issues_receipt(self, mock_logger):
        service = MockPaymentService(mock_logger)
        member_id = new_member_id()

        result = await service.process_payment(member_id, Money.of("100.00"), "Rental")

        assert isinstance(result, Success)
        receipt = result.value
        assert receipt.transaction_id.startswith("mock_")
        assert receipt.member_id == member_id
        assert receipt.amount == Money.of("100.00")
        assert receipt.status == PaymentStatus.SUCCEEDED
        assert receipt.method == "card"
        assert service.receipts == [receipt]
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.args[0] == "payment_processed"

    async def test_transaction_ids_are_unique(self, mock_logger):
        service = MockPaymentService(mock_logger)

        first = await service.process_payment(new_member_id(), Money.of("1.00"), "a")
        second = await service.process_payment(new_member_id(), Money.of("1.00"), "b")

        assert first.value.transaction_id != second.value.transaction_id

    def test_processing_fee(self):
        fee = MockPaymentService.calculate_processing_fee(Money.of("100.00"))

        assert fee == Money.of("2.80")

    async def test_fail_all_declines(self, mock_logger):
        service = MockPaymentService(mock_logger, fail_all=True)

        result = await service.process_payment(
            new_member_id(), Money.of("10.00"), "Rental", "invoice"
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PAYMENT_FAILED
        assert result.error.message == "Payment was declined"
        assert result.error.details["method"] == "invoice"
        assert service.receipts == []
        assert mock_logger.warning.call_args.args[0] == "payment_declined"

    async def test_zero_amount_rejected(self, mock_logger):
        service = MockPaymentService(mock_logger)

        result = await service.process_payment(new_member_id(), Money.zero(), "Nothing")

        assert isinstance(result, Failure)
        assert result.error.message == "Payment amount must be positive"
        mock_logger.info.assert_not_called()
