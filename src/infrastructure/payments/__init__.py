"""Payment adapters."""

from src.infrastructure.payments.mock_payment_service import MockPaymentService

__all__ = ["MockPaymentService"]
