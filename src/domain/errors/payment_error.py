"""Payment error types.

Usage:
    from src.domain.errors import PaymentError

    return Failure(error=PaymentError(
        code=ErrorCode.PAYMENT_FAILED,
        message="Card declined",
        details={"amount": "75.00", "currency": "USD"},
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentError(DomainError):
    """Payment gateway decline or failure.

    Any PaymentError aborts the surrounding command before anything is
    persisted. The transport layer renders it as 402 Payment Required.
    """

    pass  # Inherits all fields from DomainError
