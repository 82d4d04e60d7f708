"""Payment status enumeration."""

from enum import Enum


class PaymentStatus(str, Enum):
    """Outcome of a payment attempt.

    PENDING is reserved for asynchronous gateways; the bundled mock
    gateway settles immediately.
    """

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REFUNDED = "refunded"
