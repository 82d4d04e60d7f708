"""Business-rule failure carried inside a Failure result.

Every refusal in the rental domain (unknown equipment, member over the
tier limit, overlapping booking, declined card) is a DomainError value.
The presentation layer turns its ``code`` into an HTTP status and copies
``details`` into the problem-details body, so details hold only
client-safe strings such as ids, limits and amounts.

Aggregate-specific subclasses (EquipmentError, MemberError, RentalError,
ReservationError, PaymentError) add no fields; they only tag the origin.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """A refused rental operation.

    Attributes:
        code: Which rule was violated.
        message: Sentence suitable for an API client.
        details: String metadata, e.g. ``{"equipment_id": ..., "condition": "poor"}``.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
