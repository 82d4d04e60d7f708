"""Rental error types.

Used by the Rental state machine and the rental command handlers.

Usage:
    from src.domain.errors import RentalError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=RentalError(
        code=ErrorCode.RENTAL_ALREADY_RETURNED,
        message="Rental has already been returned",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class RentalError(DomainError):
    """Rental lifecycle rule violation.

    Attributes:
        code: INVALID_STATE_TRANSITION, RENTAL_ALREADY_RETURNED,
            RENTAL_ALREADY_CANCELLED, INVALID_RENTAL_EXTENSION,
            RENTAL_OVERDUE, RENTAL_NOT_RETURNED or RENTAL_NOT_ALLOWED.
        message: Human-readable message.
        details: Rental id and current status where relevant.
    """

    pass  # Inherits all fields from DomainError
