"""Domain error → application error mapping.

Every domain ErrorCode belongs to exactly one application category:

    NOT_FOUND                  missing equipment, member, rental, ...
    CONFLICT                   state and availability conflicts
    FORBIDDEN                  member eligibility (inactive, limits, overdue)
    PAYMENT_REQUIRED           declined charges
    COMMAND_VALIDATION_FAILED  everything else (malformed input)
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError

_NOT_FOUND = frozenset(
    {
        ErrorCode.EQUIPMENT_NOT_FOUND,
        ErrorCode.MEMBER_NOT_FOUND,
        ErrorCode.RENTAL_NOT_FOUND,
        ErrorCode.RESERVATION_NOT_FOUND,
        ErrorCode.DAMAGE_ASSESSMENT_NOT_FOUND,
    }
)

_CONFLICT = frozenset(
    {
        ErrorCode.EMAIL_ALREADY_EXISTS,
        ErrorCode.EQUIPMENT_NOT_AVAILABLE,
        ErrorCode.EQUIPMENT_NOT_RENTED,
        ErrorCode.EQUIPMENT_CONDITION_UNACCEPTABLE,
        ErrorCode.EQUIPMENT_UNAVAILABLE_FOR_PERIOD,
        ErrorCode.RENTAL_NOT_ALLOWED,
        ErrorCode.INVALID_STATE_TRANSITION,
        ErrorCode.RENTAL_ALREADY_RETURNED,
        ErrorCode.RENTAL_ALREADY_CANCELLED,
        ErrorCode.INVALID_RENTAL_EXTENSION,
        ErrorCode.RENTAL_OVERDUE,
        ErrorCode.RENTAL_NOT_RETURNED,
        ErrorCode.RESERVATION_ALREADY_CANCELLED,
        ErrorCode.INVALID_RESERVATION_STATE,
    }
)

_FORBIDDEN = frozenset(
    {
        ErrorCode.MEMBER_INACTIVE,
        ErrorCode.RENTAL_LIMIT_EXCEEDED,
        ErrorCode.MEMBER_HAS_OVERDUE_RENTALS,
        ErrorCode.MEMBER_HAS_ACTIVE_RENTALS,
        ErrorCode.RENTAL_PERIOD_EXCEEDS_TIER_LIMIT,
    }
)


def application_code_for(code: ErrorCode) -> ApplicationErrorCode:
    """Application category of a domain error code."""
    if code in _NOT_FOUND:
        return ApplicationErrorCode.NOT_FOUND
    if code in _CONFLICT:
        return ApplicationErrorCode.CONFLICT
    if code in _FORBIDDEN:
        return ApplicationErrorCode.FORBIDDEN
    if code == ErrorCode.PAYMENT_FAILED:
        return ApplicationErrorCode.PAYMENT_REQUIRED
    return ApplicationErrorCode.COMMAND_VALIDATION_FAILED


def to_application_error(error: DomainError) -> ApplicationError:
    """Wrap a domain error for the presentation layer.

    The domain code is carried in details so clients can branch on it.

    Args:
        error: Domain error returned by a handler.

    Returns:
        ApplicationError with the mapped category and merged details.
    """
    details = {"error_code": error.code.value}
    if error.details:
        details.update(error.details)
    return ApplicationError(
        code=application_code_for(error.code),
        message=error.message,
        domain_error=error,
        details=details,
    )
