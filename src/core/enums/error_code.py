"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError values returned in Failure results. The HTTP layer maps each
code to a status and exposes the code value in the problem details body.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Equipment rules (EQUIPMENT_*)
- Member rules (MEMBER_*, RENTAL_LIMIT_EXCEEDED)
- Rental lifecycle (RENTAL_*, INVALID_STATE_TRANSITION)
- Reservation lifecycle (RESERVATION_*)
- Payments (PAYMENT_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_EMAIL = "invalid_email"
    INVALID_DATE_RANGE = "invalid_date_range"

    # Resource errors
    EQUIPMENT_NOT_FOUND = "equipment_not_found"
    MEMBER_NOT_FOUND = "member_not_found"
    RENTAL_NOT_FOUND = "rental_not_found"
    RESERVATION_NOT_FOUND = "reservation_not_found"
    DAMAGE_ASSESSMENT_NOT_FOUND = "damage_assessment_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Equipment rules
    EQUIPMENT_NOT_AVAILABLE = "equipment_not_available"
    EQUIPMENT_NOT_RENTED = "equipment_not_rented"
    EQUIPMENT_CONDITION_UNACCEPTABLE = "equipment_condition_unacceptable"
    EQUIPMENT_UNAVAILABLE_FOR_PERIOD = "equipment_unavailable_for_period"

    # Member rules
    MEMBER_INACTIVE = "member_inactive"
    RENTAL_LIMIT_EXCEEDED = "rental_limit_exceeded"
    MEMBER_HAS_OVERDUE_RENTALS = "member_has_overdue_rentals"
    MEMBER_HAS_ACTIVE_RENTALS = "member_has_active_rentals"
    RENTAL_PERIOD_EXCEEDS_TIER_LIMIT = "rental_period_exceeds_tier_limit"

    # Rental lifecycle
    RENTAL_NOT_ALLOWED = "rental_not_allowed"
    INVALID_STATE_TRANSITION = "invalid_state_transition"
    RENTAL_ALREADY_RETURNED = "rental_already_returned"
    RENTAL_ALREADY_CANCELLED = "rental_already_cancelled"
    INVALID_RENTAL_EXTENSION = "invalid_rental_extension"
    RENTAL_OVERDUE = "rental_overdue"
    RENTAL_NOT_RETURNED = "rental_not_returned"

    # Reservation lifecycle
    RESERVATION_ALREADY_CANCELLED = "reservation_already_cancelled"
    INVALID_RESERVATION_STATE = "invalid_reservation_state"
    INVALID_RESERVATION_PERIOD = "invalid_reservation_period"

    # Payments
    PAYMENT_FAILED = "payment_failed"
