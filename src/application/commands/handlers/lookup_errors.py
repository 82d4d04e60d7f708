"""NotFoundError factories for the aggregates handlers look up."""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError


def equipment_not_found(equipment_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.EQUIPMENT_NOT_FOUND,
        message=f"Equipment {equipment_id} not found",
        resource_type="Equipment",
        resource_id=str(equipment_id),
    )


def member_not_found(member_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.MEMBER_NOT_FOUND,
        message=f"Member {member_id} not found",
        resource_type="Member",
        resource_id=str(member_id),
    )


def rental_not_found(rental_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.RENTAL_NOT_FOUND,
        message=f"Rental {rental_id} not found",
        resource_type="Rental",
        resource_id=str(rental_id),
    )


def reservation_not_found(reservation_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.RESERVATION_NOT_FOUND,
        message=f"Reservation {reservation_id} not found",
        resource_type="Reservation",
        resource_id=str(reservation_id),
    )


def damage_assessment_not_found(rental_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.DAMAGE_ASSESSMENT_NOT_FOUND,
        message=f"No damage assessment recorded for rental {rental_id}",
        resource_type="DamageAssessment",
        resource_id=str(rental_id),
    )
