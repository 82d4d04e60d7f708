"""Equipment error types.

Returned (never raised) when an inventory rule blocks an operation.

Usage:
    from src.domain.errors import EquipmentError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=EquipmentError(
        code=ErrorCode.EQUIPMENT_NOT_AVAILABLE,
        message="Equipment is currently rented",
        details={"equipment_id": str(equipment.id)},
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class EquipmentError(DomainError):
    """Equipment inventory rule violation.

    Codes:
        EQUIPMENT_NOT_AVAILABLE: already rented or withdrawn.
        EQUIPMENT_NOT_RENTED: return requested without a current rental.
        EQUIPMENT_CONDITION_UNACCEPTABLE: condition is POOR or worse.
        EQUIPMENT_UNAVAILABLE_FOR_PERIOD: conflicting rental or reservation.
    """

    pass  # Inherits all fields from DomainError
