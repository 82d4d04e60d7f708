"""Command input parsing shared by handlers.

Commands carry primitives (strings, Decimals, datetimes). These helpers
turn them into domain values, reporting malformed input as a
ValidationError instead of letting value-object ValueErrors escape.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TypeVar

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import EquipmentCondition, MembershipTier
from src.domain.value_objects import DateRange, Money

E = TypeVar("E", bound=Enum)


def _parse_enum(
    enum_type: type[E], value: str, field: str
) -> Result[E, ValidationError]:
    try:
        return Success(value=enum_type(value.lower()))
    except ValueError:
        allowed = ", ".join(str(member.value) for member in enum_type)
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"Invalid {field} '{value}' (expected one of: {allowed})",
                field=field,
            )
        )


def parse_condition(
    value: str, field: str = "condition"
) -> Result[EquipmentCondition, ValidationError]:
    return _parse_enum(EquipmentCondition, value, field)


def parse_tier(value: str) -> Result[MembershipTier, ValidationError]:
    return _parse_enum(MembershipTier, value, "tier")


def parse_money(
    amount: Decimal, currency: str, field: str
) -> Result[Money, ValidationError]:
    try:
        return Success(value=Money(amount=amount, currency=currency))
    except ValueError as e:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"Invalid {field}: {e}",
                field=field,
            )
        )


def parse_period(start: datetime, end: datetime) -> Result[DateRange, ValidationError]:
    """Build a DateRange, rejecting an end before the start."""
    try:
        return Success(value=DateRange(start=start, end=end))
    except ValueError as e:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_DATE_RANGE,
                message=str(e),
                field="end_date",
            )
        )
