"""Success/Failure outcome of a rental operation.

Rental rules reject requests all the time (equipment already booked, member
over the tier limit, payment declined). Those are expected outcomes, so
entities and handlers hand them back as a ``Failure`` holding a
``DomainError`` and keep exceptions for genuine faults.

Callers branch on the type:

    result = await handler.handle(CreateRental(...))
    if isinstance(result, Failure):
        return error_response(result.error)
    rental = result.value
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Operation completed; ``value`` holds the outcome (may be None)."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Operation refused; ``error`` says why."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
