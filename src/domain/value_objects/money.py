"""Immutable Money value object with Decimal precision.

Rental charges, discounts and fees are exact cent amounts. Floats introduce
rounding errors, so Money wraps a Decimal quantized to two places.

Error Handling:
    Money can never be negative. Construction with a negative amount, more
    than two decimal places, NaN or Infinity raises ValueError. Arithmetic
    between different currencies raises CurrencyMismatchError (a ValueError
    subclass). These are programming errors, not business-rule failures.

Usage:
    from decimal import Decimal
    from src.domain.value_objects import Money

    rate = Money.of("25.00")
    base = rate * 3                           # $75.00
    total = base.apply_percentage_discount(10)  # $67.50
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Self

CENT = Decimal("0.01")

VALID_CURRENCIES: frozenset[str] = frozenset(
    {
        "USD",  # US Dollar
        "EUR",  # Euro
        "GBP",  # British Pound
        "CAD",  # Canadian Dollar
        "AUD",  # Australian Dollar
    }
)


class CurrencyMismatchError(ValueError):
    """Raised when attempting operations on different currencies."""

    def __init__(self, currency1: str, currency2: str) -> None:
        """Initialize currency mismatch error.

        Args:
            currency1: First currency code.
            currency2: Second currency code.
        """
        super().__init__(
            f"Cannot perform operation between {currency1} and {currency2}"
        )
        self.currency1 = currency1
        self.currency2 = currency2


def validate_currency(code: str) -> str:
    """Validate and normalize currency code.

    Args:
        code: Currency code (case-insensitive).

    Returns:
        Uppercase ISO 4217 currency code.

    Raises:
        ValueError: If code is not a supported ISO 4217 currency.
    """
    if not code or not isinstance(code, str):
        raise ValueError("Currency code cannot be empty")

    normalized = code.upper().strip()
    if normalized not in VALID_CURRENCIES:
        raise ValueError(f"Invalid currency code: {code}")
    return normalized


@dataclass(frozen=True)
class Money:
    """Immutable, non-negative monetary value with currency.

    Attributes:
        amount: Decimal value, at most two decimal places, never negative.
        currency: ISO 4217 currency code (default "USD").

    Example:
        >>> Money(Decimal("100.00")) - Money(Decimal("9.99"))
        Money(amount=Decimal('90.01'), currency='USD')
        >>> str(Money.of("12.5"))
        '$12.50'
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        """Validate money after initialization.

        Raises:
            ValueError: If amount is invalid, negative or has sub-cent
                precision, or if currency is invalid.
        """
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except (InvalidOperation, TypeError) as e:
                raise ValueError(f"Amount must be a valid number: {e}") from e

        if self.amount.is_nan() or self.amount.is_infinite():
            raise ValueError("Amount cannot be NaN or Infinite")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")
        if self.amount != self.amount.quantize(CENT):
            raise ValueError("Money amount must have at most 2 decimal places")

        object.__setattr__(self, "amount", self.amount.quantize(CENT))
        object.__setattr__(self, "currency", validate_currency(self.currency))

    # -------------------------------------------------------------------------
    # Arithmetic Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money values.

        Raises:
            CurrencyMismatchError: If currencies differ.
            ValueError: If the result would be negative.
        """
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, scalar: Decimal | int) -> "Money":
        """Multiply Money by a scalar, rounding half-up to cents.

        Example:
            >>> Money.of("33.33") * Decimal("1.5")
            Money(amount=Decimal('50.00'), currency='USD')
        """
        if isinstance(scalar, bool) or not isinstance(scalar, (Decimal, int)):
            return NotImplemented
        product = (self.amount * Decimal(scalar)).quantize(CENT, rounding=ROUND_HALF_UP)
        return Money(product, self.currency)

    def __rmul__(self, scalar: Decimal | int) -> "Money":
        return self.__mul__(scalar)

    def apply_percentage_discount(self, percentage: Decimal | int) -> "Money":
        """Reduce the amount by a percentage.

        Args:
            percentage: Discount between 0 and 100.

        Returns:
            New Money with the discount removed (rounded half-up to cents).

        Raises:
            ValueError: If percentage is outside 0..100.
        """
        pct = Decimal(percentage)
        if pct < 0 or pct > 100:
            raise ValueError("Discount percentage must be between 0 and 100")
        return self * ((Decimal(100) - pct) / Decimal(100))

    def percentage_of(self, percentage: Decimal | int) -> "Money":
        """Return the given percentage of this amount (rounded half-up)."""
        pct = Decimal(percentage)
        if pct < 0:
            raise ValueError("Percentage cannot be negative")
        return self * (pct / Decimal(100))

    # -------------------------------------------------------------------------
    # Comparison Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount >= other.amount

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_zero(self) -> bool:
        return self.amount == 0

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, currency: str = "USD") -> Self:
        """Create Money with zero amount."""
        return cls(Decimal("0"), currency)

    @classmethod
    def of(cls, value: Decimal | int | str, currency: str = "USD") -> Self:
        """Create Money from a Decimal, int or numeric string.

        Floats are rejected to avoid binary rounding surprises.

        Raises:
            ValueError: If value is a float or not a valid amount.
        """
        if isinstance(value, float):
            raise ValueError("Use str or Decimal for money amounts, not float")
        try:
            amount = Decimal(str(value).strip()) if isinstance(value, str) else Decimal(value)
        except InvalidOperation as e:
            raise ValueError(f"Amount must be a valid number: {value}") from e
        return cls(amount, currency)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _check_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def __str__(self) -> str:
        """Format for display ("$12.50" for USD, "12.50 EUR" otherwise)."""
        if self.currency == "USD":
            return f"${self.amount:.2f}"
        return f"{self.amount:.2f} {self.currency}"
