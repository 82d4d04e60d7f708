"""Member email address value object."""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Validated, normalized member email address.

    Attributes:
        value: The normalized address (domain part lowercased).

    Raises:
        ValueError: If the address is malformed.

    Example:
        >>> str(Email("Ada@Example.COM"))
        'Ada@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        try:
            # Syntax only; members may register before their mailbox exists
            validated = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "value", validated.normalized)

    def __str__(self) -> str:
        return self.value


def is_valid_email(value: str) -> bool:
    """Check an email address without raising."""
    try:
        Email(value)
    except ValueError:
        return False
    return True
