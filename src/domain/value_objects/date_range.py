"""DateRange value object for rental and reservation periods.

Periods are closed intervals [start, end] of timezone-aware datetimes.
Naive datetimes are interpreted as UTC so that values round-tripped through
databases without timezone support compare correctly.

Overlap is closed-interval: two periods that merely touch at a boundary
(one ends exactly when the next starts) DO overlap. Availability checks use
this rule so that equipment is never handed over on the same instant it is
due back.
"""

import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Self

SECONDS_PER_DAY = 86_400


def ensure_utc(moment: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def _ceil_days(delta: timedelta) -> int:
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


@dataclass(frozen=True)
class DateRange:
    """Immutable closed period between two instants.

    Attributes:
        start: Beginning of the period (UTC).
        end: End of the period (UTC), never before start.

    Raises:
        ValueError: If start is after end.

    Example:
        >>> period = DateRange(datetime(2026, 1, 1, tzinfo=UTC),
        ...                    datetime(2026, 1, 4, tzinfo=UTC))
        >>> period.days
        3
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", ensure_utc(self.start))
        object.__setattr__(self, "end", ensure_utc(self.end))
        if self.start > self.end:
            raise ValueError("Invalid date range: start must not be after end")

    @classmethod
    def starting_at(cls, start: datetime, days: int) -> Self:
        """Create a period of a whole number of days from start."""
        if days <= 0:
            raise ValueError("Number of days must be positive")
        return cls(start, ensure_utc(start) + timedelta(days=days))

    # -------------------------------------------------------------------------
    # Length
    # -------------------------------------------------------------------------

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def days(self) -> int:
        """Whole or partial days covered (partial days round up)."""
        return _ceil_days(self.duration)

    @property
    def billable_days(self) -> int:
        """Days charged for the period (minimum one day)."""
        return max(1, self.days)

    # -------------------------------------------------------------------------
    # Relations
    # -------------------------------------------------------------------------

    def overlaps(self, other: "DateRange") -> bool:
        """Closed-interval overlap (touching boundaries overlap)."""
        return self.start <= other.end and self.end >= other.start

    def contains(self, moment: datetime) -> bool:
        moment = ensure_utc(moment)
        return self.start <= moment <= self.end

    def has_started(self, now: datetime) -> bool:
        return self.start <= ensure_utc(now)

    def has_ended(self, now: datetime) -> bool:
        return self.end < ensure_utc(now)

    def is_active(self, now: datetime) -> bool:
        return self.has_started(now) and not self.has_ended(now)

    def days_overdue(self, now: datetime) -> int:
        """Days past the end of the period (partial days round up)."""
        if not self.has_ended(now):
            return 0
        return _ceil_days(ensure_utc(now) - self.end)

    def days_until_end(self, now: datetime) -> int:
        """Days remaining until the end (negative once the end has passed)."""
        remaining = self.end - ensure_utc(now)
        if remaining >= timedelta(0):
            return _ceil_days(remaining)
        return -_ceil_days(-remaining)

    # -------------------------------------------------------------------------
    # Derivations
    # -------------------------------------------------------------------------

    def extend_to(self, new_end: datetime) -> "DateRange":
        """Return a period with a later end.

        Raises:
            ValueError: If new_end is not after the current end.
        """
        new_end = ensure_utc(new_end)
        if new_end <= self.end:
            raise ValueError("New end date must be after the current end date")
        return DateRange(self.start, new_end)

    def extend_by(self, days: int) -> "DateRange":
        """Return a period extended by a positive number of days.

        Raises:
            ValueError: If days is not positive.
        """
        if days <= 0:
            raise ValueError("Extension days must be positive")
        return DateRange(self.start, self.end + timedelta(days=days))

    def __str__(self) -> str:
        return f"{self.start.isoformat()} to {self.end.isoformat()}"
