"""Data models for segmented date entry."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class SegmentRole(Enum):
    """One of the three editable numeric fields of a date."""

    DATE = "date"
    MONTH = "month"
    YEAR = "year"

    @property
    def max_length(self) -> int:
        """Number of digits that makes this segment complete."""
        match self:
            case SegmentRole.YEAR:
                return 4
            case _:
                return 2

    @property
    def max_value(self) -> int | None:
        """Largest legal value, or None when the segment is not clamped."""
        match self:
            case SegmentRole.DATE:
                return 31
            case SegmentRole.MONTH:
                return 12
            case SegmentRole.YEAR:
                return None


class SegmentOrder(Enum):
    """Order in which the segments are laid out and traversed."""

    MDY = (SegmentRole.MONTH, SegmentRole.DATE, SegmentRole.YEAR)
    YMD = (SegmentRole.YEAR, SegmentRole.MONTH, SegmentRole.DATE)

    @property
    def roles(self) -> tuple[SegmentRole, ...]:
        """The segment roles in traversal order."""
        return self.value

    @property
    def first(self) -> SegmentRole:
        """The segment that receives focus first."""
        return self.value[0]

    @property
    def last(self) -> SegmentRole:
        """The segment after which focus is dismissed."""
        return self.value[-1]

    def next_role(self, role: SegmentRole) -> SegmentRole | None:
        """Return the segment after *role*, or None when *role* is the last one."""
        index = self.value.index(role)
        if index + 1 < len(self.value):
            return self.value[index + 1]
        return None

    @classmethod
    def from_name(cls, name: str) -> SegmentOrder:
        """Look up an order by its case-insensitive name (``'mdy'``, ``'ymd'``).

        Raises:
            ValueError: If the name is unknown.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown segment order: {name!r}") from None


class SubmitGuard(Enum):
    """Which segments must hold digits before a blur may submit."""

    LAST_SEGMENT = "last"
    ANY_SEGMENT = "any"


class BlurOutcome(Enum):
    """Result of running normalization and validation on focus loss."""

    SUBMITTED = "submitted"
    RANGE_VIOLATION = "range_violation"
    CALENDAR_INVALID = "calendar_invalid"
    INCOMPLETE = "incomplete"


class FieldState(Enum):
    """Coarse state of a date field, derived from its segments."""

    EMPTY = "empty"
    PARTIALLY_ENTERED = "partially_entered"
    COMPLETE_INVALID = "complete_invalid"
    COMPLETE_VALID = "complete_valid"
    ERROR = "error"


@dataclass(frozen=True)
class DateSegments:
    """Raw digit buffers for the date, month and year segments.

    Every field holds only ASCII digits and never exceeds the
    ``max_length`` of its role.  Instances are immutable; transitions
    return new values.
    """

    date: str = ""
    month: str = ""
    year: str = ""

    @classmethod
    def empty(cls) -> DateSegments:
        """Return segments with every buffer cleared."""
        return cls()

    def get(self, role: SegmentRole) -> str:
        """Return the buffer for *role*."""
        return getattr(self, role.value)

    def replace(self, role: SegmentRole, text: str) -> DateSegments:
        """Return a copy with the buffer for *role* set to *text*."""
        return replace(self, **{role.value: text})

    @property
    def is_empty(self) -> bool:
        """Whether no segment holds any digit."""
        return not (self.date or self.month or self.year)

    @property
    def is_complete(self) -> bool:
        """Whether every segment is filled to its full length."""
        return all(len(self.get(role)) == role.max_length for role in SegmentRole)
