"""Gregorian calendar helpers used by segment normalization and validation."""

from __future__ import annotations

import re
from calendar import monthrange
from datetime import date, timedelta

from textual_datefield.models import DateSegments

DEFAULT_CENTURY_PIVOT = 69

_NON_DIGITS_RE = re.compile(r"[^0-9]")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Stands in for a year not yet entered, so February allows 29 days.
_ANY_LEAP_YEAR = 2000


def only_digits(text: str) -> str:
    """Strip every non-digit character from *text*.

    Only ASCII digits survive, so full-width or other Unicode digits
    pasted into a field are dropped as well.
    """
    return _NON_DIGITS_RE.sub("", text)


def to_int(digits: str) -> int | None:
    """Return the integer value of a digit buffer, or None when it is empty."""
    if not digits:
        return None
    return int(digits)


def days_in_month(month: int | None, year: int | None) -> int:
    """Return the number of days in *month* of *year*.

    Args:
        month: Month number 1-12.  Anything else is treated as unknown.
        year: Full year, or None when not yet entered.

    Returns:
        28, 29, 30 or 31.  An unknown month allows 31 days; February of an
        unknown year allows 29.
    """
    if month is None or not 1 <= month <= 12:
        return 31
    if year is None or not 1 <= year <= 9999:
        year = _ANY_LEAP_YEAR
    return monthrange(year, month)[1]


def expand_year(year: str, pivot: int = DEFAULT_CENTURY_PIVOT) -> str:
    """Expand a two- or three-digit year buffer to four digits.

    The last two digits decide the century: values below *pivot* land in
    the 2000s, the others in the 1900s.  With the default pivot ``"24"``
    becomes ``"2024"`` and ``"85"`` becomes ``"1985"``.

    Args:
        year: A buffer of two or three digits.  Other lengths are returned
            unchanged.
        pivot: First two-digit value mapped to the 1900s (0-99).

    Returns:
        The four-digit year string.
    """
    if not 2 <= len(year) <= 3:
        return year
    short = int(year) % 100
    century = 2000 if short < pivot else 1900
    return str(century + short)


def compose_date(segments: DateSegments) -> date | None:
    """Build a date from the segment buffers.

    Returns:
        The composed date, or None when a buffer is empty, the year is not
        four digits, or the values do not name a real calendar day (for
        example February 31).
    """
    if len(segments.year) != 4 or not segments.month or not segments.date:
        return None
    try:
        return date(int(segments.year), int(segments.month), int(segments.date))
    except ValueError:
        return None


def candidate_date(segments: DateSegments) -> date | None:
    """Build the date a range check compares against the bounds.

    Unlike ``compose_date`` this is lenient: an empty date or month counts
    as 1 and a day past the end of its month rolls over into the next one,
    so February 31 2019 becomes March 3 2019.

    Returns:
        The rolled-over date, or None when the year is empty or outside
        1-9999.
    """
    year = to_int(segments.year)
    if year is None or not 1 <= year <= 9999:
        return None
    month = to_int(segments.month) or 1
    day = to_int(segments.date) or 1
    return date(year, min(month, 12), 1) + timedelta(days=min(day, 31) - 1)


def date_in_range(
    value: date,
    minimum: date | None = None,
    maximum: date | None = None,
) -> bool:
    """Return True when *value* lies within the inclusive bounds."""
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True


def segments_from_date(value: date | None) -> DateSegments:
    """Split a date into zero-padded segment buffers.

    Returns:
        Segments such as ``DateSegments("05", "03", "2024")``, or empty
        segments when *value* is None.
    """
    if value is None:
        return DateSegments.empty()
    return DateSegments(
        date=f"{value.day:02d}",
        month=f"{value.month:02d}",
        year=str(value.year),
    )


def parse_iso_date(text: str) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If the text is not a valid ISO calendar date.
    """
    stripped = text.strip()
    if not _ISO_DATE_RE.match(stripped):
        raise ValueError(f"expected YYYY-MM-DD, got {text!r}")
    return date.fromisoformat(stripped)
