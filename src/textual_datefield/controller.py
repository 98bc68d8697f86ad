"""Segment state machine shared by every date field layout.

The controller owns one ``DateSegments`` value and moves it forward with
the pure transition functions defined here.  Focus changes go through a
``FocusController`` so the logic runs without any UI toolkit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import Protocol

from textual_datefield.dates import (
    DEFAULT_CENTURY_PIVOT,
    candidate_date,
    compose_date,
    date_in_range,
    days_in_month,
    expand_year,
    only_digits,
    segments_from_date,
    to_int,
)
from textual_datefield.models import (
    BlurOutcome,
    DateSegments,
    FieldState,
    SegmentOrder,
    SegmentRole,
    SubmitGuard,
)

logger = logging.getLogger(__name__)


class FocusController(Protocol):
    """Focus operations the controller needs from its presentation layer."""

    def focus_segment(self, role: SegmentRole) -> None:
        """Move input focus to the segment for *role*."""

    def dismiss(self) -> None:
        """Drop input focus from the whole field."""


def change_segment(segments: DateSegments, role: SegmentRole, text: str) -> DateSegments:
    """Apply raw text typed or pasted into one segment.

    Non-digits are stripped, date and month values above their maximum are
    replaced by the maximum itself, and the buffer is trimmed to the
    segment length.  A month change also clamps the date buffer to the
    number of days in the new month.

    Args:
        segments: Current segment buffers.
        role: The segment whose text changed.
        text: Raw text from the input, possibly containing non-digits.

    Returns:
        The updated segments.
    """
    digits = only_digits(text)
    max_value = role.max_value
    if max_value is not None and digits and int(digits) > max_value:
        digits = str(max_value)
    digits = digits[: role.max_length]

    updated = segments.replace(role, digits)
    if role is SegmentRole.MONTH:
        updated = _clamp_date_to_month(updated)
    return updated


def _clamp_date_to_month(segments: DateSegments) -> DateSegments:
    day = to_int(segments.date)
    if day is None:
        return segments
    limit = days_in_month(to_int(segments.month), to_int(segments.year))
    if day > limit:
        return segments.replace(SegmentRole.DATE, str(limit))
    return segments


def _pad_day_or_month(digits: str) -> str:
    if digits and int(digits) == 0:
        return "01"
    if len(digits) == 1:
        return digits.zfill(2)
    return digits


def normalize_segments(
    segments: DateSegments,
    current_year: int,
    pivot: int = DEFAULT_CENTURY_PIVOT,
) -> DateSegments:
    """Zero-pad date and month, default a zero year, and expand short years.

    Empty buffers are left empty.  Applying the function to its own output
    returns the same segments.

    Args:
        segments: The buffers to normalize.
        current_year: Year used when the year buffer is numerically zero.
        pivot: Century pivot passed to ``expand_year``.

    Returns:
        The normalized segments.
    """
    year = segments.year
    if year and int(year) == 0:
        year = str(current_year)
    year = expand_year(year, pivot)
    return DateSegments(
        date=_pad_day_or_month(segments.date),
        month=_pad_day_or_month(segments.month),
        year=year,
    )


class DateEntryController:
    """State machine for a three-segment date field.

    One instance serves both segment layouts; ``order`` decides which
    segment follows which and which one closes the field.
    """

    def __init__(
        self,
        order: SegmentOrder = SegmentOrder.MDY,
        focus: FocusController | None = None,
        default_value: date | None = None,
        minimum_date: date | None = None,
        maximum_date: date | None = None,
        on_submit: Callable[[date], None] | None = None,
        handle_errors: Callable[[], None] | None = None,
        submit_guard: SubmitGuard = SubmitGuard.LAST_SEGMENT,
        century_pivot: int = DEFAULT_CENTURY_PIVOT,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the controller.

        Args:
            order: Segment layout and traversal order.
            focus: Receiver of focus changes, or None to skip them.
            default_value: Date used to fill the initial segments.
            minimum_date: Inclusive lower bound, if any.
            maximum_date: Inclusive upper bound, if any.
            on_submit: Called with the composed date after a valid blur.
            handle_errors: Called when the composed date is out of range.
            submit_guard: Which segments must be filled before a blur acts.
            century_pivot: Pivot for expanding two- and three-digit years.
            clock: Source of today's date, used for the current year.

        Raises:
            ValueError: If the bounds are inverted or the pivot is not 0-99.
        """
        if minimum_date is not None and maximum_date is not None and minimum_date > maximum_date:
            raise ValueError(
                f"minimum date {minimum_date.isoformat()} is after "
                f"maximum date {maximum_date.isoformat()}"
            )
        if not 0 <= century_pivot <= 99:
            raise ValueError(f"century pivot must be between 0 and 99, got {century_pivot}")
        self.order = order
        self.focus = focus
        self.minimum_date = minimum_date
        self.maximum_date = maximum_date
        self.on_submit = on_submit
        self.handle_errors = handle_errors
        self.submit_guard = submit_guard
        self.century_pivot = century_pivot
        self.clock = clock
        self.segments = segments_from_date(default_value)
        self._synced_value = default_value
        self._range_error = False

    @property
    def state(self) -> FieldState:
        """The coarse state of the field."""
        if self._range_error:
            return FieldState.ERROR
        if self.segments.is_empty:
            return FieldState.EMPTY
        if self.segments.is_complete:
            if compose_date(self.segments) is None:
                return FieldState.COMPLETE_INVALID
            return FieldState.COMPLETE_VALID
        return FieldState.PARTIALLY_ENTERED

    @property
    def has_bounds(self) -> bool:
        """Whether a minimum or maximum date is configured."""
        return self.minimum_date is not None or self.maximum_date is not None

    def change(self, role: SegmentRole, text: str) -> DateSegments:
        """Handle new text in one segment and advance focus when it is full.

        Returns:
            The updated segments.
        """
        self.segments = change_segment(self.segments, role, text)
        self._range_error = False
        if len(self.segments.get(role)) == role.max_length:
            self.advance(role)
        return self.segments

    def advance(self, role: SegmentRole) -> None:
        """Move focus past *role*, dismissing it after the last segment."""
        if self.focus is None:
            return
        next_role = self.order.next_role(role)
        if next_role is None:
            self.focus.dismiss()
        else:
            self.focus.focus_segment(next_role)

    def _guard_passes(self, segments: DateSegments) -> bool:
        if self.submit_guard is SubmitGuard.ANY_SEGMENT:
            return not segments.is_empty
        return bool(segments.get(self.order.last))

    def blur(self) -> BlurOutcome:
        """Normalize the segments and submit or reject the composed date.

        With bounds configured, the range check runs on a lenient candidate
        date (see ``candidate_date``) even when the segments do not yet form
        a real date; only a real date in range is submitted.

        Returns:
            What happened: submission, range violation, a silently kept
            invalid date, or nothing when the guard did not pass.
        """
        current = normalize_segments(self.segments, self.clock().year, self.century_pivot)
        if not self._guard_passes(current):
            logger.debug("Blur ignored, %s segment is empty", self.order.last.value)
            return BlurOutcome.INCOMPLETE

        candidate = candidate_date(current)
        if (
            candidate is not None
            and self.has_bounds
            and not date_in_range(candidate, self.minimum_date, self.maximum_date)
        ):
            logger.warning(
                "Date %s outside range %s..%s, clearing segments",
                candidate.isoformat(),
                self.minimum_date,
                self.maximum_date,
            )
            self.segments = DateSegments.empty()
            self._range_error = True
            if self.handle_errors is not None:
                self.handle_errors()
            return BlurOutcome.RANGE_VIOLATION

        self.segments = current
        value = compose_date(current)
        if value is None:
            logger.debug("Segments %s do not form a calendar date", current)
            return BlurOutcome.CALENDAR_INVALID

        logger.info("Submitting date %s", value.isoformat())
        if self.on_submit is not None:
            self.on_submit(value)
        return BlurOutcome.SUBMITTED

    def sync_value(self, value: date | None) -> bool:
        """Adopt an externally supplied date.

        Re-sending the value that was last synchronized is a no-op, so
        edits in progress survive.

        Returns:
            True when the segments were replaced.
        """
        if value == self._synced_value:
            return False
        self._synced_value = value
        incoming = segments_from_date(value)
        if incoming == self.segments:
            return False
        logger.debug("Replacing segments %s with external value %s", self.segments, value)
        self.segments = incoming
        self._range_error = False
        return True
