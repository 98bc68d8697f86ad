"""Three-segment date entry widget."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Input

from textual_datefield.dates import DEFAULT_CENTURY_PIVOT
from textual_datefield.controller import DateEntryController
from textual_datefield.models import (
    BlurOutcome,
    DateSegments,
    FieldState,
    SegmentOrder,
    SegmentRole,
    SubmitGuard,
)
from textual_datefield.widgets.segment_input import SegmentInput


class DateField(Widget):
    """A date entry made of separate month, date and year inputs.

    Focus moves to the next segment as soon as one is full and leaves the
    field after the last one.  Whenever a segment loses focus the buffers
    are normalized and, if they form a date, it is validated against the
    optional bounds and reported with ``DateField.Submitted`` or
    ``DateField.RangeError``.
    """

    DEFAULT_CSS = """
    DateField {
        height: auto;
        width: auto;
    }
    DateField > Horizontal {
        height: auto;
        width: auto;
    }
    DateField SegmentInput {
        width: 9;
    }
    DateField SegmentInput.segment-year {
        width: 10;
    }
    """

    value: reactive[date | None] = reactive(None, init=False, always_update=True)

    class Submitted(Message):
        """Posted when a blur produces a valid date within the bounds."""

        def __init__(self, date_field: DateField, value: date) -> None:
            super().__init__()
            self.date_field = date_field
            self.value = value

        @property
        def control(self) -> DateField:
            """The date field that produced the date."""
            return self.date_field

    class RangeError(Message):
        """Posted when a blur produces a date outside the bounds."""

        def __init__(self, date_field: DateField) -> None:
            super().__init__()
            self.date_field = date_field

        @property
        def control(self) -> DateField:
            """The date field whose segments were cleared."""
            return self.date_field

    def __init__(
        self,
        order: SegmentOrder = SegmentOrder.MDY,
        value: date | None = None,
        default_value: date | None = None,
        minimum_date: date | None = None,
        maximum_date: date | None = None,
        auto_focus: bool = False,
        editable: bool = True,
        on_submit: Callable[[date], None] | None = None,
        handle_errors: Callable[[], None] | None = None,
        submit_guard: SubmitGuard = SubmitGuard.LAST_SEGMENT,
        century_pivot: int = DEFAULT_CENTURY_PIVOT,
        label_date: str = "Date",
        label_month: str = "Month",
        label_year: str = "Year",
        clock: Callable[[], date] = date.today,
        **kwargs,
    ) -> None:
        """Initialize the date field.

        Args:
            order: Segment layout, month-date-year or year-month-date.
            value: Externally controlled date; later changes go through
                the ``value`` reactive.
            default_value: Initial date when no ``value`` is given.
            minimum_date: Inclusive lower bound, if any.
            maximum_date: Inclusive upper bound, if any.
            auto_focus: Focus the first segment when mounted.
            editable: When False every segment is disabled.
            on_submit: Called with each submitted date.
            handle_errors: Called when a date falls outside the bounds.
            submit_guard: Which segments must hold digits before a blur acts.
            century_pivot: Pivot for expanding two- and three-digit years.
            label_date: Placeholder of the date segment.
            label_month: Placeholder of the month segment.
            label_year: Placeholder of the year segment.
            clock: Source of today's date.
        """
        super().__init__(**kwargs)
        self.auto_focus = auto_focus
        self.editable = editable
        self._on_submit = on_submit
        self._handle_errors = handle_errors
        self._labels = {
            SegmentRole.DATE: label_date,
            SegmentRole.MONTH: label_month,
            SegmentRole.YEAR: label_year,
        }
        self._inputs: dict[SegmentRole, SegmentInput] = {}
        self.controller = DateEntryController(
            order=order,
            focus=self,
            default_value=value if value is not None else default_value,
            minimum_date=minimum_date,
            maximum_date=maximum_date,
            on_submit=self._submitted,
            handle_errors=self._range_error,
            submit_guard=submit_guard,
            century_pivot=century_pivot,
            clock=clock,
        )
        self.set_reactive(DateField.value, value)

    @property
    def order(self) -> SegmentOrder:
        """The segment order of this field."""
        return self.controller.order

    @property
    def segments(self) -> DateSegments:
        """The current segment buffers."""
        return self.controller.segments

    @property
    def state(self) -> FieldState:
        """The coarse state of the field."""
        return self.controller.state

    def compose(self) -> ComposeResult:
        """Create one input per segment, in field order."""
        with Horizontal():
            for role in self.order.roles:
                segment_input = SegmentInput(
                    role,
                    value=self.segments.get(role),
                    placeholder=self._labels[role],
                    classes=f"segment segment-{role.value}",
                    disabled=not self.editable,
                )
                self._inputs[role] = segment_input
                yield segment_input

    def on_mount(self) -> None:
        """Focus the first segment when requested."""
        if self.auto_focus and self.editable:
            self.focus_segment(self.order.first)

    def segment_input(self, role: SegmentRole) -> SegmentInput:
        """Return the input widget for *role*."""
        return self._inputs[role]

    # FocusController

    def focus_segment(self, role: SegmentRole) -> None:
        """Move focus to the input for *role*."""
        self._inputs[role].focus()

    def dismiss(self) -> None:
        """Drop focus from the field, which blurs the active segment."""
        self.screen.set_focus(None)

    # Event handlers

    @on(Input.Changed, ".segment")
    def _segment_changed(self, event: Input.Changed) -> None:
        """Feed typed or pasted text into the controller."""
        event.stop()
        role = event.input.role
        # Superseded by a later keystroke or write-back.
        if event.value != event.input.value:
            return
        # Values written back by _sync_inputs arrive here too.
        if event.value == self.segments.get(role):
            return
        self.controller.change(role, event.value)
        self._sync_inputs()

    @on(Input.Submitted, ".segment")
    def _segment_submitted(self, event: Input.Submitted) -> None:
        """Return key moves on to the next segment."""
        event.stop()
        self.controller.advance(event.input.role)

    def on_segment_input_left(self, event: SegmentInput.Left) -> None:
        """Normalize and validate whenever a segment loses focus."""
        event.stop()
        outcome = self.controller.blur()
        if outcome is not BlurOutcome.INCOMPLETE:
            self._sync_inputs()

    def watch_value(self, value: date | None) -> None:
        """Adopt a new externally controlled date."""
        if self.controller.sync_value(value):
            self._sync_inputs()

    def _sync_inputs(self) -> None:
        """Write controller buffers into any input that differs."""
        for role, segment_input in self._inputs.items():
            text = self.segments.get(role)
            if segment_input.value != text:
                segment_input.value = text

    def _submitted(self, value: date) -> None:
        self.post_message(self.Submitted(self, value))
        if self._on_submit is not None:
            self._on_submit(value)

    def _range_error(self) -> None:
        self.post_message(self.RangeError(self))
        if self._handle_errors is not None:
            self._handle_errors()
