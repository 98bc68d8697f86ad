"""Demo Textual application hosting a single DateField."""

from __future__ import annotations

import logging
from datetime import date

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Static

from textual_datefield.config import DateFieldSettings
from textual_datefield.models import SegmentOrder
from textual_datefield.widgets.date_field import DateField

logger = logging.getLogger(__name__)

_TITLES: dict[SegmentOrder, str] = {
    SegmentOrder.MDY: "Enter a date (month / date / year)",
    SegmentOrder.YMD: "Enter a date (year / month / date)",
}

_FOOTER_TEXT = "\\[Tab] Next segment  \\[Enter] Advance  \\[q] Quit"


class DateFieldApp(App):
    """A small TUI that reports each date entered into a DateField."""

    TITLE = "textual-datefield"
    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
    ]

    def __init__(self, settings: DateFieldSettings | None = None) -> None:
        """Initialize the app.

        Args:
            settings: Resolved settings; defaults are used when omitted.
        """
        super().__init__()
        self.settings = settings or DateFieldSettings()
        self.status_text = self._bounds_text()
        self.submitted: list[date] = []

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        settings = self.settings
        with Vertical(id="field-dialog"):
            yield Static(_TITLES[settings.order], id="field-title")
            yield DateField(
                order=settings.order,
                default_value=settings.value,
                minimum_date=settings.minimum_date,
                maximum_date=settings.maximum_date,
                submit_guard=settings.submit_guard,
                century_pivot=settings.century_pivot,
                auto_focus=True,
                id="date-field",
            )
            yield Static(self.status_text, id="status-bar")
        yield Static(_FOOTER_TEXT, id="footer-bar")

    def _bounds_text(self) -> str:
        """Describe the configured range, or that any date is accepted."""
        low = self.settings.minimum_date
        high = self.settings.maximum_date
        if low is None and high is None:
            return "Any date is accepted."
        low_text = low.isoformat() if low else "..."
        high_text = high.isoformat() if high else "..."
        return f"Accepted range: {low_text} to {high_text}"

    def on_date_field_submitted(self, event: DateField.Submitted) -> None:
        """Show the submitted date."""
        self.submitted.append(event.value)
        self._show_status(f"Submitted: {event.value.isoformat()}", error=False)

    def on_date_field_range_error(self, event: DateField.RangeError) -> None:
        """Tell the user the date was rejected."""
        logger.info("Range error reported by %s", event.date_field.id)
        self._show_status(f"Out of range. {self._bounds_text()}", error=True)

    def _show_status(self, text: str, error: bool) -> None:
        """Update the status line below the field."""
        self.status_text = text
        status = self.query_one("#status-bar", Static)
        status.set_class(error, "-error")
        status.update(text)
