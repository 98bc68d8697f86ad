"""Single-segment numeric input used inside a DateField."""

from __future__ import annotations

from textual.events import Blur
from textual.message import Message
from textual.widgets import Input

from textual_datefield.models import SegmentRole


class SegmentInput(Input):
    """An Input that only accepts digits for one date segment.

    Digit keys are inserted normally; any other printable character is
    rejected.  The maximum length comes from the segment role, and a
    ``SegmentInput.Left`` message is posted whenever the input loses focus.
    """

    # Keys that should pass through to the default Input handler.
    _PASSTHROUGH_KEYS = frozenset(
        {
            "backspace",
            "delete",
            "left",
            "right",
            "home",
            "end",
            "tab",
            "shift+tab",
            "escape",
            "enter",
            "up",
            "down",
        }
    )

    class Left(Message):
        """Posted when a segment input loses focus."""

        def __init__(self, segment_input: SegmentInput) -> None:
            super().__init__()
            self.segment_input = segment_input

        @property
        def control(self) -> SegmentInput:
            """The segment input that lost focus."""
            return self.segment_input

    def __init__(self, role: SegmentRole, **kwargs) -> None:
        """Initialize the input for one segment.

        Args:
            role: The date segment edited by this input.
        """
        kwargs.setdefault("max_length", role.max_length)
        kwargs.setdefault("placeholder", role.value.capitalize())
        super().__init__(**kwargs)
        self.role = role

    async def _on_key(self, event) -> None:
        """Intercept keys: allow digits and navigation, reject everything else."""
        if event.key in self._PASSTHROUGH_KEYS:
            await super()._on_key(event)
            return

        char = event.character
        if char and char.isascii() and char.isdigit():
            await super()._on_key(event)
            return

        event.prevent_default()
        event.stop()

    def check_consume_key(self, key: str, character: str | None) -> bool:
        """Claim only digit keys, so app bindings such as `q` still fire."""
        return character is not None and character.isascii() and character.isdigit()

    def on_blur(self, event: Blur) -> None:
        """Report focus loss to the owning field."""
        self.post_message(self.Left(self))
