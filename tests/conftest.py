"""Shared test fixtures."""

from __future__ import annotations

from datetime import date

import pytest

from textual_datefield.controller import DateEntryController
from textual_datefield.models import SegmentOrder, SegmentRole

TODAY = date(2026, 10, 19)


class RecordingFocus:
    """FocusController double that records every focus request."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def focus_segment(self, role: SegmentRole) -> None:
        self.calls.append(role.value)

    def dismiss(self) -> None:
        self.calls.append("dismiss")


@pytest.fixture
def clock():
    """A clock pinned to a fixed day."""
    return lambda: TODAY


@pytest.fixture
def focus() -> RecordingFocus:
    """A focus recorder."""
    return RecordingFocus()


@pytest.fixture
def submitted() -> list[date]:
    """Collects dates passed to on_submit."""
    return []


@pytest.fixture
def errors() -> list[bool]:
    """Collects handle_errors invocations."""
    return []


@pytest.fixture
def make_controller(focus, submitted, errors, clock):
    """Factory for controllers wired to the recording fixtures."""

    def _make(order: SegmentOrder = SegmentOrder.MDY, **kwargs) -> DateEntryController:
        kwargs.setdefault("focus", focus)
        kwargs.setdefault("on_submit", submitted.append)
        kwargs.setdefault("handle_errors", lambda: errors.append(True))
        kwargs.setdefault("clock", clock)
        return DateEntryController(order=order, **kwargs)

    return _make
