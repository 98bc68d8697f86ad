"""Segmented day/month/year date entry for Textual applications."""

from __future__ import annotations

from textual_datefield.controller import DateEntryController, FocusController
from textual_datefield.models import (
    BlurOutcome,
    DateSegments,
    FieldState,
    SegmentOrder,
    SegmentRole,
    SubmitGuard,
)

__all__ = [
    "BlurOutcome",
    "DateEntryController",
    "DateSegments",
    "FieldState",
    "FocusController",
    "SegmentOrder",
    "SegmentRole",
    "SubmitGuard",
]
