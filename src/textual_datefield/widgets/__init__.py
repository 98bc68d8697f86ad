"""Textual widgets for segmented date entry."""

from __future__ import annotations

from textual_datefield.widgets.date_field import DateField
from textual_datefield.widgets.segment_input import SegmentInput

__all__ = ["DateField", "SegmentInput"]
