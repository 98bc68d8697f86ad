"""Tests for logging configuration."""

from __future__ import annotations

import logging

import pytest
from textual.logging import TextualHandler

from textual_datefield.logging import configure_logging
from textual_datefield.models import SegmentRole


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_textual_handler(self, restore_root_logger):
        configure_logging(level=logging.DEBUG, force=True)
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert any(isinstance(h, TextualHandler) for h in root.handlers)

    def test_controller_logs_submission(self, caplog, make_controller):
        controller = make_controller()
        controller.change(SegmentRole.MONTH, "03")
        controller.change(SegmentRole.DATE, "05")
        controller.change(SegmentRole.YEAR, "2024")
        with caplog.at_level(logging.INFO, logger="textual_datefield.controller"):
            controller.blur()
        assert "Submitting date 2024-03-05" in caplog.text
