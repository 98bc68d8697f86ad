"""Integration tests for the demo Textual app."""

from __future__ import annotations

from datetime import date

import pytest

from textual_datefield import __main__ as entry
from textual_datefield.app import DateFieldApp
from textual_datefield.config import DateFieldSettings
from textual_datefield.models import SegmentOrder, SegmentRole
from textual_datefield.widgets.date_field import DateField


@pytest.fixture
def bounded_settings() -> DateFieldSettings:
    """Settings with a one-year range in year-month-date order."""
    return DateFieldSettings(
        order=SegmentOrder.YMD,
        minimum_date=date(2020, 1, 1),
        maximum_date=date(2020, 12, 31),
    )


class TestAppStartup:
    """Tests for application startup."""

    async def test_first_segment_focused(self, bounded_settings: DateFieldSettings):
        app = DateFieldApp(settings=bounded_settings)
        async with app.run_test() as pilot:
            await pilot.pause()
            field = app.query_one("#date-field", DateField)
            assert app.focused is field.segment_input(SegmentRole.YEAR)

    async def test_status_describes_range(self, bounded_settings: DateFieldSettings):
        app = DateFieldApp(settings=bounded_settings)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.status_text == "Accepted range: 2020-01-01 to 2020-12-31"

    async def test_default_settings(self):
        app = DateFieldApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            field = app.query_one("#date-field", DateField)
            assert field.order is SegmentOrder.MDY
            assert app.status_text == "Any date is accepted."

    async def test_initial_value_shown(self):
        app = DateFieldApp(settings=DateFieldSettings(value=date(2024, 3, 5)))
        async with app.run_test() as pilot:
            await pilot.pause()
            field = app.query_one("#date-field", DateField)
            assert field.segment_input(SegmentRole.MONTH).value == "03"


class TestAppReports:
    """Tests for the status line after submissions and range errors."""

    async def test_valid_date_reported(self, bounded_settings: DateFieldSettings):
        app = DateFieldApp(settings=bounded_settings)
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("2", "0", "2", "0")
            await pilot.pause()
            await pilot.press("0", "2")
            await pilot.pause()
            await pilot.press("2", "9")
            await pilot.pause()
            assert app.submitted == [date(2020, 2, 29)]
            assert app.status_text == "Submitted: 2020-02-29"

    async def test_out_of_range_reported(self, bounded_settings: DateFieldSettings):
        app = DateFieldApp(settings=bounded_settings)
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("2", "0", "1", "9")
            await pilot.pause()
            await pilot.press("0", "6")
            await pilot.pause()
            await pilot.press("1", "5")
            await pilot.pause()
            assert app.submitted == []
            assert app.status_text.startswith("Out of range.")
            field = app.query_one("#date-field", DateField)
            assert field.segments.is_empty

    async def test_quit_binding(self):
        app = DateFieldApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("q")
            await pilot.pause()
            assert app.return_code == 0


class TestMain:
    """Tests for the console entry point."""

    def test_main_runs_app_with_resolved_settings(self, tmp_path, monkeypatch):
        monkeypatch.setattr("textual_datefield.config._CONFIG_PATH", tmp_path / "config.toml")
        monkeypatch.delenv("DATEFIELD_ORDER", raising=False)
        monkeypatch.setattr("sys.argv", ["textual-datefield", "--order", "ymd"])
        monkeypatch.setattr(entry, "configure_logging", lambda **kwargs: None)
        launched: list[DateFieldApp] = []
        monkeypatch.setattr(DateFieldApp, "run", lambda self: launched.append(self))

        entry.main()

        assert len(launched) == 1
        assert launched[0].settings.order is SegmentOrder.YMD
