"""Configuration resolution for textual-datefield.

Priority order (highest to lowest):
1. CLI arguments (--order, --min, --max, ...)
2. DATEFIELD_ORDER / DATEFIELD_MIN / DATEFIELD_MAX environment variables
3. ~/.config/textual-datefield/config.toml
4. Built-in defaults
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import NoReturn

from textual_datefield.dates import DEFAULT_CENTURY_PIVOT, parse_iso_date
from textual_datefield.models import SegmentOrder, SubmitGuard

_CONFIG_PATH = Path.home() / ".config" / "textual-datefield" / "config.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class DateFieldSettings:
    """Resolved settings for the date field application."""

    order: SegmentOrder = SegmentOrder.MDY
    minimum_date: date | None = None
    maximum_date: date | None = None
    value: date | None = None
    century_pivot: int = DEFAULT_CENTURY_PIVOT
    submit_guard: SubmitGuard = SubmitGuard.LAST_SEGMENT
    log_level: int = logging.WARNING


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib

        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except Exception:
        return {}


def _fail(message: str) -> NoReturn:
    """Print *message* to stderr and exit with status 1."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace with 'order', 'min', 'max', 'value', 'pivot',
        'any_segment' and 'log_level' attributes.
    """
    parser = argparse.ArgumentParser(
        prog="textual-datefield",
        description="A segmented day/month/year date entry field for the terminal.",
    )
    parser.add_argument(
        "--order",
        choices=["mdy", "ymd"],
        help="Segment order: month-date-year or year-month-date.",
        default=None,
    )
    parser.add_argument("--min", help="Earliest accepted date (YYYY-MM-DD).", default=None)
    parser.add_argument("--max", help="Latest accepted date (YYYY-MM-DD).", default=None)
    parser.add_argument("--value", help="Initial date (YYYY-MM-DD).", default=None)
    parser.add_argument(
        "--pivot",
        type=int,
        help="Two-digit years below this value expand to 20YY, others to 19YY.",
        default=None,
    )
    parser.add_argument(
        "--any-segment",
        action="store_true",
        help="Validate on blur as soon as any segment holds digits.",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.lower() for level in _LOG_LEVELS],
        help="Logging level for the Textual console.",
        default=None,
    )
    return parser.parse_args(argv)


def _resolve_date(label: str, *candidates: str | None) -> date | None:
    """Parse the first non-empty candidate as an ISO date.

    Raises:
        SystemExit: If the chosen candidate is not a valid date.
    """
    for candidate in candidates:
        if candidate:
            try:
                return parse_iso_date(str(candidate))
            except ValueError:
                _fail(f"invalid {label}: {candidate!r} (expected YYYY-MM-DD)")
    return None


def resolve_settings(args: argparse.Namespace | None = None) -> DateFieldSettings:
    """Resolve settings using the priority chain.

    Args:
        args: Parsed CLI arguments, or None to use only env/config/defaults.

    Returns:
        The resolved settings.

    Raises:
        SystemExit: If any value is malformed or the bounds are inverted.
    """
    config = _load_config_dict()
    cli = vars(args) if args is not None else {}

    order_name = (
        cli.get("order")
        or os.environ.get("DATEFIELD_ORDER")
        or config.get("order")
        or SegmentOrder.MDY.name
    )
    try:
        order = SegmentOrder.from_name(str(order_name))
    except ValueError:
        _fail(f"unknown segment order: {order_name!r} (expected 'mdy' or 'ymd')")

    minimum = _resolve_date(
        "minimum date",
        cli.get("min"),
        os.environ.get("DATEFIELD_MIN"),
        config.get("minimum_date"),
    )
    maximum = _resolve_date(
        "maximum date",
        cli.get("max"),
        os.environ.get("DATEFIELD_MAX"),
        config.get("maximum_date"),
    )
    if minimum is not None and maximum is not None and minimum > maximum:
        _fail(f"minimum date {minimum.isoformat()} is after maximum date {maximum.isoformat()}")
    value = _resolve_date("initial date", cli.get("value"))

    pivot = cli.get("pivot")
    if pivot is None:
        pivot = config.get("century_pivot", DEFAULT_CENTURY_PIVOT)
    if not isinstance(pivot, int) or not 0 <= pivot <= 99:
        _fail(f"century pivot must be an integer between 0 and 99, got {pivot!r}")

    if cli.get("any_segment"):
        guard = SubmitGuard.ANY_SEGMENT
    else:
        try:
            guard = SubmitGuard(str(config.get("submit_guard", SubmitGuard.LAST_SEGMENT.value)))
        except ValueError:
            _fail(f"unknown submit_guard: {config.get('submit_guard')!r} (expected 'last' or 'any')")

    level_name = str(cli.get("log_level") or config.get("log_level") or "warning").upper()
    if level_name not in _LOG_LEVELS:
        _fail(f"unknown log level: {level_name.lower()!r}")

    return DateFieldSettings(
        order=order,
        minimum_date=minimum,
        maximum_date=maximum,
        value=value,
        century_pivot=pivot,
        submit_guard=guard,
        log_level=getattr(logging, level_name),
    )
