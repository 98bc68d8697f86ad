"""Shared logging helpers for textual-datefield."""

from __future__ import annotations

import logging

from textual.logging import TextualHandler


def configure_logging(*, level: int = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger once, routing records to the Textual console.

    Records go through ``TextualHandler`` so they show up in ``textual console``
    rather than being printed over the running terminal UI.  Pass ``force=True``
    to reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(levelname)s [%(name)s] %(message)s",
        handlers=[TextualHandler()],
        force=force,
    )
