"""Entry point for textual-datefield."""

from textual_datefield.app import DateFieldApp
from textual_datefield.config import parse_args, resolve_settings
from textual_datefield.logging import configure_logging


def main() -> None:
    """Run the textual-datefield application."""
    args = parse_args()
    settings = resolve_settings(args)
    configure_logging(level=settings.log_level)
    app = DateFieldApp(settings=settings)
    app.run()


if __name__ == "__main__":
    main()
