"""Application entry point."""

from __future__ import annotations

import logging
import sys

from pawnchess.console.session import ConsoleSession
from pawnchess.console.settings import ConsoleSettings, build_parser

_LOGGER = logging.getLogger(__name__)


def _configure_logging(settings: ConsoleSettings) -> None:
    """Send diagnostics to stderr so they never mix with the board."""
    logging.basicConfig(
        level=settings.log_level_value,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_application(argv: list[str] | None = None) -> int:
    """Parse arguments, run one console session and return an exit code."""
    args = build_parser().parse_args(argv)
    settings = ConsoleSettings.from_args(args)
    _configure_logging(settings)
    _LOGGER.debug("Settings: %s", settings)

    try:
        result = ConsoleSession(settings).run()
    except KeyboardInterrupt:
        _LOGGER.info("Interrupted")
        return 130
    _LOGGER.info("Session finished: %s", result.name)
    return 0


def main() -> None:
    """Launch the pawns-only chess console."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
