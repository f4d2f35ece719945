"""Console settings."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from pawnchess.console.i18n import LANGUAGES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class ConsoleSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    show_coordinates: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_args(cls, namespace: argparse.Namespace) -> ConsoleSettings:
        return cls(
            language=namespace.language,
            show_coordinates=not namespace.no_coordinates,
            log_level=namespace.log_level,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pawnchess",
        description="Two-player pawns-only chess in the terminal.",
    )
    parser.add_argument(
        "--language",
        choices=LANGUAGES,
        default=ConsoleSettings.language,
        help="language of prompts and messages",
    )
    parser.add_argument(
        "--no-coordinates",
        action="store_true",
        help="hide rank and file labels around the board",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=ConsoleSettings.log_level,
        help="diagnostic log level (logs go to stderr)",
    )
    return parser
