"""Console front end: prompts, board printing and settings."""

from pawnchess.console.i18n import LANGUAGES, Strings, set_language, t
from pawnchess.console.session import ConsoleSession
from pawnchess.console.settings import ConsoleSettings, build_parser

__all__ = [
    "LANGUAGES",
    "ConsoleSession",
    "ConsoleSettings",
    "Strings",
    "build_parser",
    "set_language",
    "t",
]
