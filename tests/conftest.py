"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from pawnchess.game.controller import new_game
from pawnchess.game.state import GameState


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from pawnchess.console.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture
def state() -> GameState:
    """A fresh game from the standard layout, white to move."""
    return new_game()


@pytest.fixture
def scripted_input() -> Callable[[list[str]], Callable[[], str]]:
    """Build an ``input``-like callable that raises EOFError when drained."""

    def factory(lines: list[str]) -> Callable[[], str]:
        it = iter(lines)

        def read() -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        return read

    return factory
