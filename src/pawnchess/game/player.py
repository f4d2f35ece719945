"""Player participant."""

from __future__ import annotations

from pawnchess.core.enums import Color


class Player:
    """A named human participant bound to one color."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Player({self._color.name}, {self._name!r})"
