"""Internationalisation strings for the console front end.

Usage::

    from pawnchess.console.i18n import t, set_language

    set_language("Russian")
    print(t().bye)                     # "До свидания!"
    print(t().wins.format(color="Белые"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    title: str
    first_player_prompt: str
    second_player_prompt: str
    turn_prompt: str  # "{name}'s turn:"

    invalid_input: str
    no_pawn_at: str  # "No {color} pawn at {square}"
    game_over: str

    wins: str  # "{color} Wins!"
    stalemate: str
    bye: str

    color_white: str
    color_black: str
    # Lowercase forms used inside sentences
    color_white_lower: str
    color_black_lower: str


_EN = Strings(
    title=" Pawns-Only Chess",
    first_player_prompt="First Player's name:",
    second_player_prompt="Second Player's name:",
    turn_prompt="{name}'s turn:",
    invalid_input="Invalid input",
    no_pawn_at="No {color} pawn at {square}",
    game_over="The game is over",
    wins="{color} Wins!",
    stalemate="Stalemate!",
    bye="Bye!",
    color_white="White",
    color_black="Black",
    color_white_lower="white",
    color_black_lower="black",
)

_RU = Strings(
    title=" Шахматы только пешками",
    first_player_prompt="Имя первого игрока:",
    second_player_prompt="Имя второго игрока:",
    turn_prompt="Ход игрока {name}:",
    invalid_input="Неверный ввод",
    no_pawn_at="Нет {color} пешки на {square}",
    game_over="Игра окончена",
    wins="{color} побеждают!",
    stalemate="Пат!",
    bye="До свидания!",
    color_white="Белые",
    color_black="Чёрные",
    color_white_lower="белой",
    color_black_lower="чёрной",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
