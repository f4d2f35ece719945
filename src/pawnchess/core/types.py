"""Position value type and coordinate helpers.

Columns are the letters ``a``–``h`` and rows the integers 1–8, exactly as
they appear in move notation::

    Position("e", 2).advance(2)  # -> e4
"""

from __future__ import annotations

from dataclasses import dataclass

COLUMNS = "abcdefgh"
ROWS = range(1, 9)


@dataclass(frozen=True, slots=True)
class Position:
    """A square on the 8x8 grid.

    The type does not validate its own bounds: arithmetic such as
    :meth:`advance` may produce off-board values, and callers check
    :attr:`is_on_board` before using the result.
    """

    column: str
    row: int

    def advance(self, delta_rows: int) -> Position:
        """Same column, row shifted by *delta_rows* (no clamping)."""
        return Position(self.column, self.row + delta_rows)

    def shift(self, delta_columns: int) -> Position | None:
        """Neighbouring column on the same row, or ``None`` past a/h."""
        if len(self.column) != 1 or self.column not in COLUMNS:
            return None
        idx = COLUMNS.index(self.column)
        target = idx + delta_columns
        if not (0 <= target < len(COLUMNS)):
            return None
        return Position(COLUMNS[target], self.row)

    @property
    def is_on_board(self) -> bool:
        return (
            len(self.column) == 1
            and self.column in COLUMNS
            and self.row in ROWS
        )

    def __str__(self) -> str:
        return f"{self.column}{self.row}"


def parse_square(name: str) -> Position:
    """Parse square name, e.g. 'e4' → Position('e', 4)."""
    if len(name) != 2 or name[0] not in COLUMNS or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Position(name[0], int(name[1]))


def all_squares() -> list[Position]:
    """Every square, row 8 first, columns a–h within a row."""
    return [Position(col, row) for row in reversed(ROWS) for col in COLUMNS]
