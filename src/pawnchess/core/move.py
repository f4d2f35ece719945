"""Move value object (coordinate notation)."""

from __future__ import annotations

from dataclasses import dataclass

from pawnchess.core.enums import MoveKind
from pawnchess.core.types import Position


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a classified, legal pawn move."""

    from_pos: Position
    to_pos: Position
    kind: MoveKind = MoveKind.SINGLE_STEP
    captured_pos: Position | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_pos}{self.to_pos}"

    @property
    def is_capture(self) -> bool:
        return self.kind in (MoveKind.CAPTURE, MoveKind.EN_PASSANT)
