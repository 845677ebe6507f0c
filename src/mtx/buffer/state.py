"""Position and selection value types addressed in grapheme columns."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(slots=True, eq=False)
class Position:
    """Mutable ``(x, y)`` location; ``y`` is a line index, ``x`` a grapheme index.

    Positions compare row-major: first by ``y``, then by ``x``.
    """

    x: int = 0
    y: int = 0

    @property
    def key(self) -> tuple[int, int]:
        return (self.y, self.x)

    def copy(self) -> "Position":
        return Position(self.x, self.y)

    def set(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: "Position") -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.key < other.key


@dataclass(slots=True)
class SelectedText:
    """Drag-selected range; ``start`` is the anchor, ``end`` the live endpoint.

    The endpoints are not kept ordered, see ``mtx.selection.normalize``.
    """

    start: Position
    end: Position


__all__ = ["Position", "SelectedText"]
