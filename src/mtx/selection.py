"""Selection model for Visual mode."""

from __future__ import annotations

from typing import Tuple

from mtx.buffer import Buffer, Position, SelectedText


def begin(pos: Position) -> SelectedText:
    return SelectedText(start=pos.copy(), end=pos.copy())


def update(pos: Position, buffer: Buffer, selection: SelectedText) -> None:
    """Move the live endpoint to ``pos``.

    An endpoint always sits on a character: a column at or past the end of
    the line is pulled back to the last grapheme.
    """

    length = buffer.row_length(pos.y)
    if length is None:
        return
    selection.end = Position(min(pos.x, max(length - 1, 0)), pos.y)


def normalize(selection: SelectedText) -> Tuple[Position, Position]:
    start, end = selection.start, selection.end
    if end < start:
        start, end = end, start
    return start.copy(), end.copy()


def swap(selection: SelectedText) -> None:
    selection.start, selection.end = selection.end, selection.start


__all__ = ["begin", "update", "normalize", "swap"]
