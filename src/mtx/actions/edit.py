"""Buffer-mutating commands for Normal and Insert mode.

Each command leaves horizontal repair to the clamp the mode manager runs
after it.
"""

from __future__ import annotations

import grapheme

from mtx import cursor
from mtx.buffer import Position
from mtx.cursor import MoveOptions
from mtx.modes.base_types import ModeResult
from mtx.session import EditorSession

_BACKSPACE_OPTIONS = MoveOptions(allow_wrap=True, allow_eol=True)


def _edited(status: str) -> ModeResult:
    return ModeResult(consumed=True, status=status)


def delete_char(session: EditorSession, match) -> ModeResult:
    """``x``: remove the character under the block cursor."""

    del match
    if not session.buffer.row_length(session.cursor.y):
        return ModeResult(consumed=True, status="noop")
    session.buffer.delete_char(session.cursor)
    return _edited("delete_char")


def delete_line(session: EditorSession, match) -> ModeResult:
    del match
    if session.buffer.delete_line(session.cursor.y) is None:
        return ModeResult(consumed=True, status="noop")
    return _edited("delete_line")


def delete_to_end_of_line(session: EditorSession, match) -> ModeResult:
    del match
    session.buffer.delete_to_end_of_line(session.cursor)
    return _edited("delete_to_end_of_line")


def join_lines(session: EditorSession, match) -> ModeResult:
    del match
    session.buffer.join_with_next(session.cursor)
    return _edited("join_lines")


def insert_text(session: EditorSession, text: str) -> ModeResult:
    """Insert ``text`` at the caret, one grapheme at a time."""

    for cluster in grapheme.graphemes(text):
        if cluster in ("\n", "\r", "\r\n"):
            _break_line(session)
            continue
        session.buffer.insert_char(session.cursor, cluster)
        session.cursor.x += 1
    return _edited("insert_text")


def insert_tab(session: EditorSession, match) -> ModeResult:
    del match
    return insert_text(session, "\t")


def insert_newline(session: EditorSession, match) -> ModeResult:
    del match
    _break_line(session)
    return _edited("insert_newline")


def backspace(session: EditorSession, match) -> ModeResult:
    del match
    position = session.cursor
    if position.x == 0 and position.y == 0:
        return ModeResult(consumed=True, status="noop")
    cursor.move_left(position, session.buffer, _BACKSPACE_OPTIONS)
    session.buffer.delete_char(position)
    return _edited("backspace")


def delete_forward(session: EditorSession, match) -> ModeResult:
    del match
    session.buffer.delete_char(session.cursor)
    return _edited("delete_forward")


def open_line_below(session: EditorSession) -> None:
    buffer = session.buffer
    length = buffer.row_length(session.cursor.y)
    if length is None:
        buffer.insert_newline(Position(0, len(buffer)))
        session.cursor.set(0, max(len(buffer) - 1, 0))
        return
    buffer.insert_newline(Position(length, session.cursor.y))
    session.cursor.set(0, session.cursor.y + 1)


def open_line_above(session: EditorSession) -> None:
    buffer = session.buffer
    if buffer.row(session.cursor.y) is None:
        open_line_below(session)
        return
    buffer.insert_newline(Position(0, session.cursor.y))
    session.cursor.x = 0


def _break_line(session: EditorSession) -> None:
    buffer = session.buffer
    if session.cursor.y >= len(buffer):
        buffer.insert_newline(Position(0, len(buffer)))
        session.cursor.set(0, len(buffer) - 1)
    buffer.insert_newline(session.cursor)
    session.cursor.set(0, session.cursor.y + 1)


__all__ = [
    "backspace",
    "delete_char",
    "delete_forward",
    "delete_line",
    "delete_to_end_of_line",
    "insert_newline",
    "insert_tab",
    "insert_text",
    "join_lines",
    "open_line_above",
    "open_line_below",
]
