"""Cursor motions bound in Normal, Insert, and Visual modes."""

from __future__ import annotations

from typing import Dict

from mtx import cursor
from mtx.cursor import DEFAULT_OPTIONS, MoveOptions
from mtx.modes.base_types import ModeResult
from mtx.modes.machine import Mode
from mtx.session import EditorSession

MOTION_OPTIONS: Dict[Mode, MoveOptions] = {
    Mode.NORMAL: MoveOptions(allow_wrap=False, allow_eol=False),
    Mode.INSERT: MoveOptions(allow_wrap=True, allow_eol=True),
    Mode.VISUAL: MoveOptions(allow_wrap=True, allow_eol=True),
}


def options_for(mode: Mode) -> MoveOptions:
    return MOTION_OPTIONS.get(mode, DEFAULT_OPTIONS)


def _moved() -> ModeResult:
    return ModeResult(consumed=True, status="motion")


def move_left(session: EditorSession, match) -> ModeResult:
    del match
    cursor.move_left(session.cursor, session.buffer, options_for(session.mode))
    return _moved()


def move_right(session: EditorSession, match) -> ModeResult:
    del match
    cursor.move_right(session.cursor, session.buffer, options_for(session.mode))
    return _moved()


def move_up(session: EditorSession, match) -> ModeResult:
    del match
    cursor.move_up(session.cursor, session.buffer)
    return _moved()


def move_down(session: EditorSession, match) -> ModeResult:
    del match
    cursor.move_down(session.cursor, session.buffer)
    return _moved()


def line_start(session: EditorSession, match) -> ModeResult:
    del match
    cursor.move_to_line_start(session.cursor, session.buffer)
    return _moved()


def line_end(session: EditorSession, match) -> ModeResult:
    del match
    allow_eol = options_for(session.mode).allow_eol
    cursor.move_to_line_end(session.cursor, session.buffer, allow_eol)
    return _moved()


def document_start(session: EditorSession, match) -> ModeResult:
    del match
    cursor.move_to_document_start(session.cursor, session.buffer)
    cursor.move_to_line_start(session.cursor)
    return _moved()


def document_end(session: EditorSession, match) -> ModeResult:
    del match
    cursor.move_to_document_end(session.cursor, session.buffer)
    return _moved()


def page_up(session: EditorSession, match) -> ModeResult:
    del match
    cursor.page_up(
        session.cursor, session.offset, session.buffer, session.viewport.height
    )
    return _moved()


def page_down(session: EditorSession, match) -> ModeResult:
    del match
    cursor.page_down(
        session.cursor, session.offset, session.buffer, session.viewport.height
    )
    return _moved()


__all__ = [
    "MOTION_OPTIONS",
    "options_for",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "line_start",
    "line_end",
    "document_start",
    "document_end",
    "page_up",
    "page_down",
]
