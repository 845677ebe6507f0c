"""Mode-changing commands shared across modes."""

from __future__ import annotations

from mtx.modes.base_types import ModeResult
from mtx.modes.machine import Mode
from mtx.session import EditorSession

from . import edit


def enter_insert_mode(session: EditorSession, match) -> ModeResult:
    del session, match
    return ModeResult(consumed=True, switch_to=Mode.INSERT, message="enter_insert")


def insert_after_cursor(session: EditorSession, match) -> ModeResult:
    del match
    if session.buffer.row_length(session.cursor.y):
        session.cursor.x += 1
    return ModeResult(consumed=True, switch_to=Mode.INSERT, message="enter_insert")


def insert_at_line_start(session: EditorSession, match) -> ModeResult:
    del match
    session.cursor.x = 0
    return ModeResult(consumed=True, switch_to=Mode.INSERT, message="enter_insert")


def insert_at_line_end(session: EditorSession, match) -> ModeResult:
    del match
    session.cursor.x = session.buffer.row_length(session.cursor.y) or 0
    return ModeResult(consumed=True, switch_to=Mode.INSERT, message="enter_insert")


def open_line_below(session: EditorSession, match) -> ModeResult:
    del match
    edit.open_line_below(session)
    return ModeResult(consumed=True, switch_to=Mode.INSERT, message="enter_insert")


def open_line_above(session: EditorSession, match) -> ModeResult:
    del match
    edit.open_line_above(session)
    return ModeResult(consumed=True, switch_to=Mode.INSERT, message="enter_insert")


def enter_visual_mode(session: EditorSession, match) -> ModeResult:
    del session, match
    return ModeResult(consumed=True, switch_to=Mode.VISUAL, message="enter_visual")


def enter_command_mode(session: EditorSession, match) -> ModeResult:
    del session, match
    return ModeResult(consumed=True, switch_to=Mode.COMMAND, message="enter_command")


def exit_to_normal_mode(session: EditorSession, match) -> ModeResult:
    del session, match
    return ModeResult(consumed=True, switch_to=Mode.NORMAL, message="exit_to_normal")


def noop_action(session: EditorSession, match) -> ModeResult:
    del session, match
    return ModeResult(consumed=True, status="noop")


__all__ = [
    "enter_insert_mode",
    "insert_after_cursor",
    "insert_at_line_start",
    "insert_at_line_end",
    "open_line_below",
    "open_line_above",
    "enter_visual_mode",
    "enter_command_mode",
    "exit_to_normal_mode",
    "noop_action",
]
