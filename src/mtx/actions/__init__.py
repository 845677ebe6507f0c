"""Editing verbs invoked by keymap bindings as ``action(session, match)``."""

from .command import cancel_command_line, submit_command_line
from .core import (
    enter_command_mode,
    enter_insert_mode,
    enter_visual_mode,
    exit_to_normal_mode,
    insert_after_cursor,
    insert_at_line_end,
    insert_at_line_start,
    noop_action,
    open_line_above,
    open_line_below,
)
from .edit import (
    backspace,
    delete_char,
    delete_forward,
    delete_line,
    delete_to_end_of_line,
    insert_newline,
    insert_tab,
    insert_text,
    join_lines,
)
from .visual import delete_selection, swap_anchor

__all__ = [
    "backspace",
    "cancel_command_line",
    "delete_char",
    "delete_forward",
    "delete_line",
    "delete_selection",
    "delete_to_end_of_line",
    "enter_command_mode",
    "enter_insert_mode",
    "enter_visual_mode",
    "exit_to_normal_mode",
    "insert_after_cursor",
    "insert_at_line_end",
    "insert_at_line_start",
    "insert_newline",
    "insert_tab",
    "insert_text",
    "join_lines",
    "noop_action",
    "open_line_above",
    "open_line_below",
    "submit_command_line",
    "swap_anchor",
]
