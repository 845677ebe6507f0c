"""Cursor engine: pure position transforms over a read-only buffer."""

from .engine import (
    DEFAULT_OPTIONS,
    MoveOptions,
    clamp,
    move_down,
    move_left,
    move_right,
    move_to_document_end,
    move_to_document_start,
    move_to_line_end,
    move_to_line_start,
    move_up,
    page_down,
    page_up,
    scroll,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "MoveOptions",
    "clamp",
    "move_down",
    "move_left",
    "move_right",
    "move_to_document_end",
    "move_to_document_start",
    "move_to_line_end",
    "move_to_line_start",
    "move_up",
    "page_down",
    "page_up",
    "scroll",
]
