"""Position transforms: movement, paging, scrolling, and mode clamping.

Every function mutates the ``Position`` it receives and only reads the
buffer. Horizontal overflow left behind by vertical moves is repaired by the
next ``clamp`` call.
"""

from __future__ import annotations

from dataclasses import dataclass

from mtx.buffer import Buffer, Position
from mtx.modes.machine import Mode, max_column


@dataclass(frozen=True, slots=True)
class MoveOptions:
    """Horizontal movement policy.

    ``allow_wrap`` lets left/right cross line boundaries; ``allow_eol`` lets
    the cursor rest one column past the last character.
    """

    allow_wrap: bool = False
    allow_eol: bool = False


DEFAULT_OPTIONS = MoveOptions()


def _line_end(length: int, allow_eol: bool) -> int:
    return length if allow_eol else max(length - 1, 0)


def clamp(pos: Position, buffer: Buffer, mode: Mode) -> None:
    """Force ``pos`` back into the valid range for ``mode``.

    Must run after every buffer mutation. Applying it twice is the same as
    applying it once.
    """

    if mode is Mode.COMMAND:
        return
    count = len(buffer)
    if count == 0:
        pos.set(0, 0)
        return

    if pos.y >= count:
        pos.y = count - 1
        length = buffer.row_length(pos.y) or 0
        pos.x = length if mode is Mode.VISUAL else max(length - 1, 0)
        return

    pos.y = max(pos.y, 0)
    length = buffer.row_length(pos.y) or 0
    limit = max_column(mode, length)
    if limit is not None and pos.x > limit:
        pos.x = limit
    pos.x = max(pos.x, 0)


def move_left(
    pos: Position, buffer: Buffer, options: MoveOptions = DEFAULT_OPTIONS
) -> None:
    line = buffer.row(pos.y)
    if line is None:
        return
    width = line.length()
    if pos.x == 0 and pos.y > 0 and options.allow_wrap:
        pos.y -= 1
        pos.x = _line_end(buffer.row_length(pos.y) or 0, options.allow_eol)
    elif pos.x > width and width > 0:
        # stale column left over from a longer line
        pos.x = width - 1
    else:
        pos.x = max(pos.x - 1, 0)


def move_right(
    pos: Position, buffer: Buffer, options: MoveOptions = DEFAULT_OPTIONS
) -> None:
    line = buffer.row(pos.y)
    if line is None:
        return
    width = line.length()
    last = width - 1
    if pos.x < last:
        pos.x += 1
    elif pos.x == last and options.allow_eol:
        pos.x += 1
    elif (
        options.allow_wrap
        and pos.x >= _line_end(width, options.allow_eol)
        and pos.y < len(buffer) - 1
    ):
        pos.set(0, pos.y + 1)


def move_up(pos: Position, buffer: Buffer, n: int = 1) -> None:
    del buffer
    pos.y = max(pos.y - n, 0)


def move_down(pos: Position, buffer: Buffer, n: int = 1) -> None:
    count = len(buffer)
    if pos.y + n < count:
        pos.y += n
    else:
        pos.y = max(count - 1, 0)


def move_to_line_start(pos: Position, buffer: Buffer | None = None) -> None:
    del buffer
    pos.x = 0


def move_to_line_end(pos: Position, buffer: Buffer, allow_eol: bool = False) -> None:
    length = buffer.row_length(pos.y)
    if length is None:
        return
    pos.x = _line_end(length, allow_eol)


def move_to_document_start(pos: Position, buffer: Buffer) -> None:
    move_up(pos, buffer, pos.y)


def move_to_document_end(pos: Position, buffer: Buffer) -> None:
    pos.y = max(len(buffer) - 1, 0)


def page_up(
    pos: Position, offset: Position, buffer: Buffer, viewport_height: int
) -> None:
    del buffer
    pos.y = max(pos.y - viewport_height, 0)
    offset.y = max(offset.y - viewport_height, 0)


def page_down(
    pos: Position, offset: Position, buffer: Buffer, viewport_height: int
) -> None:
    count = len(buffer)
    if count == 0:
        return
    if pos.y + viewport_height < count:
        pos.y += viewport_height
        offset.y += viewport_height
    else:
        offset.y += max(count - pos.y - 1, 0)
        pos.y = count - 1


def scroll(pos: Position, offset: Position, width: int, height: int) -> None:
    """Shift ``offset`` so that ``pos`` is inside a ``width`` x ``height`` view."""

    if pos.y < offset.y:
        offset.y = pos.y
    elif height > 0 and pos.y >= offset.y + height:
        offset.y = pos.y - height + 1
    if pos.x < offset.x:
        offset.x = pos.x
    elif width > 0 and pos.x >= offset.x + width:
        offset.x = pos.x - width + 1


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
