from __future__ import annotations

import pytest

from mtx import cursor
from mtx.buffer import Buffer, Position
from mtx.cursor import MoveOptions
from mtx.modes.machine import Mode

WRAP_EOL = MoveOptions(allow_wrap=True, allow_eol=True)


def make_buffer(*lines: str) -> Buffer:
    return Buffer.from_text("\n".join(lines))


@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("x,y", [(0, 0), (2, 0), (9, 0), (4, 1), (3, 8), (-2, -1)])
def test_clamp_is_idempotent(mode: Mode, x: int, y: int) -> None:
    buffer = make_buffer("abc", "", "hello")
    pos = Position(x, y)

    cursor.clamp(pos, buffer, mode)
    once = pos.copy()
    cursor.clamp(pos, buffer, mode)

    assert pos == once


def test_clamp_limits_column_per_mode() -> None:
    buffer = make_buffer("abc")

    normal = Position(5, 0)
    cursor.clamp(normal, buffer, Mode.NORMAL)
    insert = Position(5, 0)
    cursor.clamp(insert, buffer, Mode.INSERT)
    command = Position(5, 0)
    cursor.clamp(command, buffer, Mode.COMMAND)

    assert normal == Position(2, 0)
    assert insert == Position(3, 0)
    assert command == Position(5, 0)


def test_clamp_row_past_document() -> None:
    buffer = make_buffer("abc", "de")

    normal = Position(0, 7)
    cursor.clamp(normal, buffer, Mode.NORMAL)
    visual = Position(0, 7)
    cursor.clamp(visual, buffer, Mode.VISUAL)

    assert normal == Position(1, 1)
    assert visual == Position(2, 1)


def test_clamp_empty_buffer_goes_to_origin() -> None:
    pos = Position(4, 3)

    cursor.clamp(pos, Buffer(), Mode.INSERT)

    assert pos == Position(0, 0)


def test_move_left_without_wrap_stops_at_column_zero() -> None:
    buffer = make_buffer("abc", "de")
    pos = Position(0, 1)

    cursor.move_left(pos, buffer)

    assert pos == Position(0, 1)


def test_move_left_wraps_to_previous_line_end() -> None:
    buffer = make_buffer("abc", "de")

    with_eol = Position(0, 1)
    cursor.move_left(with_eol, buffer, WRAP_EOL)
    block = Position(0, 1)
    cursor.move_left(block, buffer, MoveOptions(allow_wrap=True))

    assert with_eol == Position(3, 0)
    assert block == Position(2, 0)


def test_move_left_repairs_stale_column() -> None:
    buffer = make_buffer("abcdef", "ab")
    pos = Position(5, 1)

    cursor.move_left(pos, buffer)

    assert pos == Position(1, 1)


def test_move_right_respects_line_end() -> None:
    buffer = make_buffer("abc", "de")

    block = Position(2, 0)
    cursor.move_right(block, buffer)
    caret = Position(2, 0)
    cursor.move_right(caret, buffer, WRAP_EOL)

    assert block == Position(2, 0)
    assert caret == Position(3, 0)


def test_move_right_wraps_but_not_past_last_line() -> None:
    buffer = make_buffer("abc", "de")

    pos = Position(3, 0)
    cursor.move_right(pos, buffer, WRAP_EOL)
    assert pos == Position(0, 1)

    last = Position(2, 1)
    cursor.move_right(last, buffer, WRAP_EOL)
    assert last == Position(2, 1)


def test_vertical_moves_saturate() -> None:
    buffer = make_buffer("a", "b", "c")
    pos = Position(0, 1)

    cursor.move_down(pos, buffer, 5)
    assert pos.y == 2

    cursor.move_up(pos, buffer, 5)
    assert pos.y == 0


def test_line_and_document_jumps() -> None:
    buffer = make_buffer("abc", "defg")
    pos = Position(1, 0)

    cursor.move_to_line_end(pos, buffer)
    assert pos == Position(2, 0)

    cursor.move_to_line_end(pos, buffer, allow_eol=True)
    assert pos == Position(3, 0)

    cursor.move_to_document_end(pos, buffer)
    cursor.move_to_line_start(pos)
    assert pos == Position(0, 1)

    cursor.move_to_document_start(pos, buffer)
    assert pos == Position(0, 0)


def test_page_down_moves_cursor_and_offset() -> None:
    buffer = make_buffer(*[str(n) for n in range(10)])
    pos = Position(0, 0)
    offset = Position(0, 0)

    cursor.page_down(pos, offset, buffer, 4)
    assert (pos.y, offset.y) == (4, 4)

    pos.y = 8
    cursor.page_down(pos, offset, buffer, 4)
    assert (pos.y, offset.y) == (9, 5)


def test_page_up_saturates_at_top() -> None:
    buffer = make_buffer(*[str(n) for n in range(10)])
    pos = Position(0, 6)
    offset = Position(0, 2)

    cursor.page_up(pos, offset, buffer, 4)
    assert (pos.y, offset.y) == (2, 0)

    cursor.page_up(pos, offset, buffer, 4)
    assert (pos.y, offset.y) == (0, 0)


def test_scroll_keeps_cursor_visible() -> None:
    offset = Position(0, 0)

    cursor.scroll(Position(100, 30), offset, 80, 10)
    assert offset == Position(21, 21)

    cursor.scroll(Position(3, 5), offset, 80, 10)
    assert offset == Position(3, 5)


def test_every_motion_is_safe_on_an_empty_buffer() -> None:
    buffer = Buffer()
    pos = Position(0, 0)
    offset = Position(0, 0)

    cursor.move_left(pos, buffer, WRAP_EOL)
    cursor.move_right(pos, buffer, WRAP_EOL)
    cursor.move_up(pos, buffer)
    cursor.move_down(pos, buffer)
    cursor.move_to_line_end(pos, buffer, allow_eol=True)
    cursor.move_to_document_end(pos, buffer)
    cursor.page_down(pos, offset, buffer, 5)
    cursor.page_up(pos, offset, buffer, 5)

    assert pos == Position(0, 0)
    assert offset == Position(0, 0)
    assert buffer.row(0) is None
