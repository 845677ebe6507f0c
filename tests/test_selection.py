from __future__ import annotations

from mtx import selection
from mtx.buffer import Buffer, Position, SelectedText


def test_normalize_orders_row_major() -> None:
    selected = SelectedText(start=Position(5, 3), end=Position(1, 1))

    low, high = selection.normalize(selected)

    assert low == Position(1, 1)
    assert high == Position(5, 3)
    assert selected.start == Position(5, 3)


def test_begin_copies_the_cursor() -> None:
    pos = Position(2, 0)

    selected = selection.begin(pos)
    pos.x = 4

    assert selected.start == Position(2, 0)
    assert selected.end == Position(2, 0)


def test_update_keeps_end_on_a_character() -> None:
    buffer = Buffer.from_text("abc\n")
    selected = selection.begin(Position(0, 0))

    selection.update(Position(3, 0), buffer, selected)
    assert selected.end == Position(2, 0)

    selection.update(Position(0, 5), buffer, selected)
    assert selected.end == Position(2, 0)


def test_swap_exchanges_anchor_and_live_end() -> None:
    selected = SelectedText(start=Position(0, 0), end=Position(3, 1))

    selection.swap(selected)

    assert selected.start == Position(3, 1)
    assert selected.end == Position(0, 0)
