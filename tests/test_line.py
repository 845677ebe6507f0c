from __future__ import annotations

import pytest

from mtx.buffer import Line


def test_length_counts_grapheme_clusters() -> None:
    line = Line("cafe\u0301 \U0001f1ef\U0001f1f5")

    assert line.length() == 6
    assert line.graphemes()[3] == "e\u0301"
    assert line.graphemes()[5] == "\U0001f1ef\U0001f1f5"


def test_render_replaces_tabs_and_clamps_bounds() -> None:
    line = Line("a\tbc")

    assert line.render(0, 4) == "a bc"
    assert line.render(2, 99) == "bc"
    assert line.render(7, 9) == ""
    assert line.render(-3, 1) == "a"


def test_render_window_never_splits_a_cluster() -> None:
    line = Line("x\U0001f44d\U0001f3fdy")

    assert line.length() == 3
    assert line.render(1, 2) == "\U0001f44d\U0001f3fd"


def test_insert_then_delete_restores_text() -> None:
    line = Line("hello")

    line.insert(2, "X")
    assert line.text == "heXllo"

    line.delete(2)
    assert line.text == "hello"
    assert line.length() == 5


def test_insert_cluster_grows_length_by_one() -> None:
    line = Line("ab")

    line.insert(1, "\U0001f1ef\U0001f1f5")

    assert line.length() == 3
    assert line.render(1, 2) == "\U0001f1ef\U0001f1f5"


def test_insert_past_end_appends() -> None:
    line = Line("ab")

    line.insert(10, "c")

    assert line.text == "abc"


def test_delete_out_of_range_is_noop() -> None:
    line = Line("ab")

    line.delete(2)
    line.delete(-1)

    assert line.text == "ab"


def test_delete_range_is_inclusive_and_clamped() -> None:
    line = Line("abcdef")

    line.delete_range(1, 2)
    assert line.text == "adef"

    line.delete_range(2, 40)
    assert line.text == "ad"

    line.delete_range(1, 0)
    assert line.text == "ad"


def test_split_and_append_are_inverse() -> None:
    line = Line("abcdef")

    tail = line.split(2)
    assert (line.text, tail.text) == ("ab", "cdef")

    line.append(tail)
    assert line.text == "abcdef"


def test_line_rejects_terminators() -> None:
    with pytest.raises(ValueError):
        Line("a\nb")

    line = Line("ab")
    with pytest.raises(ValueError):
        line.insert(1, "\r")
