from __future__ import annotations

from pathlib import Path

import pytest

from mtx.buffer import Buffer, BufferIOError, Line, Position, open_buffer


def texts(buffer: Buffer) -> list[str]:
    return [line.text for line in buffer]


def test_open_and_save_round_trip(tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("one\n\ttwo\nthrée\n", encoding="utf-8")

    buffer = open_buffer(str(source))
    assert texts(buffer) == ["one", "\ttwo", "thrée"]
    assert buffer.name == str(source)
    assert not buffer.is_dirty()

    target = tmp_path / "copy.txt"
    buffer.save(str(target))

    assert target.read_text(encoding="utf-8") == "one\n\ttwo\nthrée\n"
    assert texts(open_buffer(str(target))) == texts(buffer)


def test_crlf_endings_are_dropped(tmp_path: Path) -> None:
    source = tmp_path / "dos.txt"
    source.write_bytes(b"a\r\nb\r\n")

    buffer = Buffer.open(str(source))

    assert texts(buffer) == ["a", "b"]
    assert buffer.serialize() == "a\nb\n"


def test_lone_carriage_return_ends_a_line(tmp_path: Path) -> None:
    source = tmp_path / "mac.txt"
    source.write_bytes(b"a\rb\nc\n")

    buffer = Buffer.open(str(source))

    assert texts(buffer) == ["a", "b", "c"]
    assert texts(Buffer.from_text("x\ry")) == ["x", "y"]
    assert texts(Buffer.from_text("x\r\r\n")) == ["x", ""]


def test_text_joins_lines_without_final_terminator() -> None:
    buffer = Buffer.from_text("one\ntwo\n")

    assert buffer.text() == "one\ntwo"
    assert buffer.serialize() == "one\ntwo\n"


def test_empty_content_has_no_lines() -> None:
    assert Buffer.from_text("").is_empty()
    assert texts(Buffer.from_text("x")) == ["x"]
    assert texts(Buffer.from_text("x\n\n")) == ["x", ""]


def test_open_missing_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "nope.txt"

    with pytest.raises(BufferIOError) as info:
        Buffer.open(str(missing))

    assert info.value.path == str(missing)
    assert isinstance(info.value.__cause__, OSError)


def test_save_failure_keeps_buffer_dirty(tmp_path: Path) -> None:
    buffer = Buffer.from_text("abc", path=str(tmp_path / "missing" / "f.txt"))
    buffer.insert_char(Position(3, 0), "d")

    with pytest.raises(BufferIOError):
        buffer.save()

    assert buffer.is_dirty()
    assert texts(buffer) == ["abcd"]


def test_save_without_name_raises() -> None:
    buffer = Buffer.from_text("abc")

    with pytest.raises(BufferIOError):
        buffer.save()


def test_save_binds_unnamed_buffer(tmp_path: Path) -> None:
    buffer = Buffer()
    buffer.insert_char(Position(0, 0), "x")
    target = str(tmp_path / "new.txt")

    assert buffer.save(target) == target

    assert buffer.path == target
    assert not buffer.is_dirty()


def test_insert_char_on_row_past_end_appends_line() -> None:
    buffer = Buffer.from_text("a")

    buffer.insert_char(Position(0, 1), "b")
    buffer.insert_char(Position(0, 5), "c")

    assert texts(buffer) == ["a", "b"]


def test_insert_newline_then_delete_char_restores_line() -> None:
    buffer = Buffer.from_text("hello\nworld")

    buffer.insert_newline(Position(2, 0))
    assert texts(buffer) == ["he", "llo", "world"]

    buffer.delete_char(Position(2, 0))
    assert texts(buffer) == ["hello", "world"]


def test_delete_char_at_line_end_merges_next_line() -> None:
    buffer = Buffer.from_text("ab\ncd")

    buffer.delete_char(Position(2, 0))

    assert texts(buffer) == ["abcd"]


def test_delete_range_across_lines() -> None:
    buffer = Buffer.from_text("abcde\nfghij\nklmno")

    buffer.delete_range(Position(2, 0), Position(2, 2))

    assert texts(buffer) == ["abno"]


def test_delete_range_orders_endpoints() -> None:
    buffer = Buffer.from_text("abcde\nfghij\nklmno")

    buffer.delete_range(Position(2, 2), Position(2, 0))

    assert texts(buffer) == ["abno"]


def test_delete_range_removes_whole_lines() -> None:
    buffer = Buffer.from_text("abcde\nfghij\nklmno")

    buffer.delete_range(Position(0, 0), Position(4, 1))

    assert texts(buffer) == ["klmno"]


def test_delete_range_within_one_line() -> None:
    buffer = Buffer.from_text("abcdef")

    buffer.delete_range(Position(1, 0), Position(3, 0))

    assert texts(buffer) == ["aef"]


def test_delete_range_end_past_document_clamps() -> None:
    buffer = Buffer.from_text("abc\ndef")

    buffer.delete_range(Position(1, 0), Position(0, 5))

    assert texts(buffer) == ["a"]


def test_out_of_range_addresses_are_noops() -> None:
    buffer = Buffer.from_text("abc")

    assert buffer.row(3) is None
    assert buffer.row(-1) is None
    assert buffer.row_length(7) is None
    assert buffer.delete_line(4) is None
    buffer.delete_char(Position(0, 9))
    buffer.join_with_next(Position(0, 0))
    buffer.delete_range(Position(0, 4), Position(0, 6))

    assert texts(buffer) == ["abc"]
    assert not buffer.is_dirty()


def test_line_level_edits() -> None:
    buffer = Buffer.from_text("one\ntwo\nthree\nfour")

    removed = buffer.delete_line(1)
    assert removed == Line("two")

    buffer.delete_to_end_of_line(Position(2, 1))
    buffer.join_with_next(Position(0, 0))
    buffer.delete_line_range(1, 9)

    assert texts(buffer) == ["oneth"]


def test_mutations_bump_version_and_dirty_flag() -> None:
    buffer = Buffer.from_text("abc")

    buffer.insert_char(Position(1, 0), "Z")

    assert buffer.version == 1
    assert buffer.is_dirty()


def test_mutation_without_effect_keeps_buffer_clean() -> None:
    buffer = Buffer.from_text("abc\n\n")

    buffer.delete_char(Position(0, 1))
    buffer.delete_to_end_of_line(Position(3, 0))
    buffer.delete_range(Position(0, 1), Position(0, 1))

    assert texts(buffer) == ["abc", ""]
    assert buffer.version == 0
    assert not buffer.is_dirty()
