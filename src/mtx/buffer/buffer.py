"""Line-structured text buffer owning every structural mutation."""

from __future__ import annotations

import re
from contextlib import AbstractContextManager
from typing import ContextManager, Iterable, Iterator, List, Optional, Tuple

from mtx.runtime import telemetry

from .errors import BufferIOError
from .files import read_text, write_text
from .line import Line
from .state import Position

NO_NAME = "[No Name]"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_content(content: str) -> List[Line]:
    """Split ``content`` into lines, dropping terminators.

    ``\\r\\n``, ``\\r`` and ``\\n`` all end a line. A trailing terminator does
    not produce an extra empty line.
    """

    if not content:
        return []
    pieces = _LINE_BREAK.split(content)
    if pieces[-1] == "":
        pieces.pop()
    return [Line(piece) for piece in pieces]


class Buffer:
    """Ordered lines plus identity (``path``) and dirty state.

    Index-taking operations never raise on out-of-range input: queries return
    ``None`` and mutations become no-ops.
    """

    def __init__(
        self,
        lines: Optional[Iterable[Line]] = None,
        *,
        path: Optional[str] = None,
    ) -> None:
        self._lines: List[Line] = list(lines or [])
        self.path = path
        self.version = 0
        self._dirty = False

    @classmethod
    def from_text(cls, content: str, *, path: Optional[str] = None) -> "Buffer":
        return cls(split_content(content), path=path)

    @classmethod
    def open(cls, path: str) -> "Buffer":
        """Read ``path`` into a new buffer bound to it; raises ``BufferIOError``."""

        with telemetry.span("buffer::open", component="buffer", metadata={"path": path}):
            return cls.from_text(read_text(path), path=path)

    @property
    def name(self) -> str:
        return self.path or NO_NAME

    @property
    def lines(self) -> Tuple[Line, ...]:
        return tuple(self._lines)

    # -- queries ---------------------------------------------------------

    def row(self, y: int) -> Optional[Line]:
        if 0 <= y < len(self._lines):
            return self._lines[y]
        return None

    def row_length(self, y: int) -> Optional[int]:
        line = self.row(y)
        return None if line is None else line.length()

    def is_empty(self) -> bool:
        return not self._lines

    def is_dirty(self) -> bool:
        return self._dirty

    def text(self) -> str:
        return "\n".join(line.text for line in self._lines)

    def serialize(self) -> str:
        return "".join(f"{line.text}\n" for line in self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    # -- persistence -----------------------------------------------------

    def save(self, target: Optional[str] = None) -> str:
        """Write every line plus a terminator to ``target`` or the bound path.

        Returns the path written. The dirty flag is cleared only on success.
        """

        destination = target or self.path
        if not destination:
            raise BufferIOError("No file name")
        with telemetry.span(
            "buffer::save", component="buffer", metadata={"path": destination}
        ):
            write_text(destination, self.serialize())
        if self.path is None:
            self.path = destination
        self._dirty = False
        telemetry.record_event(
            "buffer.saved",
            data={"path": destination, "lines": len(self._lines)},
        )
        return destination

    # -- mutations -------------------------------------------------------

    def insert_char(self, pos: Position, c: str) -> None:
        if c in ("\n", "\r\n", "\r"):
            self.insert_newline(pos)
            return
        count = len(self._lines)
        if pos.y > count:
            return
        with Transaction(self, "insert_char") as tx:
            if pos.y == count:
                self._lines.append(Line(c))
            else:
                self._lines[pos.y].insert(pos.x, c)
            tx.commit()

    def insert_newline(self, pos: Position) -> None:
        count = len(self._lines)
        if pos.y > count:
            return
        with Transaction(self, "insert_newline") as tx:
            if pos.y == count:
                self._lines.append(Line())
            else:
                remainder = self._lines[pos.y].split(pos.x)
                self._lines.insert(pos.y + 1, remainder)
            tx.commit()

    def delete_char(self, pos: Position) -> None:
        count = len(self._lines)
        if pos.y < 0 or pos.y >= count:
            return
        with Transaction(self, "delete_char") as tx:
            line = self._lines[pos.y]
            if pos.x == line.length() and pos.y + 1 < count:
                line.append(self._lines.pop(pos.y + 1))
            else:
                line.delete(pos.x)
            tx.commit()

    def delete_line(self, y: int) -> Optional[Line]:
        if self.row(y) is None:
            return None
        with Transaction(self, "delete_line") as tx:
            removed = self._lines.pop(y)
            tx.commit()
        return removed

    def delete_line_range(self, y0: int, y1: int) -> None:
        y0 = max(y0, 0)
        y1 = min(y1, len(self._lines) - 1)
        if y0 > y1:
            return
        with Transaction(self, "delete_line_range") as tx:
            self._remove_lines(y0, y1)
            tx.commit()

    def delete_to_end_of_line(self, pos: Position) -> None:
        line = self.row(pos.y)
        if line is None:
            return
        with Transaction(self, "delete_to_end_of_line") as tx:
            line.delete_from(pos.x)
            tx.commit()

    def join_with_next(self, pos: Position) -> None:
        line = self.row(pos.y)
        if line is None or self.row(pos.y + 1) is None:
            return
        with Transaction(self, "join_with_next") as tx:
            line.append(self._lines.pop(pos.y + 1))
            tx.commit()

    def delete_range(self, start: Position, end: Position) -> None:
        """Delete the inclusive span between two positions.

        The endpoints are ordered row-major first. An ``end`` past the document
        is treated as the end of the last line.
        """

        low, high = (start, end) if start <= end else (end, start)
        count = len(self._lines)
        if low.y < 0 or low.y >= count:
            return
        if high.y >= count:
            high = Position(self._lines[count - 1].length(), count - 1)

        with Transaction(self, "delete_range") as tx:
            head = self._lines[low.y]
            if low.y == high.y:
                head.delete_range(low.x, high.x)
            elif low.x == 0 and high.x == self._lines[high.y].length() - 1:
                self._remove_lines(low.y, high.y)
            else:
                suffix = self._lines[high.y].split(high.x + 1)
                head.delete_from(low.x)
                self._remove_lines(low.y + 1, high.y)
                head.append(suffix)
            tx.commit()

    def _remove_lines(self, y0: int, y1: int) -> None:
        # highest index first so lower indices stay valid
        for y in range(y1, y0 - 1, -1):
            del self._lines[y]


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one structural mutation in a telemetry span and marks the buffer."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._before: Tuple[str, ...] = ()

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name, "lines": len(self.buffer)},
        )
        self._span_cm.__enter__()
        self._before = self._snapshot()
        return self

    def commit(self) -> None:
        """Mark the buffer modified if the mutation changed any text."""

        if self._snapshot() == self._before:
            return
        self.buffer._dirty = True
        self.buffer.version += 1

    def _snapshot(self) -> Tuple[str, ...]:
        return tuple(line.text for line in self.buffer)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def open_buffer(path: str) -> Buffer:
    return Buffer.open(path)


__all__ = ["Buffer", "Transaction", "open_buffer", "split_content", "NO_NAME"]
