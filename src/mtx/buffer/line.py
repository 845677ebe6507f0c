"""Single line of text addressed by grapheme cluster."""

from __future__ import annotations

from typing import List

import grapheme

TERMINATORS = ("\n", "\r")


class Line:
    """Text of one line plus a cached grapheme count.

    Every column passed to or returned from a ``Line`` is a grapheme index.
    A line never holds a terminator; the buffer owns line structure.
    """

    __slots__ = ("_text", "_length")

    def __init__(self, text: str = "") -> None:
        if any(term in text for term in TERMINATORS):
            raise ValueError("Line text cannot contain a line terminator")
        self._text = text
        self._length = grapheme.length(text)

    @property
    def text(self) -> str:
        return self._text

    def graphemes(self) -> List[str]:
        return list(grapheme.graphemes(self._text))

    def length(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def render(self, start: int, end: int) -> str:
        """Return the displayable text of ``[start, end)``.

        Bounds are clamped to the line and a tab renders as a single space.
        """

        end = min(max(end, 0), self._length)
        start = min(max(start, 0), end)
        window = grapheme.slice(self._text, start, end)
        return "".join(
            " " if cluster == "\t" else cluster
            for cluster in grapheme.graphemes(window)
        )

    def insert(self, at: int, char: str) -> None:
        if any(term in char for term in TERMINATORS):
            raise ValueError("Use Buffer.insert_newline to break a line")
        if at >= self._length:
            self._set(self._text + char)
            return
        clusters = self.graphemes()
        clusters.insert(max(at, 0), char)
        self._set("".join(clusters))

    def delete(self, at: int) -> None:
        if at < 0 or at >= self._length:
            return
        clusters = self.graphemes()
        del clusters[at]
        self._set("".join(clusters))

    def delete_range(self, start: int, end_inclusive: int) -> None:
        if self._length == 0:
            return
        start = max(start, 0)
        end_inclusive = min(end_inclusive, self._length - 1)
        if start > end_inclusive:
            return
        clusters = self.graphemes()
        del clusters[start : end_inclusive + 1]
        self._set("".join(clusters))

    def delete_from(self, at: int) -> None:
        self._set(grapheme.slice(self._text, 0, max(at, 0)))

    def split(self, at: int) -> "Line":
        at = max(at, 0)
        remainder = grapheme.slice(self._text, at)
        self._set(grapheme.slice(self._text, 0, at))
        return Line(remainder)

    def append(self, other: "Line") -> None:
        self._set(self._text + other.text)

    def _set(self, text: str) -> None:
        self._text = text
        self._length = grapheme.length(text)

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Line({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Line):
            return self._text == other._text
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


__all__ = ["Line", "TERMINATORS"]
