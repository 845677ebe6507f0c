"""Error types raised by the buffer layer."""

from __future__ import annotations

from typing import Optional


class BufferIOError(RuntimeError):
    """Raised when buffer content cannot be read from or written to disk."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["BufferIOError"]
