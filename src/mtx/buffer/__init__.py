"""Grapheme-addressed lines and the buffer that owns their structure."""

from .buffer import NO_NAME, Buffer, Transaction, open_buffer, split_content
from .errors import BufferIOError
from .line import Line
from .state import Position, SelectedText

__all__ = [
    "Buffer",
    "BufferIOError",
    "Line",
    "NO_NAME",
    "Position",
    "SelectedText",
    "Transaction",
    "open_buffer",
    "split_content",
]
