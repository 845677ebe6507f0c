"""Plain UTF-8 file access for buffers."""

from __future__ import annotations

from .errors import BufferIOError

ENCODING = "utf-8"


def read_text(path: str) -> str:
    try:
        with open(path, "r", encoding=ENCODING, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise BufferIOError(f"could not open file {path}: {exc}", path=path) from exc


def write_text(path: str, text: str) -> None:
    """Write ``text`` in one call; the caller's state is only updated on success."""

    data = text.encode(ENCODING)
    try:
        with open(path, "wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise BufferIOError(f"could not write file {path}: {exc}", path=path) from exc


__all__ = ["read_text", "write_text", "ENCODING"]
