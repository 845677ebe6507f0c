"""Explicit editor session passed to every command."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from mtx import cursor
from mtx.buffer import Buffer, BufferIOError, Position, SelectedText
from mtx.modes.machine import Mode, ModeMachine
from mtx.runtime import telemetry

HELP_MESSAGE = "HELP: :w = save | :q = quit"

logger = telemetry.get_logger("mtx.session")


class EventBus:
    """Minimal event bus letting commands publish structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class Viewport:
    width: int = 80
    height: int = 24


@dataclass
class EditorSession:
    """Everything one command may read or change.

    ``cursor`` and ``offset`` are mutated in place by the cursor engine;
    ``selection`` exists only while Visual mode is active.
    """

    buffer: Buffer = field(default_factory=Buffer)
    cursor: Position = field(default_factory=Position)
    offset: Position = field(default_factory=Position)
    viewport: Viewport = field(default_factory=Viewport)
    modes: ModeMachine = field(default_factory=ModeMachine)
    selection: Optional[SelectedText] = None
    prompt: str = ""
    status: str = ""
    should_quit: bool = False
    bus: EventBus = field(default_factory=EventBus)
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def mode(self) -> Mode:
        return self.modes.current

    def clamp_cursor(self) -> None:
        cursor.clamp(self.cursor, self.buffer, self.mode)

    def set_status(self, message: str) -> None:
        self.status = message
        self.bus.emit("status", message)

    def replace_buffer(self, buffer: Buffer) -> None:
        self.buffer = buffer
        self.cursor.set(0, 0)
        self.offset.set(0, 0)
        self.selection = None


def open_session(
    path: Optional[str] = None, *, viewport: Optional[Viewport] = None
) -> EditorSession:
    """Build a session for ``path``; an unreadable file yields an empty buffer."""

    session = EditorSession(viewport=viewport or Viewport())
    if path is None:
        session.status = HELP_MESSAGE
        return session
    try:
        session.buffer = Buffer.open(path)
    except BufferIOError as exc:
        logger.warning("open failed for %s: %s", path, exc)
        session.status = f"Err: could not open file {path}"
        return session
    session.status = HELP_MESSAGE
    return session


__all__ = [
    "EditorSession",
    "EventBus",
    "HELP_MESSAGE",
    "Viewport",
    "open_session",
]
