"""Actions that evaluate the command-line prompt."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, List, Optional

from mtx.buffer import Buffer, BufferIOError
from mtx.modes.base_types import ModeResult
from mtx.runtime import telemetry
from mtx.session import EditorSession

CommandHandler = Callable[[EditorSession, List[str]], ModeResult]

UNSAVED_CHANGES = "E37: No write since last change (add ! to override)"

logger = telemetry.get_logger("mtx.actions.command")


def _leave_prompt(
    session: EditorSession, *, status: str, message: Optional[str] = None
) -> ModeResult:
    session.prompt = ""
    return ModeResult(
        consumed=True,
        switch_to=session.modes.prompt_origin,
        status=status,
        message=message,
    )


def submit_command_line(session: EditorSession, match) -> ModeResult:
    del match
    text = session.prompt.strip()
    session.bus.emit("command.submit", text)
    if not text:
        return _leave_prompt(session, status="command_empty")
    command, *args = text.split()
    handler = _COMMAND_HANDLERS.get(command)
    if handler is None:
        session.set_status(f"E492: Not an editor command: {text}")
        session.bus.emit("command.error", command)
        return _leave_prompt(session, status="command_error", message=command)
    return handler(session, args)


def cancel_command_line(session: EditorSession, match) -> ModeResult:
    del match
    session.bus.emit("command.cancel", session.prompt)
    return _leave_prompt(session, status="command_cancel", message="command_cancel")


def _write(session: EditorSession, args: List[str]) -> bool:
    target = args[0] if args else None
    try:
        written = session.buffer.save(target)
    except BufferIOError as exc:
        logger.warning("write failed: %s", exc)
        session.set_status(f"Err: {exc}")
        return False
    session.set_status(f'"{written}" {len(session.buffer)}L written')
    session.bus.emit("command.write", {"path": written, "args": list(args)})
    return True


def _quit(session: EditorSession, *, force: bool) -> bool:
    if session.buffer.is_dirty() and not force:
        session.set_status(UNSAVED_CHANGES)
        return False
    session.should_quit = True
    session.bus.emit("command.quit", {"force": force})
    return True


def _handle_write(
    session: EditorSession, args: List[str], *, force: bool = False
) -> ModeResult:
    del force
    ok = _write(session, args)
    return _leave_prompt(
        session, status="command_write" if ok else "command_error", message="write"
    )


def _handle_quit(
    session: EditorSession, args: List[str], *, force: bool = False
) -> ModeResult:
    del args
    ok = _quit(session, force=force)
    return _leave_prompt(
        session, status="command_quit" if ok else "command_error", message="quit"
    )


def _handle_write_quit(
    session: EditorSession, args: List[str], *, force: bool = False
) -> ModeResult:
    del force
    # quitting is skipped when the write fails, even with "!"
    ok = _write(session, args) and _quit(session, force=True)
    return _leave_prompt(
        session, status="command_wq" if ok else "command_error", message="wq"
    )


def _handle_exit(
    session: EditorSession, args: List[str], *, force: bool = False
) -> ModeResult:
    if session.buffer.is_dirty() or args:
        return _handle_write_quit(session, args, force=force)
    _quit(session, force=True)
    return _leave_prompt(session, status="command_x", message="x")


def _handle_edit(
    session: EditorSession, args: List[str], *, force: bool = False
) -> ModeResult:
    if not args:
        session.set_status("E32: No file name")
        return _leave_prompt(session, status="command_error", message="edit")
    if session.buffer.is_dirty() and not force:
        session.set_status(UNSAVED_CHANGES)
        return _leave_prompt(session, status="command_error", message="edit")
    path = args[0]
    try:
        buffer = Buffer.open(path)
    except BufferIOError as exc:
        session.set_status(f"Err: {exc}")
        return _leave_prompt(session, status="command_error", message="edit")
    session.replace_buffer(buffer)
    session.set_status(f'"{path}" {len(buffer)}L')
    session.bus.emit("command.edit", {"path": path, "force": force})
    return _leave_prompt(session, status="command_edit", message="edit")


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "write": _handle_write,
    "w": _handle_write,
    "write!": partial(_handle_write, force=True),
    "w!": partial(_handle_write, force=True),
    "quit": _handle_quit,
    "q": _handle_quit,
    "quit!": partial(_handle_quit, force=True),
    "q!": partial(_handle_quit, force=True),
    "wq": _handle_write_quit,
    "wq!": partial(_handle_write_quit, force=True),
    "x": _handle_exit,
    "x!": partial(_handle_exit, force=True),
    "exit": _handle_exit,
    "edit": _handle_edit,
    "e": _handle_edit,
    "edit!": partial(_handle_edit, force=True),
    "e!": partial(_handle_edit, force=True),
}


__all__ = ["submit_command_line", "cancel_command_line", "UNSAVED_CHANGES"]
