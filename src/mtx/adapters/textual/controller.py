"""Textual-agnostic controller that wires ModeManager events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from mtx.modes.base_types import KeyInput, ModeResult
from mtx.modes.machine import Mode
from mtx.modes.mode_manager import ModeManager
from mtx.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[EditorSession], None]
    update_status: Callable[[str], None] = _noop
    show_command: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self._refresh()

    @property
    def session(self) -> EditorSession:
        return self.manager.session

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in (
            "status",
            "mode",
            "visual.selection",
            "visual.delete",
            "command.start",
            "command.end",
            "command.prompt",
            "command.submit",
            "command.error",
            "command.write",
            "command.quit",
            "command.edit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "status" and isinstance(payload, str):
            self.hooks.update_status(payload)
        elif name.startswith("command"):
            self._refresh_command_line()

    def _refresh(self) -> None:
        self.hooks.update_view(self.session)
        self.hooks.update_status(self.session.status)
        self._refresh_command_line()

    def _refresh_command_line(self) -> None:
        if self.session.mode is Mode.COMMAND:
            self.hooks.show_command(f":{self.session.prompt}")
        else:
            self.hooks.show_command("")

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "mode": session.mode.value,
            "cursor": (session.cursor.x, session.cursor.y),
            "offset": (session.offset.x, session.offset.y),
            "selection": session.selection,
            "prompt": session.prompt,
            "buffer": session.buffer.name,
            "buffer_version": session.buffer.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
