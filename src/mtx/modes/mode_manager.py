"""Mode manager coordinating the Normal/Insert/Visual/Command handlers."""

from __future__ import annotations

from typing import Dict, Optional, Type

from mtx import cursor, selection
from mtx.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from mtx.runtime import telemetry
from mtx.session import EditorSession

from .base_mode import ModeHandler
from .base_types import KeyInput, ModeResult
from .command_mode import CommandMode
from .insert_mode import InsertMode
from .machine import Mode
from .normal_mode import NormalMode
from .visual_mode import VisualMode


class ModeManager:
    """Owns the mode handlers, applies transitions, and dispatches key events.

    After every key the manager repairs the session in a fixed order: clamp
    the cursor to the active mode, move the Visual selection's live end, then
    scroll the viewport so the cursor stays visible.
    """

    def __init__(
        self,
        session: EditorSession,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.session = session
        self._handlers: Dict[Mode, ModeHandler] = {}
        self.logger = telemetry.get_logger("mtx.modes")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="mtx.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="mtx.keymaps"
        )
        session.extras.setdefault("keymap_registry", self.keymap_registry)
        session.extras.setdefault("keymap_resolver", self.keymap_resolver)
        session.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[ModeHandler]:
        return self._handlers.get(self.session.mode)

    def register_mode(
        self,
        handler_cls: Type[ModeHandler],
        /,
        *handler_args: object,
        **handler_kwargs: object,
    ) -> ModeHandler:
        handler = handler_cls(self.session, *handler_args, **handler_kwargs)
        if handler.mode in self._handlers:
            raise ValueError(f"Mode '{handler.name}' already registered")
        self._handlers[handler.mode] = handler
        if handler.mode is self.session.mode:
            handler.on_enter(None)
        return handler

    def switch_mode(self, target: Mode | str) -> bool:
        """Move to ``target`` if the machine allows it; returns whether it did."""

        target = Mode(target)
        if target not in self._handlers:
            raise KeyError(f"Unknown mode '{target.value}'")
        previous = self.session.mode
        if previous is target:
            return False
        if not self.session.modes.transition(target):
            return False
        outgoing = self._handlers.get(previous)
        if outgoing is not None:
            outgoing.on_exit(target)
        self._handlers[target].on_enter(previous)
        self.session.bus.emit("mode", target)
        return True

    def handle_key(self, key: KeyInput) -> ModeResult:
        handler = self.active_mode
        if handler is None:
            raise RuntimeError("No handler registered for the active mode")
        with telemetry.span(
            name=f"mode::{handler.name}",
            component="modes",
            metadata={"key": key.key, "mode": handler.name},
        ):
            result = handler.handle_key(key)
            if result.switch_to is not None:
                self.switch_mode(result.switch_to)
            self._settle()
        return result

    def _settle(self) -> None:
        session = self.session
        if session.mode is Mode.COMMAND:
            return
        session.clamp_cursor()
        if session.mode is Mode.VISUAL and session.selection is not None:
            selection.update(session.cursor, session.buffer, session.selection)
        cursor.scroll(
            session.cursor,
            session.offset,
            session.viewport.width,
            session.viewport.height,
        )


def create_default_manager(session: EditorSession | None = None) -> ModeManager:
    """Manager with the built-in keymaps and all four handlers registered."""

    manager = ModeManager(session or EditorSession())
    for handler_cls in (NormalMode, InsertMode, VisualMode, CommandMode):
        manager.register_mode(handler_cls)
    return manager


__all__ = ["ModeManager", "create_default_manager"]
