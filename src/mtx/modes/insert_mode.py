"""Insert mode: unbound printable keys become buffer text."""

from __future__ import annotations

from mtx.actions.edit import insert_text

from .base_mode import ModeHandler
from .base_types import KeyInput, ModeResult
from .machine import Mode


class InsertMode(ModeHandler):
    mode = Mode.INSERT

    def fallback(self, key: KeyInput) -> ModeResult:
        text = key.text
        if key.modifiers or not text or not text.isprintable():
            return super().fallback(key)
        return insert_text(self.session, text)
