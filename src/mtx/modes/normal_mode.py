"""Normal mode: motions, deletes, and the entry points to other modes."""

from __future__ import annotations

from .base_mode import ModeHandler
from .base_types import KeyInput, ModeResult
from .machine import Mode


class NormalMode(ModeHandler):
    mode = Mode.NORMAL

    def fallback(self, key: KeyInput) -> ModeResult:
        if key.key in {"ESC", "<Esc>"}:
            return ModeResult(consumed=True, status="noop", message="clear_pending")
        return super().fallback(key)
