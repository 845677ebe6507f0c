"""Visual mode: owns the selection while it is active."""

from __future__ import annotations

from typing import Optional

from mtx import selection

from .base_mode import ModeHandler
from .machine import Mode


class VisualMode(ModeHandler):
    mode = Mode.VISUAL

    def on_enter(self, previous: Optional[Mode]) -> None:
        super().on_enter(previous)
        self.session.selection = selection.begin(self.session.cursor)
        self.session.bus.emit("visual.selection", self.session.selection)

    def on_exit(self, next_mode: Optional[Mode]) -> None:
        super().on_exit(next_mode)
        self.session.selection = None
