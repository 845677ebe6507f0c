"""Command-line mode: edits the ``:`` prompt until it is submitted."""

from __future__ import annotations

from typing import Optional

import grapheme

from .base_mode import ModeHandler
from .base_types import KeyInput, ModeResult
from .machine import Mode


class CommandMode(ModeHandler):
    mode = Mode.COMMAND

    def on_enter(self, previous: Optional[Mode]) -> None:
        super().on_enter(previous)
        self.session.prompt = ""
        self.session.bus.emit("command.start", None)

    def on_exit(self, next_mode: Optional[Mode]) -> None:
        super().on_exit(next_mode)
        self.session.bus.emit("command.end", self.session.prompt)
        self.session.prompt = ""

    def fallback(self, key: KeyInput) -> ModeResult:
        if key.key == "BACKSPACE":
            if not self.session.prompt:
                # backspace on an empty prompt closes it
                return ModeResult(
                    consumed=True,
                    switch_to=self.session.modes.prompt_origin,
                    status="command_cancel",
                    message="command_cancel",
                )
            prompt = self.session.prompt
            self.session.prompt = grapheme.slice(
                prompt, 0, grapheme.length(prompt) - 1
            )
            self._sync()
            return ModeResult(consumed=True, status="editing")

        if key.text and not key.modifiers and key.text.isprintable():
            self.session.prompt += key.text
            self._sync()
            return ModeResult(consumed=True, status="editing")

        return super().fallback(key)

    def _sync(self) -> None:
        self.session.bus.emit("command.prompt", self.session.prompt)
