"""Editing modes, their transition rules, and per-mode column limits."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Optional

from mtx.runtime import telemetry


class Mode(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    COMMAND = "command"

    @property
    def label(self) -> str:
        return self.value.upper()


_TRANSITIONS: Dict[Mode, FrozenSet[Mode]] = {
    Mode.NORMAL: frozenset({Mode.INSERT, Mode.VISUAL, Mode.COMMAND}),
    Mode.INSERT: frozenset({Mode.NORMAL, Mode.COMMAND}),
    Mode.VISUAL: frozenset({Mode.NORMAL}),
    Mode.COMMAND: frozenset(),
}


def max_column(mode: Mode, line_length: int) -> Optional[int]:
    """Largest cursor column allowed on a line of ``line_length`` graphemes.

    Normal mode keeps a block cursor on a character; Insert and Visual may rest
    one past the last character. Command mode has no buffer column.
    """

    if mode is Mode.NORMAL:
        return max(line_length - 1, 0)
    if mode in (Mode.INSERT, Mode.VISUAL):
        return line_length
    return None


class ModeMachine:
    """Tracks the active mode and rejects transitions the editor does not allow.

    Entering ``Command`` remembers the mode it was opened from; the prompt can
    only be left back to that mode.
    """

    def __init__(self, initial: Mode = Mode.NORMAL) -> None:
        self._current = initial
        self._prompt_origin: Optional[Mode] = None
        self.logger = telemetry.get_logger("mtx.modes.machine")

    @property
    def current(self) -> Mode:
        return self._current

    @property
    def prompt_origin(self) -> Optional[Mode]:
        return self._prompt_origin

    def can_transition(self, target: Mode) -> bool:
        if self._current is Mode.COMMAND:
            return target is self._prompt_origin
        return target in _TRANSITIONS[self._current]

    def transition(self, target: Mode) -> bool:
        if not self.can_transition(target):
            self.logger.debug(
                "rejected transition %s -> %s", self._current.value, target.value
            )
            return False
        previous = self._current
        if target is Mode.COMMAND:
            self._prompt_origin = previous
        elif previous is Mode.COMMAND:
            self._prompt_origin = None
        self._current = target
        telemetry.record_event(
            "mode.switch",
            level="debug",
            data={"from": previous.value, "to": target.value},
        )
        return True

    def open_prompt(self) -> bool:
        return self.transition(Mode.COMMAND)

    def close_prompt(self) -> bool:
        if self._current is not Mode.COMMAND or self._prompt_origin is None:
            return False
        return self.transition(self._prompt_origin)


__all__ = ["Mode", "ModeMachine", "max_column"]
