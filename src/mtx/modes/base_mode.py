"""Base class shared by every mode handler."""

from __future__ import annotations

from typing import List, Optional

from mtx.keymaps import ResolutionMatch
from mtx.runtime import telemetry
from mtx.session import EditorSession

from .base_types import KeyInput, ModeResult
from .keymap_helpers import key_to_token, require_keymap_resolver
from .machine import Mode


class ModeHandler:
    """Resolves keys through the keymap trie for one mode.

    Keys that complete a binding run its action. Keys that start a longer
    sequence are buffered. Anything else is passed to ``fallback`` so each
    mode can treat unbound keys as text, prompt input, or a miss.
    """

    mode: Mode = Mode.NORMAL

    def __init__(self, session: EditorSession) -> None:
        self.session = session
        self.logger = telemetry.get_logger(f"mtx.modes.{self.mode.value}")
        self._resolver = require_keymap_resolver(session)
        self._pending: List[str] = []

    @property
    def name(self) -> str:
        return self.mode.value

    @property
    def pending(self) -> tuple[str, ...]:
        return tuple(self._pending)

    def on_enter(self, previous: Optional[Mode]) -> None:
        del previous
        self._pending.clear()

    def on_exit(self, next_mode: Optional[Mode]) -> None:
        del next_mode
        self._pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        self._pending.append(key_to_token(key))
        result = self._resolver.resolve(self.name, tuple(self._pending))

        if result.status == "match" and result.match:
            self._pending.clear()
            return self._execute_match(result.match)

        if result.status == "pending":
            return ModeResult(
                consumed=True, status="pending", message="awaiting_sequence"
            )

        self._pending.clear()
        return self.fallback(key)

    def fallback(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=False, status="miss", message="unhandled")

    def _execute_match(self, match: ResolutionMatch) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.session, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["ModeHandler"]
