"""Key events and command results exchanged between modes and actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .machine import Mode


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``ModeHandler.handle_key`` and from actions."""

    consumed: bool
    switch_to: Optional[Mode] = None
    status: str = "ok"
    message: Optional[str] = None


__all__ = ["KeyInput", "ModeResult"]
