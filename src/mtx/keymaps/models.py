"""Dataclasses describing key sequences, actions, and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


def normalize_token(token: str) -> str:
    """Canonical form of ``"Ctrl+D"``-style tokens: lowercase sorted modifiers."""

    parts = token.split("+")
    if len(parts) == 1 or not parts[-1]:
        return token
    *modifiers, key = parts
    cleaned = sorted(dict.fromkeys(m.strip().lower() for m in modifiers if m.strip()))
    return "+".join([*cleaned, key])


@dataclass(frozen=True, slots=True)
class KeySequence:
    """Immutable run of key tokens, e.g. ``("d", "d")`` or ``("ctrl+d",)``."""

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.tokens or not all(self.tokens):
            raise ValueError("KeySequence requires at least one non-empty token")
        object.__setattr__(
            self, "tokens", tuple(normalize_token(token) for token in self.tokens)
        )

    @classmethod
    def from_strings(cls, *keys: str) -> "KeySequence":
        return cls(tokens=tuple(keys))

    @property
    def signature(self) -> str:
        return " ".join(self.tokens)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named command callable invoked as ``handler(session, match)``."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key sequence in one mode with an action id."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(self, "mode", str(getattr(self.mode, "value", self.mode)))


def bind(
    mode: str,
    keys: Iterable[str],
    action_id: str,
    description: str = "",
) -> Binding:
    """Shorthand used by the default tables: id is ``<mode>.<keys>``."""

    sequence = KeySequence.from_strings(*keys)
    mode_name = str(getattr(mode, "value", mode))
    return Binding(
        id=f"{mode_name}.{'_'.join(sequence.tokens)}",
        mode=mode_name,
        sequence=sequence,
        action_id=action_id,
        description=description,
    )


__all__ = ["ActionRef", "Binding", "KeySequence", "bind", "normalize_token"]
