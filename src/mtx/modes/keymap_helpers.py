"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from mtx.keymaps import KeymapResolver
from mtx.session import EditorSession

from .base_types import KeyInput


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        modifier = "+".join(m.lower() for m in key.modifiers)
        return f"{modifier}+{key.key}"
    return key.key


def require_keymap_resolver(session: EditorSession) -> KeymapResolver:
    resolver = session.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("EditorSession.extras missing 'keymap_resolver'")
    return resolver


__all__ = ["key_to_token", "require_keymap_resolver"]
