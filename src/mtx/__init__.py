"""Modal, grapheme-aware terminal text editor core."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "cursor",
    "keymaps",
    "modes",
    "runtime",
    "selection",
    "session",
]

__version__ = "0.1.0"
