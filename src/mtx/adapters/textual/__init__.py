"""Textual host for the editor.

Only the controller is imported here; ``mtx.adapters.textual.app`` pulls in
Textual itself.
"""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
