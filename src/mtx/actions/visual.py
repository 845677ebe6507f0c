"""Actions dedicated to Visual mode selections.

Motions reuse ``mtx.actions.motion``; the mode manager moves the live
endpoint after each of them.
"""

from __future__ import annotations

from mtx import selection as selection_model
from mtx.modes.base_types import ModeResult
from mtx.modes.machine import Mode
from mtx.session import EditorSession


def delete_selection(session: EditorSession, match) -> ModeResult:
    del match
    selected = session.selection
    if selected is None:
        return ModeResult(consumed=False, status="no_selection")
    low, high = selection_model.normalize(selected)
    session.buffer.delete_range(low, high)
    session.cursor.set(low.x, low.y)
    session.bus.emit(
        "visual.delete", {"start": low.copy(), "end": high.copy()}
    )
    return ModeResult(
        consumed=True,
        switch_to=Mode.NORMAL,
        status="visual_delete",
        message="visual_delete",
    )


def swap_anchor(session: EditorSession, match) -> ModeResult:
    del match
    selected = session.selection
    if selected is None:
        return ModeResult(consumed=False, status="no_selection")
    selection_model.swap(selected)
    session.cursor.set(selected.end.x, selected.end.y)
    session.bus.emit(
        "visual.selection",
        {"start": selected.start.copy(), "end": selected.end.copy(), "swap": True},
    )
    return ModeResult(consumed=True, status="visual_swap")


__all__ = ["delete_selection", "swap_anchor"]
