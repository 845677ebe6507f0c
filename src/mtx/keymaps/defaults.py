"""Built-in actions and the bindings that seed each mode."""

from __future__ import annotations

from typing import Iterable, Sequence

from mtx.actions import command as command_actions
from mtx.actions import core as core_actions
from mtx.actions import edit as edit_actions
from mtx.actions import motion as motion_actions
from mtx.actions import visual as visual_actions

from .models import ActionRef, Binding, bind
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("core.enter_insert", core_actions.enter_insert_mode, "Insert before cursor"),
    ActionRef("core.insert_after", core_actions.insert_after_cursor, "Insert after cursor"),
    ActionRef("core.insert_line_start", core_actions.insert_at_line_start, "Insert at line start"),
    ActionRef("core.insert_line_end", core_actions.insert_at_line_end, "Append at line end"),
    ActionRef("core.open_below", core_actions.open_line_below, "Open a line below"),
    ActionRef("core.open_above", core_actions.open_line_above, "Open a line above"),
    ActionRef("core.enter_visual", core_actions.enter_visual_mode, "Enter visual mode"),
    ActionRef("core.enter_command", core_actions.enter_command_mode, "Open the command line"),
    ActionRef("core.exit_to_normal", core_actions.exit_to_normal_mode, "Return to normal mode"),
    ActionRef("core.noop", core_actions.noop_action, "Do nothing"),
    ActionRef("motion.left", motion_actions.move_left, "Cursor left"),
    ActionRef("motion.right", motion_actions.move_right, "Cursor right"),
    ActionRef("motion.up", motion_actions.move_up, "Cursor up"),
    ActionRef("motion.down", motion_actions.move_down, "Cursor down"),
    ActionRef("motion.line_start", motion_actions.line_start, "Start of line"),
    ActionRef("motion.line_end", motion_actions.line_end, "End of line"),
    ActionRef("motion.document_start", motion_actions.document_start, "First line"),
    ActionRef("motion.document_end", motion_actions.document_end, "Last line"),
    ActionRef("motion.page_up", motion_actions.page_up, "Page up"),
    ActionRef("motion.page_down", motion_actions.page_down, "Page down"),
    ActionRef("edit.delete_char", edit_actions.delete_char, "Delete character"),
    ActionRef("edit.delete_line", edit_actions.delete_line, "Delete line"),
    ActionRef("edit.delete_to_eol", edit_actions.delete_to_end_of_line, "Delete to end of line"),
    ActionRef("edit.join_lines", edit_actions.join_lines, "Join with next line"),
    ActionRef("edit.newline", edit_actions.insert_newline, "Break the line"),
    ActionRef("edit.tab", edit_actions.insert_tab, "Insert a tab"),
    ActionRef("edit.backspace", edit_actions.backspace, "Delete before caret"),
    ActionRef("edit.delete_forward", edit_actions.delete_forward, "Delete under caret"),
    ActionRef("visual.delete_selection", visual_actions.delete_selection, "Delete selection"),
    ActionRef("visual.swap_anchor", visual_actions.swap_anchor, "Swap selection ends"),
    ActionRef("command.submit_line", command_actions.submit_command_line, "Run the command line"),
    ActionRef("command.cancel_line", command_actions.cancel_command_line, "Close the command line"),
)

_ARROWS = (
    ("LEFT", "motion.left"),
    ("RIGHT", "motion.right"),
    ("UP", "motion.up"),
    ("DOWN", "motion.down"),
    ("HOME", "motion.line_start"),
    ("END", "motion.line_end"),
    ("PAGEUP", "motion.page_up"),
    ("PAGEDOWN", "motion.page_down"),
)

_VI_MOTIONS = (
    ("h", "motion.left"),
    ("l", "motion.right"),
    ("k", "motion.up"),
    ("j", "motion.down"),
    ("0", "motion.line_start"),
    ("$", "motion.line_end"),
    ("G", "motion.document_end"),
    ("ctrl+u", "motion.page_up"),
    ("ctrl+d", "motion.page_down"),
)


def _motions(mode: str) -> tuple[Binding, ...]:
    keyed = [bind(mode, (key,), action) for key, action in (*_VI_MOTIONS, *_ARROWS)]
    keyed.append(bind(mode, ("g", "g"), "motion.document_start"))
    return tuple(keyed)


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    *_motions("normal"),
    bind("normal", ("i",), "core.enter_insert"),
    bind("normal", ("a",), "core.insert_after"),
    bind("normal", ("I",), "core.insert_line_start"),
    bind("normal", ("A",), "core.insert_line_end"),
    bind("normal", ("o",), "core.open_below"),
    bind("normal", ("O",), "core.open_above"),
    bind("normal", ("v",), "core.enter_visual"),
    bind("normal", (":",), "core.enter_command"),
    bind("normal", ("ESC",), "core.noop"),
    bind("normal", ("x",), "edit.delete_char"),
    bind("normal", ("DELETE",), "edit.delete_char"),
    bind("normal", ("d", "d"), "edit.delete_line"),
    bind("normal", ("D",), "edit.delete_to_eol"),
    bind("normal", ("J",), "edit.join_lines"),
    *(bind("insert", (key,), action) for key, action in _ARROWS),
    bind("insert", ("ESC",), "core.exit_to_normal"),
    bind("insert", ("ENTER",), "edit.newline"),
    bind("insert", ("TAB",), "edit.tab"),
    bind("insert", ("BACKSPACE",), "edit.backspace"),
    bind("insert", ("DELETE",), "edit.delete_forward"),
    *_motions("visual"),
    bind("visual", ("ESC",), "core.exit_to_normal"),
    bind("visual", ("v",), "core.exit_to_normal"),
    bind("visual", ("d",), "visual.delete_selection"),
    bind("visual", ("x",), "visual.delete_selection"),
    bind("visual", ("o",), "visual.swap_anchor"),
    bind("command", ("ESC",), "command.cancel_line"),
    bind("command", ("ENTER",), "command.submit_line"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings for every mode."""

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
