"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

import grapheme

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.logging import TextualHandler
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use mtx.adapters.textual.app"
    ) from exc

from mtx import __version__, selection
from mtx.modes.machine import Mode
from mtx.modes.mode_manager import ModeManager, create_default_manager
from mtx.runtime import telemetry
from mtx.session import EditorSession, Viewport, open_session

from .controller import TextualEditorAdapter, TextualUIHooks

_SPECIAL_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "tab": "TAB",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "home": "HOME",
    "end": "END",
    "pageup": "PAGEUP",
    "pagedown": "PAGEDOWN",
}

CURSOR_STYLE = "reverse"
SELECTION_STYLE = "black on bright_cyan"
FILLER_STYLE = "dim"
WELCOME_MESSAGE = f"mtx editor -- version {__version__}"
# status line and command line
_CHROME_ROWS = 2


@dataclass
class UIState:
    status_text: str = ""
    command_text: str = ""


def render_view(session: EditorSession) -> Text:
    """Visible window of the buffer with cursor and selection highlighted."""

    offset = session.offset
    width = session.viewport.width
    height = session.viewport.height
    low = high = None
    if session.selection is not None:
        low, high = selection.normalize(session.selection)
    show_cursor = session.mode is not Mode.COMMAND

    view = Text(no_wrap=True, overflow="crop")
    for row in range(height):
        y = offset.y + row
        if row:
            view.append("\n")
        line = session.buffer.row(y)
        if line is None:
            if session.buffer.is_empty() and row == height // 3:
                view.append(_welcome_line(width), style=FILLER_STYLE)
            else:
                view.append("~", style=FILLER_STYLE)
            continue
        visible = line.render(offset.x, offset.x + width)
        x = offset.x
        for cluster in grapheme.graphemes(visible):
            style = None
            if low is not None and high is not None and low.key <= (y, x) <= high.key:
                style = SELECTION_STYLE
            if show_cursor and session.cursor.y == y and session.cursor.x == x:
                style = CURSOR_STYLE
            view.append(cluster, style=style)
            x += 1
        if show_cursor and session.cursor.y == y and session.cursor.x >= x:
            view.append(" ", style=CURSOR_STYLE)
    return view


def _welcome_line(width: int) -> str:
    padding = max(width - len(WELCOME_MESSAGE), 0) // 2
    return f"~{' ' * max(padding - 1, 0)}{WELCOME_MESSAGE}"[:width]


def render_status(session: EditorSession) -> str:
    buffer = session.buffer
    modified = " (modified)" if buffer.is_dirty() else ""
    left = f"{buffer.name} - {len(buffer)} lines{modified}"
    right = f"{session.mode.label}  {session.cursor.y + 1}/{len(buffer)}"
    gap = max(session.viewport.width - len(left) - len(right), 1)
    return f"{left}{' ' * gap}{right}"


class EditorApp(App[None]):
    """Minimal Textual UI embedding the editor core."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		content-align: left top;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, path: Optional[str] = None) -> None:
        super().__init__()
        self._path = path
        self._state = UIState()
        self.manager: ModeManager | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._command_widget

    def on_mount(self) -> None:
        session = open_session(self._path, viewport=self._viewport_for(self.size))
        self.manager = create_default_manager(session)
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            show_command=self._show_command,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.manager, hooks)

    def on_resize(self, event: events.Resize) -> None:
        if not self.manager:
            return
        viewport = self._viewport_for(event.size)
        self.manager.session.viewport = viewport
        self._update_view(self.manager.session)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()
        if self.adapter.session.should_quit:
            self.exit()

    def _update_view(self, session: EditorSession) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_view(session))
        self._render_status()

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        self._render_status()

    def _show_command(self, command: str) -> None:
        self._state.command_text = command
        if self._command_widget:
            self._command_widget.update(command or self._state.status_text)

    def _render_status(self) -> None:
        if self._status_widget and self.manager:
            self._status_widget.update(render_status(self.manager.session))
        if self._command_widget and not self._state.command_text:
            self._command_widget.update(self._state.status_text)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "command.edit" and self.manager:
            self._update_view(self.manager.session)

    def _log_line(self, line: str) -> None:
        self.log(line)

    @staticmethod
    def _viewport_for(size: Any) -> Viewport:
        return Viewport(
            width=max(size.width, 1), height=max(size.height - _CHROME_ROWS, 1)
        )

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        if key in _SPECIAL_KEYS:
            return (_SPECIAL_KEYS[key], None, ())
        if event.is_printable and event.character:
            return (event.character, event.character, ())
        *modifiers, name = key.split("+")
        if modifiers:
            return (name, None, tuple(m.upper() for m in modifiers))
        return (key.upper(), None, ())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the mtx modal text editor.")
    parser.add_argument("path", nargs="?", help="File to open")
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "quiet"),
        default=os.environ.get("MTX_LOG_PRESET", "quiet"),
        help="Logging preset (default: quiet; 'production' writes to mtx.log)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset == "development":
        # console output would draw over the screen; send it to textual devtools
        telemetry.configure(
            config=telemetry.TelemetryConfig(level="DEBUG", console=False)
        )
        telemetry.attach_handler(TextualHandler())
    else:
        telemetry.configure(preset=args.log_preset)
    app = EditorApp(path=args.path)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
