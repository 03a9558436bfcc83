"""Executable Textual app that hosts the Vim playground engine."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from vim_playground.buffer import EditorMirror
from vim_playground.config import EngineConfig
from vim_playground.runtime import telemetry
from vim_playground.session import EditorSession

from .controller import TextualUIHooks, TextualVimAdapter

NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
}
QUIT_KEYS = frozenset({"ctrl+c", "ctrl+q"})


def render_mirror(mirror: EditorMirror) -> Text:
    """Buffer text with the selection and cursor cell highlighted."""

    text = Text()
    selected = {span.line: span for span in mirror.selection}
    for row, line in enumerate(mirror.lines):
        # Pad so the cursor and selected empty lines stay visible.
        padded = line + " "
        rendered = Text(padded)
        span = selected.get(row)
        if span is not None:
            end = max(span.end_col, span.start_col + 1)
            rendered.stylize("reverse", span.start_col, end)
        if row == mirror.cursor.line:
            col = min(mirror.cursor.col, len(padded) - 1)
            rendered.stylize("bold black on bright_white", col, col + 1)
        text.append_text(rendered)
        if row < len(mirror.lines) - 1:
            text.append("\n")
    return text


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""
    command_text: str = ""


class VimPlaygroundApp(App[None]):
    """Minimal Textual UI embedding the Vim playground."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, settings: Optional[EngineConfig] = None) -> None:
        super().__init__()
        self._state = UIState()
        self._settings = settings
        self.session: EditorSession | None = None
        self.adapter: TextualVimAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None
        self._logger = telemetry.get_logger("vim_playground.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._status_widget
        yield self._command_widget
        yield Footer()

    def on_mount(self) -> None:
        self.session = EditorSession(settings=self._settings)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_command=self._show_command,
            log=self._log_line,
        )
        self.adapter = TextualVimAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _update_buffer(self, mirror: EditorMirror) -> None:
        self._state.buffer_text = mirror.text
        if self._buffer_widget:
            self._buffer_widget.update(render_mirror(mirror))

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _show_command(self, command: str) -> None:
        self._state.command_text = command
        if self._command_widget:
            self._command_widget.update(command)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in QUIT_KEYS:
            return None
        if key.startswith("ctrl+"):
            return (key.rsplit("+", 1)[-1], None, ("ctrl",))
        if key in NAMED_KEYS:
            return (NAMED_KEYS[key], None, ())
        character = event.character
        if character and len(character) == 1 and character.isprintable():
            return (character, character, ())
        return (key.upper(), None, ())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Vim playground Textual demo.")
    parser.add_argument(
        "--preset",
        choices=telemetry.PRESETS,
        default=os.environ.get(f"{telemetry.ENV_PREFIX}PRESET") or None,
        help="telelog preset to configure before starting",
    )
    parser.add_argument(
        "--log-console",
        action="store_true",
        help="Keep console logging on (it draws over the UI)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.preset:
        log_settings = telemetry.preset_settings(args.preset)
    else:
        log_settings = telemetry.LogSettings.from_env()
    if not args.log_console:
        log_settings = replace(log_settings, console=False)
    telemetry.configure(config=log_settings.build())
    app = VimPlaygroundApp(settings=EngineConfig.from_env())
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
