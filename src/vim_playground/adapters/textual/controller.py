"""Glue between Textual key events and an ``EditorSession``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from vim_playground.buffer import EditorMirror
from vim_playground.modes import KeyInput, ModeResult
from vim_playground.session import EditorSession


def _ignore(*_args: object) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Widget callbacks; only the buffer view is mandatory."""

    update_buffer: Callable[[EditorMirror], None]
    update_status: Callable[[str], None] = _ignore
    show_command: Callable[[str], None] = _ignore
    log: Callable[[str], None] = _ignore


class TextualVimAdapter:
    """Feeds keys into a session and pushes every resulting snapshot to the UI."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.push()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        key_input = KeyInput(
            key=key, text=text, modifiers=tuple(str(mod).lower() for mod in modifiers)
        )
        self._trace("key ->", key=key, text=text, mods=key_input.modifiers or None)
        self.session.feed(key_input)
        result = self.session.last_result or ModeResult(consumed=False)
        self.push()
        self._trace(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def push(self) -> None:
        """Send the current snapshot to every hook."""

        mirror = self.session.mirror()
        self.hooks.update_buffer(mirror)
        self.hooks.update_status(mirror.status)
        self.hooks.show_command(mirror.command_bar or "")

    def _trace(self, prefix: str, **fields: object) -> None:
        state = self.session.state
        details: dict[str, object] = {
            "mode": state.mode.value,
            "cursor": tuple(state.cursor),
            "pending": state.pending.value if state.pending else None,
            "buffer": state.command_buffer or None,
            "version": state.document.version,
            **fields,
        }
        rendered = " ".join(
            f"{name}={value!r}" for name, value in details.items() if value is not None
        )
        self.hooks.log(f"{prefix} {rendered}")


__all__ = ["TextualVimAdapter", "TextualUIHooks"]
