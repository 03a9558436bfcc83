"""Search command line opened with ``/`` and closed with Enter or Escape."""

from __future__ import annotations

from vim_playground.actions.events import SearchTypeChar
from vim_playground.buffer.state import EditorState
from vim_playground.keymaps import COMMAND

from .base_mode import IGNORED, KeyInput, ModeHandler, ModeResult


class CommandMode(ModeHandler):
    name = "command"
    keymap = COMMAND

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        result = self.resolve(state, key)
        if result is not None:
            return result
        char = key.char
        if char is None:
            return IGNORED
        return ModeResult(
            consumed=True, actions=(SearchTypeChar(char),), status="typing"
        )


__all__ = ["CommandMode"]
