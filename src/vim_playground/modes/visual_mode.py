"""Visual mode shared by the character, line and block selection shapes."""

from __future__ import annotations

from vim_playground.buffer.state import EditorState
from vim_playground.keymaps import VISUAL

from .base_mode import IGNORED, KeyInput, ModeHandler, ModeResult


class VisualMode(ModeHandler):
    name = "visual"
    keymap = VISUAL

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        result = self.resolve(state, key)
        if result is None:
            return IGNORED
        return result


__all__ = ["VisualMode"]
