"""Insert-like modes: plain insert, block insert and single-character replace."""

from __future__ import annotations

from vim_playground.actions.events import ExitMode, ReplaceChar, TypeChar
from vim_playground.buffer.state import EditorState
from vim_playground.keymaps import BLOCK_INSERT, INSERT

from .base_mode import IGNORED, KeyInput, ModeHandler, ModeResult


class InsertMode(ModeHandler):
    name = "insert"
    keymap = INSERT

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        result = self.resolve(state, key)
        if result is not None:
            return result
        char = key.char
        if char is None:
            return IGNORED
        return ModeResult(consumed=True, actions=(TypeChar(char),))


class BlockInsertMode(InsertMode):
    """Typing fans out to every block line; Enter and Escape both finish."""

    name = "block_insert"
    keymap = BLOCK_INSERT


class ReplaceMode(ModeHandler):
    """Waits for the one character that ``r`` overwrites the cursor with."""

    name = "replace"

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        del state
        if key.is_escape:
            return ModeResult(
                consumed=True, actions=(ExitMode(),), message="exit_replace"
            )
        char = key.char
        if char is None:
            return IGNORED
        return ModeResult(consumed=True, actions=(ReplaceChar(char),))


__all__ = ["BlockInsertMode", "InsertMode", "ReplaceMode"]
