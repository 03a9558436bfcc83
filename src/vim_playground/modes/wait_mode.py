"""Argument capture for commands that take one trailing character (``f``, ``F``, visual ``r``)."""

from __future__ import annotations

from vim_playground.actions.events import ResolveWait
from vim_playground.buffer.state import EditorState

from .base_mode import IGNORED, KeyInput, ModeHandler, ModeResult


class WaitMode(ModeHandler):
    """Takes priority over every mode while ``state.pending`` is set."""

    name = "wait"

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        if key.is_escape:
            return ModeResult(
                consumed=True,
                actions=(ResolveWait(None),),
                status="cancelled",
                message="wait_cancelled",
            )
        char = key.char
        if char is None:
            return IGNORED
        kind = state.pending.value if state.pending else None
        return ModeResult(consumed=True, actions=(ResolveWait(char),), message=kind)


__all__ = ["WaitMode"]
