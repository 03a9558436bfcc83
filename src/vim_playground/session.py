"""Stateful holder that hosts use to drive the pure engine."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence, Union

from vim_playground.actions.events import Action
from vim_playground.buffer import (
    EditorMirror,
    EditorState,
    RegisterValue,
    initial_state,
    mirror_state,
)
from vim_playground.config import EngineConfig
from vim_playground.modes import KeyInput, ModeManager, ModeResult, reduce

KeyLike = Union[KeyInput, str]


def as_key(key: KeyLike) -> KeyInput:
    """Accept ready ``KeyInput`` values or tokens such as ``"x"`` or ``"ctrl+r"``."""

    if isinstance(key, KeyInput):
        return key
    return KeyInput.parse(key)


class EditorSession:
    """Keeps the latest ``EditorState`` between key presses.

    Passing a plain string to ``feed_keys`` types it one character at a time,
    so ``session.feed_keys("12G")`` behaves like three key presses.
    """

    def __init__(
        self,
        state: Optional[EditorState] = None,
        *,
        lines: Optional[Sequence[str]] = None,
        settings: Optional[EngineConfig] = None,
        manager: Optional[ModeManager] = None,
    ) -> None:
        self.state = state or initial_state(lines, settings=settings)
        self.manager = manager or ModeManager()

    @property
    def last_result(self) -> Optional[ModeResult]:
        return self.manager.last_result

    def feed(self, key: KeyLike) -> EditorState:
        self.state = self.manager.dispatch(self.state, as_key(key))
        return self.state

    def feed_keys(self, keys: Iterable[KeyLike]) -> EditorState:
        for key in keys:
            self.feed(key)
        return self.state

    def apply(self, action: Action) -> EditorState:
        self.state = reduce(self.state, action)
        return self.state

    def set_clipboard(self, text: str) -> EditorState:
        """Load text from the host clipboard; a trailing newline makes it line-wise."""

        self.state = replace(self.state, register=RegisterValue.infer(text))
        return self.state

    def mirror(self) -> EditorMirror:
        return mirror_state(self.state)


__all__ = ["EditorSession", "KeyLike", "as_key"]
