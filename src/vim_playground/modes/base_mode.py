"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from vim_playground.actions.events import Action
from vim_playground.buffer.state import EditorState
from vim_playground.keymaps import KeymapRegistry, KeyStroke
from vim_playground.keymaps.defaults import ESCAPE_KEYS
from vim_playground.runtime import telemetry


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @classmethod
    def parse(cls, token: str) -> "KeyInput":
        stroke = KeyStroke.parse(token)
        return cls(stroke.key, stroke.modifiers)

    @property
    def stroke(self) -> KeyStroke:
        return KeyStroke(self.key, self.modifiers, self.text)

    @property
    def token(self) -> str:
        return self.stroke.token

    @property
    def char(self) -> Optional[str]:
        return self.stroke.char

    @property
    def is_escape(self) -> bool:
        return not self.modifiers and self.key in ESCAPE_KEYS


@dataclass(frozen=True, slots=True)
class ModeResult:
    """Result returned from ``ModeHandler.handle_key``."""

    consumed: bool
    actions: Tuple[Action, ...] = ()
    status: str = "ok"
    message: Optional[str] = None


IGNORED = ModeResult(consumed=False, status="ignored")


class ModeHandler:
    """Base class all concrete key handlers inherit from.

    Handlers are stateless: everything they need lives on ``EditorState``,
    and they answer with the actions to reduce rather than editing anything.
    """

    name: str = "mode"
    keymap: Optional[str] = None

    def __init__(self, registry: KeymapRegistry) -> None:
        self.registry = registry

    def handle_key(
        self, state: EditorState, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError

    def resolve(self, state: EditorState, key: KeyInput) -> Optional[ModeResult]:
        """Run the keymap binding for ``key``, or ``None`` when it is unbound."""

        if self.keymap is None:
            return None
        binding = self.registry.lookup(self.keymap, key.token)
        if binding is None:
            return None
        action = self.registry.get_action(binding.action_id)
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": binding.id, "action": action.id},
        ):
            actions = action(state, key.stroke)
        return ModeResult(consumed=True, actions=actions, message=action.id)


__all__ = ["IGNORED", "KeyInput", "ModeHandler", "ModeResult"]
