"""Key strokes, named key actions and the bindings that join them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Union

from vim_playground.actions.events import Action
from vim_playground.buffer.state import EditorState

HandlerResult = Union[Action, Sequence[Action], None]
KeyHandler = Callable[[EditorState, "KeyStroke"], HandlerResult]


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press."""

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def char(self) -> Optional[str]:
        """The printable character this stroke types, if any."""

        if set(self.modifiers) & {"ctrl", "alt", "meta"}:
            return None
        if self.text is not None and len(self.text) == 1 and self.text.isprintable():
            return self.text
        if len(self.key) == 1 and self.key.isprintable():
            return self.key
        return None

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+r"``-style tokens; ``"+"`` alone is a key."""

        if token == "+" or "+" not in token[:-1]:
            return cls(token)
        *modifiers, key = token.split("+")
        if key == "":
            key = "+"
            modifiers = modifiers[:-1]
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """A named key handler; calling it always yields a tuple of actions."""

    id: str
    handler: KeyHandler
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError(f"handler for '{self.id}' must be callable")

    def __call__(self, state: EditorState, stroke: KeyStroke) -> tuple[Action, ...]:
        produced = self.handler(state, stroke)
        if produced is None:
            return ()
        if isinstance(produced, (list, tuple)):
            return tuple(produced)
        return (produced,)  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one keystroke in a keymap with an action."""

    id: str
    mode: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = [
    "ActionRef",
    "Binding",
    "HandlerResult",
    "KeyHandler",
    "KeyStroke",
]
