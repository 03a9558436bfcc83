"""Mode manager routing keys to mode handlers and reducing their actions."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from vim_playground.actions.events import Action
from vim_playground.buffer.state import EditorState, Mode
from vim_playground.keymaps import KeymapRegistry, load_default_keymaps
from vim_playground.runtime import telemetry

from .base_mode import KeyInput, ModeHandler, ModeResult
from .command_mode import CommandMode
from .insert_mode import BlockInsertMode, InsertMode, ReplaceMode
from .normal_mode import NormalMode
from .reducer import reduce
from .visual_mode import VisualMode
from .wait_mode import WaitMode

DEFAULT_HANDLERS: tuple[Type[ModeHandler], ...] = (
    NormalMode,
    InsertMode,
    VisualMode,
    CommandMode,
    BlockInsertMode,
    ReplaceMode,
    WaitMode,
)

ROUTES: Dict[Mode, str] = {
    Mode.NORMAL: NormalMode.name,
    Mode.INSERT: InsertMode.name,
    Mode.VISUAL: VisualMode.name,
    Mode.VISUAL_LINE: VisualMode.name,
    Mode.VISUAL_BLOCK: VisualMode.name,
    Mode.VISUAL_BLOCK_INSERT: BlockInsertMode.name,
    Mode.COMMAND: CommandMode.name,
    Mode.REPLACE: ReplaceMode.name,
}


class ModeManager:
    """Picks the handler for the current state and applies what it returns."""

    def __init__(
        self,
        *,
        keymap_registry: KeymapRegistry | None = None,
        load_defaults: bool = True,
        handlers: Iterable[Type[ModeHandler]] = DEFAULT_HANDLERS,
    ) -> None:
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="vim_playground.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self._handlers: Dict[str, ModeHandler] = {}
        for handler_cls in handlers:
            self.register_mode(handler_cls)
        self.last_result: Optional[ModeResult] = None

    def register_mode(self, handler_cls: Type[ModeHandler]) -> ModeHandler:
        handler = handler_cls(self.keymap_registry)
        if handler.name in self._handlers:
            raise ValueError(f"Mode '{handler.name}' already registered")
        self._handlers[handler.name] = handler
        return handler

    def handler_for(self, state: EditorState) -> ModeHandler:
        """A pending character wait outranks the mode itself."""

        name = WaitMode.name if state.pending is not None else ROUTES[state.mode]
        try:
            return self._handlers[name]
        except KeyError as exc:
            raise KeyError(f"No handler registered for mode '{name}'") from exc

    def dispatch(self, state: EditorState, key: KeyInput) -> EditorState:
        handler = self.handler_for(state)
        with telemetry.span(
            name=f"mode::{handler.name}",
            component=True,
            metadata={"key": key.token, "mode": state.mode.value},
        ):
            result = handler.handle_key(state, key)
            updated = self.apply(state, result.actions)
        self.last_result = result
        if updated.mode is not state.mode:
            telemetry.record_event(
                "mode.switch",
                data={"from": state.mode.value, "to": updated.mode.value},
            )
        return updated

    def apply(self, state: EditorState, actions: Iterable[Action]) -> EditorState:
        for action in actions:
            state = reduce(state, action)
        return state


_default_manager: Optional[ModeManager] = None


def default_manager() -> ModeManager:
    global _default_manager
    if _default_manager is None:
        _default_manager = ModeManager()
    return _default_manager


def dispatch(state: EditorState, key: KeyInput) -> EditorState:
    """Apply one key to ``state`` using the built-in keymaps."""

    return default_manager().dispatch(state, key)


__all__ = [
    "DEFAULT_HANDLERS",
    "ROUTES",
    "ModeManager",
    "default_manager",
    "dispatch",
]
