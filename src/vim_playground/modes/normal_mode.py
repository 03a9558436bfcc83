"""Normal mode: count/prefix accumulation in front of the keymap."""

from __future__ import annotations

from vim_playground.actions.events import AppendToBuffer, ClearBuffer
from vim_playground.buffer.state import EditorState
from vim_playground.keymaps import NORMAL
from vim_playground.runtime import telemetry

from .base_mode import KeyInput, ModeHandler, ModeResult
from .command_buffer import BufferStatus, CommandBuffer

# Never swallowed by a pending prefix.
EARLY_KEYS = frozenset({"u"})


class NormalMode(ModeHandler):
    name = "normal"
    keymap = NORMAL

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        if key.modifiers or key.token in EARLY_KEYS:
            return self._passthrough(state, key)

        buffer = CommandBuffer.parse(state.command_buffer)
        _, outcome = buffer.feed(key.key)

        if outcome.status is BufferStatus.PENDING:
            return ModeResult(
                consumed=True,
                actions=(AppendToBuffer(key.key),),
                status="pending",
                message="awaiting_sequence",
            )
        if outcome.status is BufferStatus.CANCELLED:
            telemetry.record_event(
                "command_buffer.cancel",
                level="debug",
                data={"buffer": state.command_buffer, "key": key.token},
            )
            return ModeResult(
                consumed=True, actions=(ClearBuffer(),), status="cancelled"
            )
        if outcome.status is BufferStatus.COMPLETE and outcome.action is not None:
            return ModeResult(
                consumed=True,
                actions=(ClearBuffer(), outcome.action),
                message=buffer.text + key.key,
            )
        return self._passthrough(state, key)

    def _passthrough(self, state: EditorState, key: KeyInput) -> ModeResult:
        clear = (ClearBuffer(),) if state.command_buffer else ()
        result = self.resolve(state, key)
        if result is None:
            return ModeResult(consumed=bool(clear), actions=clear, status="unbound")
        return ModeResult(
            consumed=True,
            actions=clear + result.actions,
            message=result.message,
        )


__all__ = ["EARLY_KEYS", "NormalMode"]
