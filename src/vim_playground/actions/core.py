"""Mode transitions and command-buffer bookkeeping shared across modes."""

from __future__ import annotations

from dataclasses import replace

from vim_playground.buffer.document import Position
from vim_playground.buffer.state import EditorState, Mode
from vim_playground.buffer.validation import clamp_cursor

from .events import AppendToBuffer, ClearBuffer, EnterMode, ExitMode, WaitForChar


def exit_to_normal(state: EditorState) -> EditorState:
    """The single path back to NORMAL.

    Leaving an insert-like mode steps the caret back one column; every
    transient field (anchor, block context, wait, command bar, command
    buffer) is cleared.
    """

    line, col = state.cursor
    if state.mode.is_insert_like:
        col = max(0, col - 1)
    return replace(
        state,
        mode=Mode.NORMAL,
        cursor=clamp_cursor(state.document, Position(line, col)),
        visual_start=None,
        visual_block=None,
        pending=None,
        command_bar=None,
        command_buffer="",
    )


def enter_mode(state: EditorState, action: EnterMode) -> EditorState:
    target = action.mode
    if target is Mode.NORMAL:
        return exit_to_normal(state)

    if target.is_visual:
        if state.mode is target:
            return exit_to_normal(state)
        anchor = state.visual_start if state.mode.is_visual else state.cursor
        return replace(
            state,
            mode=target,
            visual_start=anchor,
            pending=None,
            command_buffer="",
        )

    if target is Mode.COMMAND:
        return replace(state, mode=Mode.COMMAND, command_bar="/", command_buffer="")

    if target is Mode.VISUAL_BLOCK_INSERT:
        # Only reachable through a block selection; see visual.block_insert.
        return state

    return replace(
        state,
        mode=target,
        visual_start=None,
        pending=None,
        command_buffer="",
    )


def exit_mode(state: EditorState, action: ExitMode) -> EditorState:
    del action
    return exit_to_normal(state)


def wait_for_char(state: EditorState, action: WaitForChar) -> EditorState:
    return replace(state, pending=action.kind, command_buffer="")


def append_to_buffer(state: EditorState, action: AppendToBuffer) -> EditorState:
    return replace(state, command_buffer=state.command_buffer + action.key)


def clear_buffer(state: EditorState, action: ClearBuffer) -> EditorState:
    del action
    return replace(state, command_buffer="")


__all__ = [
    "append_to_buffer",
    "clear_buffer",
    "enter_mode",
    "exit_mode",
    "exit_to_normal",
    "wait_for_char",
]
