"""Undo/redo handlers and the snapshot policy applied around each action."""

from __future__ import annotations

from dataclasses import replace

from vim_playground.buffer.state import SESSION_MODES, EditorState, WaitKind
from vim_playground.buffer.validation import clamp_cursor
from vim_playground.runtime import telemetry

from .events import (
    Action,
    JoinLines,
    LineOp,
    Paste,
    Redo,
    ReplaceChar,
    ResolveWait,
    Undo,
    VisualCase,
    VisualChange,
    VisualDelete,
    VisualIndent,
    VisualJoin,
    VisualReplace,
)

ATOMIC_ACTIONS: tuple[type, ...] = (
    LineOp,
    Paste,
    JoinLines,
    VisualDelete,
    VisualChange,
    VisualIndent,
    VisualCase,
    VisualJoin,
)


def is_atomic(action: Action, before: EditorState) -> bool:
    """Whether applying ``action`` to ``before`` completes one undoable change."""

    if isinstance(action, ATOMIC_ACTIONS):
        return True
    if isinstance(action, (ReplaceChar, VisualReplace)):
        return action.char is not None
    if isinstance(action, ResolveWait):
        return action.char is not None and before.pending is WaitKind.VISUAL_REPLACE
    return False


def ends_session(before: EditorState, after: EditorState) -> bool:
    return before.mode in SESSION_MODES and after.mode not in SESSION_MODES


def starts_session(before: EditorState, after: EditorState) -> bool:
    return before.mode not in SESSION_MODES and after.mode in SESSION_MODES


def seed(state: EditorState) -> EditorState:
    """Create the timeline lazily with the pre-action snapshot at index 0."""

    if not state.history.is_empty:
        return state
    timeline = replace(state.history, limit=state.settings.history_limit)
    return replace(state, history=timeline.push(state.snapshot()))


def refresh_head(state: EditorState) -> EditorState:
    """Point the head snapshot at the live cursor when the text is unchanged.

    Motions are not recorded, so without this an undo would put the cursor
    back wherever the previous change left it.
    """

    head = state.history.current
    if head is None or head.lines != state.lines or head.cursor == state.cursor:
        return state
    return replace(state, history=state.history.replace_current(state.snapshot()))


def record(state: EditorState) -> EditorState:
    timeline = state.history.push(state.snapshot())
    telemetry.record_event(
        "history.push",
        level="debug",
        data={"index": timeline.index, "depth": len(timeline.entries)},
    )
    return replace(state, history=timeline)


def undo(state: EditorState, action: Undo) -> EditorState:
    del action
    timeline, snapshot = state.history.undo()
    if snapshot is None:
        return state
    telemetry.record_event("history.undo", level="debug", data={"index": timeline.index})
    document = state.document.replace(lines=snapshot.lines)
    return replace(
        state,
        document=document,
        cursor=clamp_cursor(
            document, snapshot.cursor, insert_like=state.mode.is_insert_like
        ),
        history=timeline,
        command_buffer="",
    )


def redo(state: EditorState, action: Redo) -> EditorState:
    del action
    timeline, snapshot = state.history.redo()
    if snapshot is None:
        return state
    telemetry.record_event("history.redo", level="debug", data={"index": timeline.index})
    document = state.document.replace(lines=snapshot.lines)
    return replace(
        state,
        document=document,
        cursor=clamp_cursor(
            document, snapshot.cursor, insert_like=state.mode.is_insert_like
        ),
        history=timeline,
        command_buffer="",
    )


__all__ = [
    "ATOMIC_ACTIONS",
    "ends_session",
    "is_atomic",
    "record",
    "redo",
    "refresh_head",
    "seed",
    "starts_session",
    "undo",
]
