"""Apply a single ``Action`` to an ``EditorState``, recording history as needed."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict

from vim_playground.actions import core, editing, history, motion, search, visual
from vim_playground.actions import events as ev
from vim_playground.buffer.state import EditorState, Mode, WaitKind

Reducer = Callable[[EditorState, ev.Action], EditorState]


def resolve_wait(state: EditorState, action: ev.ResolveWait) -> EditorState:
    kind = state.pending
    if kind is None:
        return state
    cleared = replace(state, pending=None)
    if action.char is None:
        return cleared
    if kind is WaitKind.VISUAL_REPLACE:
        return visual.visual_replace(cleared, ev.VisualReplace(action.char))
    return motion.find_char(
        cleared, action.char, forward=kind is WaitKind.FIND_FORWARD
    )


def _backspace(state: EditorState, action: ev.DeleteChar) -> EditorState:
    if state.mode is Mode.COMMAND:
        return search.search_backspace(state)
    return editing.delete_char(state, action)


def _type_char(state: EditorState, action: ev.TypeChar) -> EditorState:
    if state.mode is Mode.COMMAND:
        return search.search_type_char(state, ev.SearchTypeChar(action.char))
    return editing.type_char(state, action)


REDUCERS: Dict[type, Reducer] = {
    ev.CharMove: motion.move_char,
    ev.WordMove: motion.move_word,
    ev.LineBoundary: motion.move_line_boundary,
    ev.Scroll: motion.scroll,
    ev.Jump: motion.jump,
    ev.BracketMatch: motion.match_bracket,
    ev.EnterMode: core.enter_mode,
    ev.ExitMode: core.exit_mode,
    ev.SwapAnchor: visual.swap_anchor,
    ev.TypeChar: _type_char,
    ev.DeleteChar: _backspace,
    ev.NewLine: editing.new_line,
    ev.Substitute: editing.substitute,
    ev.ReplaceChar: editing.replace_char,
    ev.JoinLines: editing.join_lines,
    ev.LineOp: editing.line_op,
    ev.Paste: editing.paste,
    ev.VisualDelete: visual.visual_delete,
    ev.VisualYank: visual.visual_yank,
    ev.VisualChange: visual.visual_change,
    ev.VisualCase: visual.visual_case,
    ev.VisualIndent: visual.visual_indent,
    ev.VisualJoin: visual.visual_join,
    ev.VisualReplace: visual.visual_replace,
    ev.VisualBlockInsert: visual.block_insert,
    ev.SearchStart: search.search_start,
    ev.SearchTypeChar: search.search_type_char,
    ev.SearchSubmit: search.search_submit,
    ev.SearchNext: search.search_next,
    ev.SearchWord: search.search_word,
    ev.AppendToBuffer: core.append_to_buffer,
    ev.ClearBuffer: core.clear_buffer,
    ev.Undo: history.undo,
    ev.Redo: history.redo,
    ev.WaitForChar: core.wait_for_char,
    ev.ResolveWait: resolve_wait,
}  # type: ignore[dict-item]


def reduce(state: EditorState, action: ev.Action) -> EditorState:
    """Return the state after ``action``; ``state`` itself is never modified.

    Atomic edits and the end of an insert/replace session push a history
    snapshot. The timeline is seeded on the first action, and its head cursor
    follows motions until an edit, a session or a selection starts.
    """

    handler = REDUCERS.get(type(action))
    if handler is None:
        raise TypeError(f"No reducer registered for {type(action).__name__}")

    before = history.seed(state)
    after = handler(before, action)
    atomic = history.is_atomic(action, before)

    # Inside a visual mode the head already holds the cursor where the
    # selection began.
    if not before.mode.is_visual and (
        atomic
        or history.starts_session(before, after)
        or after.mode.is_visual
    ):
        after = replace(after, history=history.refresh_head(before).history)
    if atomic or history.ends_session(before, after):
        after = history.record(after)
    return after


__all__ = ["REDUCERS", "Reducer", "reduce", "resolve_wait"]
