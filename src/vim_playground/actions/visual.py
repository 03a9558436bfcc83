"""Operators over a visual selection in character, line or block shape."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from vim_playground.buffer.document import BufferDocument, Position
from vim_playground.buffer.registers import RegisterShape, RegisterValue
from vim_playground.buffer.state import EditorState, Mode, VisualBlock, WaitKind
from vim_playground.buffer.validation import clamp_cursor, normalize_range

from .core import exit_to_normal
from .events import (
    SwapAnchor,
    VisualBlockInsert,
    VisualCase,
    VisualChange,
    VisualDelete,
    VisualIndent,
    VisualJoin,
    VisualReplace,
    VisualYank,
)

Span = Tuple[Position, Position]


def selection(state: EditorState) -> Optional[Span]:
    """Normalized ``(start, end)`` of the live selection, if any."""

    if not state.mode.is_visual or state.visual_start is None:
        return None
    return normalize_range(state.visual_start, state.cursor)


def _block_columns(start: Position, end: Position) -> Tuple[int, int]:
    return min(start.col, end.col), max(start.col, end.col)


def _finish(
    state: EditorState, document: BufferDocument, cursor: Position
) -> EditorState:
    """Common tail of every operator: back to NORMAL with a clamped cursor."""

    done = exit_to_normal(replace(state, document=document))
    return replace(done, cursor=clamp_cursor(document, cursor))


def selected_text(state: EditorState, start: Position, end: Position) -> RegisterValue:
    lines = state.lines
    if state.mode is Mode.VISUAL_LINE:
        text = "".join(lines[row] + "\n" for row in range(start.line, end.line + 1))
        return RegisterValue(text=text, shape=RegisterShape.LINE)

    if state.mode is Mode.VISUAL_BLOCK:
        left, right = _block_columns(start, end)
        text = "".join(
            lines[row][left : right + 1] + "\n"
            for row in range(start.line, end.line + 1)
        )
        return RegisterValue(text=text, shape=RegisterShape.BLOCK)

    if start.line == end.line:
        return RegisterValue(text=lines[start.line][start.col : end.col + 1])
    parts = [lines[start.line][start.col :]]
    parts.extend(lines[start.line + 1 : end.line])
    parts.append(lines[end.line][: end.col + 1])
    return RegisterValue(text="\n".join(parts))


def _delete_span(
    state: EditorState, start: Position, end: Position
) -> Tuple[BufferDocument, Position]:
    document = state.document
    lines = state.lines

    if state.mode is Mode.VISUAL_LINE:
        document = document.delete_lines(start.line, end.line + 1)
        return document, Position(min(start.line, document.last_line), 0)

    if state.mode is Mode.VISUAL_BLOCK:
        left, right = _block_columns(start, end)
        updated = [
            text[:left] + text[right + 1 :] if len(text) > left else text
            for text in lines[start.line : end.line + 1]
        ]
        document = document.update_lines(start.line, end.line + 1, updated)
        return document, Position(start.line, left)

    merged = lines[start.line][: start.col] + lines[end.line][end.col + 1 :]
    document = document.update_lines(start.line, end.line + 1, (merged,))
    return document, start


def visual_delete(state: EditorState, action: VisualDelete) -> EditorState:
    del action
    span = selection(state)
    if span is None:
        return state
    start, end = span
    register = selected_text(state, start, end)
    document, cursor = _delete_span(state, start, end)
    return replace(_finish(state, document, cursor), register=register)


def visual_yank(state: EditorState, action: VisualYank) -> EditorState:
    del action
    span = selection(state)
    if span is None:
        return state
    start, end = span
    register = selected_text(state, start, end)
    return replace(_finish(state, state.document, start), register=register)


def visual_change(state: EditorState, action: VisualChange) -> EditorState:
    del action
    span = selection(state)
    if span is None:
        return state
    start, end = span
    register = selected_text(state, start, end)
    document, cursor = _delete_span(state, start, end)
    return replace(
        exit_to_normal(state),
        document=document,
        cursor=clamp_cursor(document, cursor, insert_like=True),
        mode=Mode.INSERT,
        register=register,
    )


def _map_selection(
    state: EditorState, start: Position, end: Position, transform: Callable[[str], str]
) -> BufferDocument:
    """Rewrite the selected characters of each line through ``transform``."""

    lines: List[str] = list(state.lines[start.line : end.line + 1])
    if state.mode is Mode.VISUAL_LINE:
        updated = [transform(text) for text in lines]
    elif state.mode is Mode.VISUAL_BLOCK:
        left, right = _block_columns(start, end)
        updated = [
            text[:left] + transform(text[left : right + 1]) + text[right + 1 :]
            for text in lines
        ]
    else:
        updated = []
        last = len(lines) - 1
        for offset, text in enumerate(lines):
            first_col = start.col if offset == 0 else 0
            end_col = end.col + 1 if offset == last else len(text)
            updated.append(
                text[:first_col] + transform(text[first_col:end_col]) + text[end_col:]
            )
    return state.document.update_lines(start.line, end.line + 1, updated)


def _toggle(char: str) -> str:
    return char.lower() if char == char.upper() else char.upper()


def _per_char(convert: Callable[[str], str]) -> Callable[[str], str]:
    """Apply ``convert`` to each character, keeping any that would change length."""

    def transform(text: str) -> str:
        converted = (convert(char) for char in text)
        return "".join(
            new if len(new) == 1 else old for old, new in zip(text, converted)
        )

    return transform


CASE_TRANSFORMS: dict[str, Callable[[str], str]] = {
    "toggle": _per_char(_toggle),
    "lower": _per_char(str.lower),
    "upper": _per_char(str.upper),
}


def visual_case(state: EditorState, action: VisualCase) -> EditorState:
    span = selection(state)
    if span is None:
        return state
    start, end = span
    document = _map_selection(state, start, end, CASE_TRANSFORMS[action.case])
    return _finish(state, document, start)


def visual_replace(state: EditorState, action: VisualReplace) -> EditorState:
    span = selection(state)
    if span is None:
        return state
    if action.char is None:
        return replace(state, pending=WaitKind.VISUAL_REPLACE, command_buffer="")
    start, end = span
    char = action.char
    document = _map_selection(state, start, end, lambda text: char * len(text))
    return _finish(state, document, start)


def visual_indent(state: EditorState, action: VisualIndent) -> EditorState:
    span = selection(state)
    if span is None:
        return state
    start, end = span
    unit = state.settings.indent_unit
    lines = state.lines[start.line : end.line + 1]
    if action.direction == ">":
        updated = [unit + text for text in lines]
    else:
        updated = [
            text[len(unit) :] if text.startswith(unit) else text.lstrip()
            for text in lines
        ]
    document = state.document.update_lines(start.line, end.line + 1, updated)
    return _finish(state, document, start)


def visual_join(state: EditorState, action: VisualJoin) -> EditorState:
    del action
    span = selection(state)
    if span is None:
        return state
    start, end = span
    if start.line == end.line:
        return exit_to_normal(state)
    lines = state.lines
    tails = (text.lstrip() for text in lines[start.line + 1 : end.line + 1])
    joined = " ".join([lines[start.line], *tails])
    document = state.document.update_lines(start.line, end.line + 1, (joined,))
    return _finish(state, document, start)


def block_insert(state: EditorState, action: VisualBlockInsert) -> EditorState:
    anchor = state.visual_start
    if anchor is None:
        return state
    first = min(anchor.line, state.cursor.line)
    last = max(anchor.line, state.cursor.line)

    if state.mode is Mode.VISUAL_LINE:
        if action.side == "I":
            return _enter_block_insert(state, VisualBlock(first, last, 0))
        end_col = len(state.current_line)
        return replace(
            exit_to_normal(state),
            mode=Mode.INSERT,
            cursor=Position(state.cursor.line, end_col),
        )

    if state.mode is not Mode.VISUAL_BLOCK:
        return state
    left, right = _block_columns(anchor, state.cursor)
    col = left if action.side == "I" else right + 1
    return _enter_block_insert(state, VisualBlock(first, last, col))


def _enter_block_insert(state: EditorState, block: VisualBlock) -> EditorState:
    return replace(
        state,
        mode=Mode.VISUAL_BLOCK_INSERT,
        visual_start=None,
        visual_block=block,
        cursor=clamp_cursor(
            state.document, (state.cursor.line, block.col), insert_like=True
        ),
        command_buffer="",
    )


def swap_anchor(state: EditorState, action: SwapAnchor) -> EditorState:
    del action
    if not state.mode.is_visual or state.visual_start is None:
        return state
    return replace(state, visual_start=state.cursor, cursor=state.visual_start)


__all__ = [
    "block_insert",
    "selected_text",
    "selection",
    "swap_anchor",
    "visual_case",
    "visual_change",
    "visual_delete",
    "visual_indent",
    "visual_join",
    "visual_replace",
    "visual_yank",
]
