"""Cursor motions: character, word, line boundary, scroll, jump, bracket, find."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from vim_playground.buffer.document import Position
from vim_playground.buffer.state import EditorState
from vim_playground.buffer.validation import clamp, clamp_cursor, max_col

from .events import BracketMatch, CharMove, Jump, LineBoundary, Scroll, WordMove
from .words import next_word_end, next_word_start, prev_word_start

OPENING = {"(": ")", "[": "]", "{": "}"}
CLOSING = {close: open_ for open_, close in OPENING.items()}


def _moved(state: EditorState, target: Position) -> EditorState:
    cursor = clamp_cursor(
        state.document, target, insert_like=state.mode.is_insert_like
    )
    return replace(state, cursor=cursor, command_buffer="")


def move_char(state: EditorState, action: CharMove) -> EditorState:
    line, col = state.cursor
    if action.direction == "h":
        return _moved(state, Position(line, col - 1))
    if action.direction == "l":
        return _moved(state, Position(line, col + 1))
    step = 1 if action.direction == "j" else -1
    return _moved(state, Position(line + step, col))


def move_word(state: EditorState, action: WordMove) -> EditorState:
    lines = state.lines
    if action.direction == "w":
        target = next_word_start(lines, state.cursor)
    elif action.direction == "b":
        target = prev_word_start(lines, state.cursor)
    else:
        target = next_word_end(lines, state.cursor)
    return _moved(state, target)


def first_non_blank(text: str) -> int:
    for index, char in enumerate(text):
        if not char.isspace():
            return index
    return max_col(text)


def move_line_boundary(state: EditorState, action: LineBoundary) -> EditorState:
    text = state.current_line
    col = max_col(text) if action.boundary == "$" else first_non_blank(text)
    return replace(
        state, cursor=Position(state.cursor.line, col), command_buffer=""
    )


def scroll(state: EditorState, action: Scroll) -> EditorState:
    amount = state.settings.scroll_amount
    step = -amount if action.direction == "up" else amount
    line, col = state.cursor
    return replace(
        state,
        cursor=clamp_cursor(
            state.document, (line + step, col), insert_like=state.mode.is_insert_like
        ),
    )


def jump(state: EditorState, action: Jump) -> EditorState:
    """``gg``/``G`` with optional 1-based line; lands on column 0."""

    if action.line is not None:
        target = action.line - 1
    elif action.target == "end":
        target = state.document.last_line
    else:
        target = 0
    line = clamp(target, 0, state.document.last_line)
    return replace(state, cursor=Position(line, 0), command_buffer="")


def find_matching_bracket(
    lines: Sequence[str], cursor: Position
) -> Optional[Position]:
    text = lines[cursor.line]
    if cursor.col >= len(text):
        return None
    char = text[cursor.col]
    if char in OPENING:
        return _scan_forward(lines, cursor, char, OPENING[char])
    if char in CLOSING:
        return _scan_backward(lines, cursor, CLOSING[char], char)
    return None


def _scan_forward(
    lines: Sequence[str], cursor: Position, opening: str, closing: str
) -> Optional[Position]:
    depth = 0
    col = cursor.col
    for line in range(cursor.line, len(lines)):
        text = lines[line]
        while col < len(text):
            if text[col] == opening:
                depth += 1
            elif text[col] == closing:
                depth -= 1
                if depth == 0:
                    return Position(line, col)
            col += 1
        col = 0
    return None


def _scan_backward(
    lines: Sequence[str], cursor: Position, opening: str, closing: str
) -> Optional[Position]:
    depth = 0
    col = cursor.col
    for line in range(cursor.line, -1, -1):
        text = lines[line]
        if line != cursor.line:
            col = len(text) - 1
        while col >= 0:
            if text[col] == closing:
                depth += 1
            elif text[col] == opening:
                depth -= 1
                if depth == 0:
                    return Position(line, col)
            col -= 1
    return None


def match_bracket(state: EditorState, action: BracketMatch) -> EditorState:
    del action
    target = find_matching_bracket(state.lines, state.cursor)
    if target is None:
        return replace(state, command_buffer="")
    return replace(state, cursor=target, command_buffer="")


def find_char(state: EditorState, char: str, *, forward: bool) -> EditorState:
    """``f``/``F``: nearest ``char`` strictly after/before the cursor on this line."""

    line, col = state.cursor
    text = state.current_line
    if forward:
        index = text.find(char, col + 1)
    else:
        index = text.rfind(char, 0, col)
    if index < 0:
        return state
    return replace(state, cursor=Position(line, index))


__all__ = [
    "find_char",
    "find_matching_bracket",
    "first_non_blank",
    "jump",
    "match_bracket",
    "move_char",
    "move_line_boundary",
    "move_word",
    "scroll",
]
