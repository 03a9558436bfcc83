"""Literal forward search and the ``/`` command line that drives it."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence

from vim_playground.buffer.document import Position
from vim_playground.buffer.state import EditorState, Mode

from .core import exit_to_normal
from .events import SearchNext, SearchStart, SearchSubmit, SearchTypeChar, SearchWord
from .words import WORD, classify

PROMPT = "/"


def find_all_matches(lines: Sequence[str], query: str) -> List[Position]:
    """Every match start in document order; overlapping hits are included."""

    if not query:
        return []
    matches: List[Position] = []
    for number, text in enumerate(lines):
        index = text.find(query)
        while index != -1:
            matches.append(Position(number, index))
            index = text.find(query, index + 1)
    return matches


def next_match(
    lines: Sequence[str], query: str, cursor: Position
) -> Optional[Position]:
    matches = find_all_matches(lines, query)
    if not matches:
        return None
    for match in matches:
        if match > cursor:
            return match
    return matches[0]


def prev_match(
    lines: Sequence[str], query: str, cursor: Position
) -> Optional[Position]:
    matches = find_all_matches(lines, query)
    if not matches:
        return None
    for match in reversed(matches):
        if match < cursor:
            return match
    return matches[-1]


def search_start(state: EditorState, action: SearchStart) -> EditorState:
    del action
    return replace(state, mode=Mode.COMMAND, command_bar=PROMPT, command_buffer="")


def search_type_char(state: EditorState, action: SearchTypeChar) -> EditorState:
    if state.mode is not Mode.COMMAND:
        return state
    return replace(state, command_bar=(state.command_bar or "") + action.char)


def search_backspace(state: EditorState) -> EditorState:
    """Drop the last command-line character; erasing the prompt cancels."""

    trimmed = (state.command_bar or "")[:-1]
    if not trimmed:
        return exit_to_normal(state)
    return replace(state, command_bar=trimmed)


def search_submit(state: EditorState, action: SearchSubmit) -> EditorState:
    del action
    if state.mode is not Mode.COMMAND:
        return state
    query = (state.command_bar or "")[len(PROMPT) :]
    target = next_match(state.lines, query, state.cursor)
    done = replace(exit_to_normal(state), search_query=query)
    if target is None:
        return done
    return replace(done, cursor=target)


def search_next(state: EditorState, action: SearchNext) -> EditorState:
    find = next_match if action.direction == "next" else prev_match
    target = find(state.lines, state.search_query, state.cursor)
    if target is None:
        return replace(state, command_buffer="")
    return replace(state, cursor=target, command_buffer="")


def word_under_cursor(text: str, col: int) -> str:
    if col >= len(text) or classify(text[col]) != WORD:
        return ""
    start = col
    while start > 0 and classify(text[start - 1]) == WORD:
        start -= 1
    end = col
    while end < len(text) and classify(text[end]) == WORD:
        end += 1
    return text[start:end]


def search_word(state: EditorState, action: SearchWord) -> EditorState:
    """``*``: search forward for the word under the cursor."""

    del action
    query = word_under_cursor(state.current_line, state.cursor.col)
    if not query:
        return replace(state, command_buffer="")
    return search_next(replace(state, search_query=query), SearchNext("next"))


__all__ = [
    "PROMPT",
    "find_all_matches",
    "next_match",
    "prev_match",
    "search_backspace",
    "search_next",
    "search_start",
    "search_submit",
    "search_type_char",
    "search_word",
    "word_under_cursor",
]
