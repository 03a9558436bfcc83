"""Adapter boundary types: render-ready projections of ``EditorState``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from .document import Position
from .state import EditorState, Mode
from .validation import normalize_range


@dataclass(frozen=True, slots=True)
class SelectionSpan:
    """Highlighted cells ``[start_col, end_col)`` on one line."""

    line: int
    start_col: int
    end_col: int


@dataclass(frozen=True, slots=True)
class EditorMirror:
    """Host-friendly snapshot describing what a renderer should draw."""

    lines: Tuple[str, ...]
    cursor: Position
    mode: Mode
    visual_start: Optional[Position]
    selection: Tuple[SelectionSpan, ...]
    waiting_for_char: bool
    command_bar: Optional[str]
    command_buffer: str
    search_query: str

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def status(self) -> str:
        parts = [f"-- {self.mode.label} --"]
        if self.command_buffer:
            parts.append(self.command_buffer)
        if self.waiting_for_char:
            parts.append("(waiting for char)")
        parts.append(f"{self.cursor.line + 1}:{self.cursor.col + 1}")
        return "  ".join(parts)


class EditorSync(Protocol):
    """How adapters pull render snapshots from a running session."""

    def mirror(self) -> EditorMirror:
        """Return the latest snapshot the host should render."""
        ...


def selection_spans(state: EditorState) -> Tuple[SelectionSpan, ...]:
    if not state.mode.is_visual or state.visual_start is None:
        return ()
    lines = state.lines
    start, end = normalize_range(state.visual_start, state.cursor)

    if state.mode is Mode.VISUAL_LINE:
        return tuple(
            SelectionSpan(row, 0, len(lines[row]))
            for row in range(start.line, end.line + 1)
        )

    if state.mode is Mode.VISUAL_BLOCK:
        left = min(start.col, end.col)
        right = max(start.col, end.col)
        return tuple(
            SelectionSpan(row, left, right + 1)
            for row in range(start.line, end.line + 1)
        )

    spans = []
    for row in range(start.line, end.line + 1):
        first = start.col if row == start.line else 0
        last = end.col + 1 if row == end.line else len(lines[row])
        spans.append(SelectionSpan(row, first, last))
    return tuple(spans)


def mirror_state(state: EditorState) -> EditorMirror:
    return EditorMirror(
        lines=state.lines,
        cursor=state.cursor,
        mode=state.mode,
        visual_start=state.visual_start,
        selection=selection_spans(state),
        waiting_for_char=state.waiting_for_char,
        command_bar=state.command_bar,
        command_buffer=state.command_buffer,
        search_query=state.search_query,
    )


__all__ = [
    "EditorMirror",
    "EditorSync",
    "SelectionSpan",
    "mirror_state",
    "selection_spans",
]
