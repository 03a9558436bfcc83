"""Cursor clamping helpers shared across handlers."""

from __future__ import annotations

from typing import Tuple

from .document import BufferDocument, Position


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def max_col(line: str, *, insert_like: bool = False) -> int:
    """Last valid caret column on ``line``.

    Insert-like modes may sit one past the final character.
    """

    if insert_like:
        return len(line)
    return max(0, len(line) - 1)


def clamp_cursor(
    document: BufferDocument, cursor: Tuple[int, int], *, insert_like: bool = False
) -> Position:
    line = clamp(cursor[0], 0, document.last_line)
    text = document.get_line(line)
    return Position(line, clamp(cursor[1], 0, max_col(text, insert_like=insert_like)))


def normalize_range(a: Position, b: Position) -> Tuple[Position, Position]:
    """Order two positions by ``(line, col)``; ties yield ``start == end``."""

    a, b = Position(*a), Position(*b)
    return (a, b) if a <= b else (b, a)


__all__ = ["clamp", "clamp_cursor", "max_col", "normalize_range"]
