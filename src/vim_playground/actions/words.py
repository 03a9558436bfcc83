"""Word boundary scanning for the ``w``, ``b`` and ``e`` motions.

Characters fall into three classes: ``word`` (alphanumerics and ``_``),
``space`` (whitespace) and ``special`` (everything else). Positions at or
beyond the end of a line count as ``space`` so that line breaks separate
words.
"""

from __future__ import annotations

from typing import Literal, Sequence

from vim_playground.buffer.document import Position

CharClass = Literal["word", "space", "special"]

WORD: CharClass = "word"
SPACE: CharClass = "space"
SPECIAL: CharClass = "special"


def classify(char: str) -> CharClass:
    if not char or char.isspace():
        return SPACE
    if char.isalnum() or char == "_":
        return WORD
    return SPECIAL


def class_at(lines: Sequence[str], line: int, col: int) -> CharClass:
    text = lines[line]
    if col >= len(text):
        return SPACE
    return classify(text[col])


def next_word_start(lines: Sequence[str], cursor: Position) -> Position:
    """Start of the next word; stops on empty lines it crosses into.

    The result may sit one past the end of the last line; callers clamp it to
    the mode's column bound.
    """

    line, col = cursor
    last = len(lines) - 1

    def advance() -> bool:
        nonlocal line, col
        col += 1
        if col > len(lines[line]):
            if line < last:
                line += 1
                col = 0
                return True
            return False
        return True

    start = class_at(lines, line, col)
    if start != SPACE:
        while True:
            if not advance():
                return Position(line, min(col, len(lines[line])))
            if class_at(lines, line, col) != start:
                break

    while class_at(lines, line, col) == SPACE:
        if not advance():
            break
        if col == 0 and not lines[line]:
            return Position(line, 0)

    return Position(line, min(col, len(lines[line])))


def prev_word_start(lines: Sequence[str], cursor: Position) -> Position:
    """Start of the current word, or of the previous one when already at a start."""

    line, col = cursor

    def retreat() -> bool:
        nonlocal line, col
        col -= 1
        if col < 0:
            if line > 0:
                line -= 1
                col = len(lines[line])
                return True
            col = 0
            return False
        return True

    kind = class_at(lines, line, col)
    if kind == SPACE:
        while True:
            if not retreat():
                return Position(line, col)
            kind = class_at(lines, line, col)
            if kind != SPACE:
                break
    else:
        at_start = col == 0 or class_at(lines, line, col - 1) != kind
        if at_start:
            if not retreat():
                return Position(line, col)
            kind = class_at(lines, line, col)
            while kind == SPACE:
                if not retreat():
                    return Position(line, 0)
                kind = class_at(lines, line, col)

    while col > 0 and class_at(lines, line, col - 1) == kind:
        col -= 1
    return Position(line, col)


def next_word_end(lines: Sequence[str], cursor: Position) -> Position:
    """Last character of the next word end strictly after ``cursor``."""

    line, col = cursor
    last = len(lines) - 1

    def advance() -> bool:
        nonlocal line, col
        col += 1
        if col >= len(lines[line]):
            if line < last:
                line += 1
                col = 0
                return True
            return False
        return True

    if not advance():
        return cursor

    while not lines[line] or lines[line][col].isspace():
        if not advance():
            return Position(line, max(0, len(lines[line]) - 1))

    kind = classify(lines[line][col])
    text = lines[line]
    while col + 1 < len(text) and classify(text[col + 1]) == kind:
        col += 1
    return Position(line, col)


__all__ = [
    "CharClass",
    "classify",
    "class_at",
    "next_word_start",
    "prev_word_start",
    "next_word_end",
]
