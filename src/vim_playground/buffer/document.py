"""Core document data structures for vim_playground buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Tuple


class Position(NamedTuple):
    """Zero-based ``(line, col)`` coordinate; tuple order is document order."""

    line: int
    col: int


def _normalize(lines: Iterable[str]) -> Tuple[str, ...]:
    result = tuple(lines)
    return result if result else ("",)


@dataclass(frozen=True, slots=True)
class BufferDocument:
    """Immutable text storage built on a tuple-of-lines model.

    Every edit returns a new document sharing the untouched line strings with
    its predecessor. A document always holds at least one (possibly empty)
    line.
    """

    lines: Tuple[str, ...] = field(default=("",))
    version: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", _normalize(self.lines))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        return cls(lines=tuple(lines))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def last_line(self) -> int:
        return len(self.lines) - 1

    def get_line(self, index: int) -> str:
        return self.lines[index]

    def replace(self, *, lines: Iterable[str]) -> "BufferDocument":
        """Return a new document with the provided lines and bumped version."""

        return BufferDocument(lines=tuple(lines), version=self.version + 1)

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "BufferDocument":
        """Return a document with ``[start:end]`` replaced by ``new_lines``."""

        lines = self.lines[:start] + tuple(new_lines) + self.lines[end:]
        return BufferDocument(lines=lines, version=self.version + 1)

    def set_line(self, index: int, text: str) -> "BufferDocument":
        return self.update_lines(index, index + 1, (text,))

    def insert_lines(self, index: int, new_lines: Iterable[str]) -> "BufferDocument":
        return self.update_lines(index, index, new_lines)

    def delete_lines(self, start: int, end: int) -> "BufferDocument":
        """Drop ``[start:end]``; an emptied document collapses to one blank line."""

        return self.update_lines(start, end, ())


__all__ = ["BufferDocument", "Position"]
