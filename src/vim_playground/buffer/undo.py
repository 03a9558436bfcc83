"""Bounded linear undo/redo timeline of buffer snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from vim_playground.config import DEFAULT_HISTORY_LIMIT

from .document import Position


@dataclass(frozen=True, slots=True)
class Snapshot:
    lines: Tuple[str, ...]
    cursor: Position


@dataclass(frozen=True, slots=True)
class UndoTimeline:
    """Linear history; ``index`` points at the snapshot matching the live buffer.

    The timeline is a value: ``push``/``undo``/``redo`` return a new timeline
    rather than mutating this one.
    """

    entries: Tuple[Snapshot, ...] = ()
    index: int = -1
    limit: int = DEFAULT_HISTORY_LIMIT

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def current(self) -> Optional[Snapshot]:
        if not self.entries:
            return None
        return self.entries[self.index]

    def push(self, entry: Snapshot) -> "UndoTimeline":
        """Drop the redo tail, append ``entry`` and evict the oldest beyond ``limit``."""

        entries = self.entries[: self.index + 1] + (entry,)
        if len(entries) > self.limit:
            entries = entries[len(entries) - self.limit :]
        return UndoTimeline(entries=entries, index=len(entries) - 1, limit=self.limit)

    def replace_current(self, entry: Snapshot) -> "UndoTimeline":
        if not self.entries:
            return self.push(entry)
        entries = (
            self.entries[: self.index] + (entry,) + self.entries[self.index + 1 :]
        )
        return UndoTimeline(entries=entries, index=self.index, limit=self.limit)

    def can_undo(self) -> bool:
        return self.index > 0

    def can_redo(self) -> bool:
        return self.index < len(self.entries) - 1

    def undo(self) -> Tuple["UndoTimeline", Optional[Snapshot]]:
        if not self.can_undo():
            return self, None
        index = self.index - 1
        timeline = UndoTimeline(entries=self.entries, index=index, limit=self.limit)
        return timeline, self.entries[index]

    def redo(self) -> Tuple["UndoTimeline", Optional[Snapshot]]:
        if not self.can_redo():
            return self, None
        index = self.index + 1
        timeline = UndoTimeline(entries=self.entries, index=index, limit=self.limit)
        return timeline, self.entries[index]


__all__ = ["Snapshot", "UndoTimeline"]
