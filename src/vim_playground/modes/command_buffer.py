"""Count and prefix parsing for multi-key NORMAL-mode commands.

The buffer is ``{digits}{prefix}``: an optional decimal count followed by at
most one pending prefix key. ``CommandBuffer.feed`` is a pure transition
returning the next buffer and what the key amounted to.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from vim_playground.actions.events import Action, Jump, LineOp, LineOpKind

PREFIX_KEYS = frozenset({"g", "d", "y", "c"})
LINE_OPERATORS: Dict[str, LineOpKind] = {"d": "delete", "y": "yank", "c": "change"}


class BufferStatus(str, Enum):
    PENDING = "pending"
    COMPLETE = "complete"
    CANCELLED = "cancelled"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True, slots=True)
class BufferOutcome:
    status: BufferStatus
    action: Optional[Action] = None


@dataclass(frozen=True, slots=True)
class CommandBuffer:
    digits: str = ""
    prefix: str = ""

    @classmethod
    def parse(cls, text: str) -> "CommandBuffer":
        split = len(text) - len(text.lstrip("0123456789"))
        return cls(digits=text[:split], prefix=text[split:])

    @property
    def text(self) -> str:
        return self.digits + self.prefix

    @property
    def count(self) -> Optional[int]:
        return int(self.digits) if self.digits else None

    def feed(self, key: str) -> Tuple["CommandBuffer", BufferOutcome]:
        empty = CommandBuffer()

        if len(key) == 1 and key.isdigit() and not self.prefix:
            pending = BufferOutcome(BufferStatus.PENDING)
            return CommandBuffer(self.digits + key), pending

        if not self.prefix:
            if key == "G":
                return empty, BufferOutcome(
                    BufferStatus.COMPLETE, Jump("end", self.count)
                )
            if key in PREFIX_KEYS:
                return CommandBuffer(self.digits, key), BufferOutcome(
                    BufferStatus.PENDING
                )
            return empty, BufferOutcome(BufferStatus.PASSTHROUGH)

        if self.prefix == "g" and key == "g":
            jump = Jump("start", self.count)
            return empty, BufferOutcome(BufferStatus.COMPLETE, jump)
        if self.prefix in LINE_OPERATORS and key == self.prefix:
            # Counts are accepted but not applied to line operators.
            operator = LineOp(LINE_OPERATORS[key])
            return empty, BufferOutcome(BufferStatus.COMPLETE, operator)
        return empty, BufferOutcome(BufferStatus.CANCELLED)


__all__ = [
    "BufferOutcome",
    "BufferStatus",
    "CommandBuffer",
    "LINE_OPERATORS",
    "PREFIX_KEYS",
]
