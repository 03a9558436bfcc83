"""Clipboard register shared by yank, delete and paste."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RegisterShape(str, Enum):
    CHARACTER = "character"
    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class RegisterValue:
    """Yanked text together with the selection shape that produced it."""

    text: str
    shape: RegisterShape = RegisterShape.CHARACTER

    @property
    def linewise(self) -> bool:
        """Line and block payloads are pasted as whole lines."""

        return self.shape is not RegisterShape.CHARACTER

    @classmethod
    def infer(cls, text: str) -> "RegisterValue":
        """Build a value for host-provided text, treating a trailing newline as line-wise."""

        if text.endswith("\n"):
            return cls(text=text, shape=RegisterShape.LINE)
        return cls(text=text)


__all__ = ["RegisterShape", "RegisterValue"]
