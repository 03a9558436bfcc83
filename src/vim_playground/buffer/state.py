"""Immutable editor state aggregate shared by every handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from vim_playground.config import EngineConfig

from .document import BufferDocument, Position
from .registers import RegisterValue
from .undo import Snapshot, UndoTimeline

INITIAL_LINES: Tuple[str, ...] = (
    "Welcome to Vim Playground!",
    "Try navigating with h, j, k, l.",
    "Explore word navigation: w (next), b (prev), e (end).",
    "Jump to line boundaries: $ (end), _ (start non-blank).",
    "Find chars: f + char (forward), F + char (backward).",
    "Visual modes: v (char), V (line), Ctrl+v (block).",
    "Press 'i', 'a', 's' to enter Insert mode.",
    "",
    "// Happy Vimming!",
)


class Mode(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    VISUAL_LINE = "visual_line"
    VISUAL_BLOCK = "visual_block"
    VISUAL_BLOCK_INSERT = "visual_block_insert"
    COMMAND = "command"
    REPLACE = "replace"

    @property
    def is_visual(self) -> bool:
        return self in _VISUAL_MODES

    @property
    def is_insert_like(self) -> bool:
        """Modes whose caret may sit one past the last character."""

        return self in _INSERT_LIKE_MODES

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").upper()


_VISUAL_MODES = frozenset({Mode.VISUAL, Mode.VISUAL_LINE, Mode.VISUAL_BLOCK})
_INSERT_LIKE_MODES = frozenset({Mode.INSERT, Mode.VISUAL_BLOCK_INSERT})
# Leaving one of these ends an undoable editing session.
SESSION_MODES = frozenset({Mode.INSERT, Mode.VISUAL_BLOCK_INSERT, Mode.REPLACE})


class WaitKind(str, Enum):
    """What the next printable character will be consumed by."""

    FIND_FORWARD = "find_forward"
    FIND_BACKWARD = "find_backward"
    VISUAL_REPLACE = "visual_replace"


@dataclass(frozen=True, slots=True)
class VisualBlock:
    """Line span and shared column of an active block insert."""

    start_line: int
    end_line: int
    col: int


@dataclass(frozen=True, slots=True)
class EditorState:
    document: BufferDocument = field(default_factory=BufferDocument)
    cursor: Position = Position(0, 0)
    mode: Mode = Mode.NORMAL
    visual_start: Optional[Position] = None
    visual_block: Optional[VisualBlock] = None
    register: Optional[RegisterValue] = None
    pending: Optional[WaitKind] = None
    command_buffer: str = ""
    search_query: str = ""
    command_bar: Optional[str] = None
    history: UndoTimeline = field(default_factory=UndoTimeline)
    settings: EngineConfig = field(default_factory=EngineConfig)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        cursor: Tuple[int, int] = (0, 0),
        settings: Optional[EngineConfig] = None,
    ) -> "EditorState":
        config = settings or EngineConfig()
        return cls(
            document=BufferDocument.from_lines(lines),
            cursor=Position(*cursor),
            history=UndoTimeline(limit=config.history_limit),
            settings=config,
        )

    @property
    def lines(self) -> Tuple[str, ...]:
        return self.document.lines

    @property
    def current_line(self) -> str:
        return self.document.get_line(self.cursor.line)

    @property
    def waiting_for_char(self) -> bool:
        return self.pending is not None

    @property
    def clipboard(self) -> str:
        return self.register.text if self.register else ""

    def snapshot(self) -> Snapshot:
        return Snapshot(lines=self.document.lines, cursor=self.cursor)


def initial_state(
    lines: Optional[Sequence[str]] = None, *, settings: Optional[EngineConfig] = None
) -> EditorState:
    """Fresh NORMAL-mode state over ``lines`` (the sample document by default)."""

    return EditorState.from_lines(
        INITIAL_LINES if lines is None else lines, settings=settings
    )


__all__ = [
    "INITIAL_LINES",
    "SESSION_MODES",
    "EditorState",
    "Mode",
    "VisualBlock",
    "WaitKind",
    "initial_state",
]
