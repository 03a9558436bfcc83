"""Action values consumed by the reducer.

Every key press is translated into zero or more of these frozen records.
They are grouped by family; ``ACTION_TYPES`` lists the closed set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Union, get_args

from vim_playground.buffer.state import Mode, WaitKind

CharDirection = Literal["h", "j", "k", "l"]
WordDirection = Literal["w", "b", "e"]
Boundary = Literal["$", "_"]
ScrollDirection = Literal["up", "down"]
JumpTarget = Literal["start", "end"]
LineOpKind = Literal["delete", "yank", "change", "open_below", "open_above"]
CaseKind = Literal["toggle", "lower", "upper"]
IndentDirection = Literal[">", "<"]
BlockSide = Literal["I", "A"]
SearchDirection = Literal["next", "prev"]


# motion


@dataclass(frozen=True, slots=True)
class CharMove:
    direction: CharDirection


@dataclass(frozen=True, slots=True)
class WordMove:
    direction: WordDirection


@dataclass(frozen=True, slots=True)
class LineBoundary:
    boundary: Boundary


@dataclass(frozen=True, slots=True)
class Scroll:
    direction: ScrollDirection


@dataclass(frozen=True, slots=True)
class Jump:
    """Absolute line jump; ``line`` is 1-based when given."""

    target: JumpTarget
    line: Optional[int] = None


@dataclass(frozen=True, slots=True)
class BracketMatch:
    pass


# mode transition


@dataclass(frozen=True, slots=True)
class EnterMode:
    mode: Mode


@dataclass(frozen=True, slots=True)
class ExitMode:
    pass


@dataclass(frozen=True, slots=True)
class SwapAnchor:
    pass


# text edit


@dataclass(frozen=True, slots=True)
class TypeChar:
    char: str


@dataclass(frozen=True, slots=True)
class DeleteChar:
    pass


@dataclass(frozen=True, slots=True)
class NewLine:
    pass


@dataclass(frozen=True, slots=True)
class Substitute:
    pass


@dataclass(frozen=True, slots=True)
class ReplaceChar:
    """``None`` enters REPLACE mode; a character overwrites the one under the cursor."""

    char: Optional[str] = None


@dataclass(frozen=True, slots=True)
class JoinLines:
    pass


@dataclass(frozen=True, slots=True)
class LineOp:
    op: LineOpKind


@dataclass(frozen=True, slots=True)
class Paste:
    pass


# visual operators


@dataclass(frozen=True, slots=True)
class VisualDelete:
    pass


@dataclass(frozen=True, slots=True)
class VisualYank:
    pass


@dataclass(frozen=True, slots=True)
class VisualChange:
    pass


@dataclass(frozen=True, slots=True)
class VisualCase:
    case: CaseKind


@dataclass(frozen=True, slots=True)
class VisualIndent:
    direction: IndentDirection


@dataclass(frozen=True, slots=True)
class VisualJoin:
    pass


@dataclass(frozen=True, slots=True)
class VisualReplace:
    """``None`` arms the wait for a replacement character."""

    char: Optional[str] = None


@dataclass(frozen=True, slots=True)
class VisualBlockInsert:
    side: BlockSide


# search


@dataclass(frozen=True, slots=True)
class SearchStart:
    pass


@dataclass(frozen=True, slots=True)
class SearchTypeChar:
    char: str


@dataclass(frozen=True, slots=True)
class SearchSubmit:
    pass


@dataclass(frozen=True, slots=True)
class SearchNext:
    direction: SearchDirection = "next"


@dataclass(frozen=True, slots=True)
class SearchWord:
    pass


# command buffer


@dataclass(frozen=True, slots=True)
class AppendToBuffer:
    key: str


@dataclass(frozen=True, slots=True)
class ClearBuffer:
    pass


# history


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Redo:
    pass


# deferred character


@dataclass(frozen=True, slots=True)
class WaitForChar:
    kind: WaitKind


@dataclass(frozen=True, slots=True)
class ResolveWait:
    """Feed the pending wait its character, or cancel it with ``None``."""

    char: Optional[str] = None


Action = Union[
    CharMove,
    WordMove,
    LineBoundary,
    Scroll,
    Jump,
    BracketMatch,
    EnterMode,
    ExitMode,
    SwapAnchor,
    TypeChar,
    DeleteChar,
    NewLine,
    Substitute,
    ReplaceChar,
    JoinLines,
    LineOp,
    Paste,
    VisualDelete,
    VisualYank,
    VisualChange,
    VisualCase,
    VisualIndent,
    VisualJoin,
    VisualReplace,
    VisualBlockInsert,
    SearchStart,
    SearchTypeChar,
    SearchSubmit,
    SearchNext,
    SearchWord,
    AppendToBuffer,
    ClearBuffer,
    Undo,
    Redo,
    WaitForChar,
    ResolveWait,
]

ACTION_TYPES: tuple[type, ...] = get_args(Action)

__all__ = [
    "ACTION_TYPES",
    "Action",
    "CharMove",
    "WordMove",
    "LineBoundary",
    "Scroll",
    "Jump",
    "BracketMatch",
    "EnterMode",
    "ExitMode",
    "SwapAnchor",
    "TypeChar",
    "DeleteChar",
    "NewLine",
    "Substitute",
    "ReplaceChar",
    "JoinLines",
    "LineOp",
    "Paste",
    "VisualDelete",
    "VisualYank",
    "VisualChange",
    "VisualCase",
    "VisualIndent",
    "VisualJoin",
    "VisualReplace",
    "VisualBlockInsert",
    "SearchStart",
    "SearchTypeChar",
    "SearchSubmit",
    "SearchNext",
    "SearchWord",
    "AppendToBuffer",
    "ClearBuffer",
    "Undo",
    "Redo",
    "WaitForChar",
    "ResolveWait",
]
