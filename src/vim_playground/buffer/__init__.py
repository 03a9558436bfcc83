"""Buffer model, clipboard register, undo timeline and editor state."""

from .document import BufferDocument, Position
from .registers import RegisterShape, RegisterValue
from .undo import Snapshot, UndoTimeline
from .state import (
    INITIAL_LINES,
    EditorState,
    Mode,
    VisualBlock,
    WaitKind,
    initial_state,
)
from .sync import EditorMirror, EditorSync, SelectionSpan, mirror_state
from .validation import clamp_cursor, max_col, normalize_range

__all__ = [
    "BufferDocument",
    "Position",
    "RegisterShape",
    "RegisterValue",
    "Snapshot",
    "UndoTimeline",
    "INITIAL_LINES",
    "EditorState",
    "Mode",
    "VisualBlock",
    "WaitKind",
    "initial_state",
    "EditorMirror",
    "EditorSync",
    "SelectionSpan",
    "mirror_state",
    "clamp_cursor",
    "max_col",
    "normalize_range",
]
