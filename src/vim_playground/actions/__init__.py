"""Action values and the pure handlers that apply them to ``EditorState``."""

from . import events
from .core import enter_mode, exit_mode, exit_to_normal
from .editing import (
    delete_char,
    join_lines,
    line_op,
    new_line,
    paste,
    replace_char,
    substitute,
    type_char,
)
from .history import redo, undo
from .motion import (
    find_char,
    jump,
    match_bracket,
    move_char,
    move_line_boundary,
    move_word,
    scroll,
)
from .search import find_all_matches, next_match, prev_match
from .visual import (
    block_insert,
    selection,
    swap_anchor,
    visual_case,
    visual_change,
    visual_delete,
    visual_indent,
    visual_join,
    visual_replace,
    visual_yank,
)

__all__ = [
    "events",
    "enter_mode",
    "exit_mode",
    "exit_to_normal",
    "delete_char",
    "join_lines",
    "line_op",
    "new_line",
    "paste",
    "replace_char",
    "substitute",
    "type_char",
    "redo",
    "undo",
    "find_char",
    "jump",
    "match_bracket",
    "move_char",
    "move_line_boundary",
    "move_word",
    "scroll",
    "find_all_matches",
    "next_match",
    "prev_match",
    "block_insert",
    "selection",
    "swap_anchor",
    "visual_case",
    "visual_change",
    "visual_delete",
    "visual_indent",
    "visual_join",
    "visual_replace",
    "visual_yank",
]
