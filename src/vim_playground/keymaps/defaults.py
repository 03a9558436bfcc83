"""Built-in keymaps that seed each mode with the playground's key table."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from vim_playground.actions import events as ev
from vim_playground.buffer.state import EditorState, Mode, WaitKind

from .models import ActionRef, Binding, HandlerResult, KeyHandler, KeyStroke
from .registry import KeymapRegistry

NORMAL = "normal"
INSERT = "insert"
VISUAL = "visual"
BLOCK_INSERT = "block_insert"
COMMAND = "command"

ESCAPE_KEYS = ("ESC", "<Esc>")
ENTER_KEYS = ("ENTER", "RETURN")


def _emit(*actions: ev.Action) -> KeyHandler:
    def handler(state: EditorState, stroke: KeyStroke) -> HandlerResult:
        del state, stroke
        return actions

    return handler


def _action(action_id: str, description: str, *actions: ev.Action) -> ActionRef:
    return ActionRef(id=action_id, handler=_emit(*actions), description=description)


DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    _action("motion.left", "Move left", ev.CharMove("h")),
    _action("motion.right", "Move right", ev.CharMove("l")),
    _action("motion.down", "Move down", ev.CharMove("j")),
    _action("motion.up", "Move up", ev.CharMove("k")),
    _action("motion.word_next", "Next word start", ev.WordMove("w")),
    _action("motion.word_prev", "Previous word start", ev.WordMove("b")),
    _action("motion.word_end", "Next word end", ev.WordMove("e")),
    _action("motion.line_end", "End of line", ev.LineBoundary("$")),
    _action("motion.first_non_blank", "First non-blank", ev.LineBoundary("_")),
    _action("motion.match_bracket", "Matching bracket", ev.BracketMatch()),
    _action("motion.scroll_up", "Half page up", ev.Scroll("up")),
    _action("motion.scroll_down", "Half page down", ev.Scroll("down")),
    _action("motion.last_line", "Last line", ev.Jump("end")),
    _action(
        "motion.find_forward",
        "Find character forward",
        ev.WaitForChar(WaitKind.FIND_FORWARD),
    ),
    _action(
        "motion.find_backward",
        "Find character backward",
        ev.WaitForChar(WaitKind.FIND_BACKWARD),
    ),
    _action("mode.insert", "Insert before cursor", ev.EnterMode(Mode.INSERT)),
    _action(
        "mode.append",
        "Insert after cursor",
        ev.EnterMode(Mode.INSERT),
        ev.CharMove("l"),
    ),
    _action("mode.visual", "Character visual", ev.EnterMode(Mode.VISUAL)),
    _action("mode.visual_line", "Line visual", ev.EnterMode(Mode.VISUAL_LINE)),
    _action("mode.visual_block", "Block visual", ev.EnterMode(Mode.VISUAL_BLOCK)),
    _action("mode.exit", "Return to normal mode", ev.ExitMode()),
    _action("edit.substitute", "Substitute character", ev.Substitute()),
    _action("edit.replace", "Replace one character", ev.ReplaceChar()),
    _action("edit.join", "Join with next line", ev.JoinLines()),
    _action("edit.paste", "Paste after cursor", ev.Paste()),
    _action("edit.open_below", "Open line below", ev.LineOp("open_below")),
    _action("edit.open_above", "Open line above", ev.LineOp("open_above")),
    _action("edit.backspace", "Delete before cursor", ev.DeleteChar()),
    _action("edit.newline", "Split line", ev.NewLine()),
    _action("search.start", "Search forward", ev.SearchStart()),
    _action("search.submit", "Run search", ev.SearchSubmit()),
    _action("search.next", "Next match", ev.SearchNext("next")),
    _action("search.prev", "Previous match", ev.SearchNext("prev")),
    _action("search.word", "Search word under cursor", ev.SearchWord()),
    _action("history.undo", "Undo", ev.Undo()),
    _action("history.redo", "Redo", ev.Redo()),
    _action("visual.delete", "Delete selection", ev.VisualDelete()),
    _action("visual.yank", "Yank selection", ev.VisualYank()),
    _action("visual.change", "Change selection", ev.VisualChange()),
    _action("visual.toggle_case", "Toggle case", ev.VisualCase("toggle")),
    _action("visual.lower", "Lowercase", ev.VisualCase("lower")),
    _action("visual.upper", "Uppercase", ev.VisualCase("upper")),
    _action("visual.indent", "Indent lines", ev.VisualIndent(">")),
    _action("visual.outdent", "Outdent lines", ev.VisualIndent("<")),
    _action("visual.join", "Join lines", ev.VisualJoin()),
    _action("visual.replace", "Replace every character", ev.VisualReplace()),
    _action("visual.insert_before", "Block insert", ev.VisualBlockInsert("I")),
    _action("visual.append_after", "Block append", ev.VisualBlockInsert("A")),
    _action("visual.swap_anchor", "Swap selection anchor", ev.SwapAnchor()),
)

_MOTION_KEYS: tuple[tuple[str, str], ...] = (
    ("h", "motion.left"),
    ("l", "motion.right"),
    ("j", "motion.down"),
    ("k", "motion.up"),
    ("w", "motion.word_next"),
    ("b", "motion.word_prev"),
    ("e", "motion.word_end"),
    ("$", "motion.line_end"),
    ("_", "motion.first_non_blank"),
    ("%", "motion.match_bracket"),
)

_KEYMAP_TABLE: Mapping[str, tuple[tuple[str, str], ...]] = {
    NORMAL: _MOTION_KEYS
    + (
        ("ctrl+u", "motion.scroll_up"),
        ("ctrl+d", "motion.scroll_down"),
        ("f", "motion.find_forward"),
        ("F", "motion.find_backward"),
        ("i", "mode.insert"),
        ("a", "mode.append"),
        ("v", "mode.visual"),
        ("V", "mode.visual_line"),
        ("ctrl+v", "mode.visual_block"),
        ("s", "edit.substitute"),
        ("r", "edit.replace"),
        ("J", "edit.join"),
        ("p", "edit.paste"),
        ("o", "edit.open_below"),
        ("O", "edit.open_above"),
        ("/", "search.start"),
        ("n", "search.next"),
        ("N", "search.prev"),
        ("*", "search.word"),
        ("u", "history.undo"),
        ("ctrl+r", "history.redo"),
    )
    + tuple((key, "mode.exit") for key in ESCAPE_KEYS),
    INSERT: (
        ("LEFT", "motion.left"),
        ("RIGHT", "motion.right"),
        ("DOWN", "motion.down"),
        ("UP", "motion.up"),
        ("BACKSPACE", "edit.backspace"),
    )
    + tuple((key, "edit.newline") for key in ENTER_KEYS)
    + tuple((key, "mode.exit") for key in ESCAPE_KEYS),
    VISUAL: _MOTION_KEYS
    + (
        ("G", "motion.last_line"),
        ("v", "mode.exit"),
        ("V", "mode.visual_line"),
        ("ctrl+v", "mode.visual_block"),
        ("d", "visual.delete"),
        ("x", "visual.delete"),
        ("y", "visual.yank"),
        ("s", "visual.change"),
        ("c", "visual.change"),
        ("~", "visual.toggle_case"),
        ("u", "visual.lower"),
        ("U", "visual.upper"),
        (">", "visual.indent"),
        ("<", "visual.outdent"),
        ("J", "visual.join"),
        ("r", "visual.replace"),
        ("I", "visual.insert_before"),
        ("A", "visual.append_after"),
        ("o", "visual.swap_anchor"),
    )
    + tuple((key, "mode.exit") for key in ESCAPE_KEYS),
    BLOCK_INSERT: (("BACKSPACE", "edit.backspace"),)
    + tuple((key, "edit.newline") for key in ENTER_KEYS)
    + tuple((key, "mode.exit") for key in ESCAPE_KEYS),
    COMMAND: (("BACKSPACE", "edit.backspace"),)
    + tuple((key, "search.submit") for key in ENTER_KEYS)
    + tuple((key, "mode.exit") for key in ESCAPE_KEYS),
}


def _build_bindings() -> tuple[Binding, ...]:
    bindings = []
    for mode, table in _KEYMAP_TABLE.items():
        for token, action_id in table:
            bindings.append(
                Binding(
                    id=f"{mode}:{token}",
                    mode=mode,
                    stroke=KeyStroke.parse(token),
                    action_id=action_id,
                    source="defaults",
                )
            )
    return tuple(bindings)


DEFAULT_BINDINGS: tuple[Binding, ...] = _build_bindings()


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_actions: Sequence[str] | None = None,
    exclude_actions: Sequence[str] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
    per_mode_overrides: Mapping[str, Iterable[Binding]] | None = None,
) -> None:
    """Register built-in actions and bindings for every keymap."""

    allowed_actions = _build_filters(include_actions, exclude_actions)
    allowed_bindings = _build_filters(include_bindings, exclude_bindings)

    for action in DEFAULT_ACTIONS:
        if not _selected(action.id, allowed_actions):
            continue
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if not _selected(binding.id, allowed_bindings):
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)

    if per_mode_overrides:
        for mode, bindings in per_mode_overrides.items():
            for binding in bindings:
                if binding.mode != mode:
                    raise ValueError(
                        f"Override binding '{binding.id}' must target mode '{mode}'"
                    )
                registry.register_binding(binding, replace=True)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = [
    "BLOCK_INSERT",
    "COMMAND",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "INSERT",
    "NORMAL",
    "VISUAL",
    "load_default_keymaps",
]
