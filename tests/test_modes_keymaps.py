from __future__ import annotations

from typing import Sequence

import pytest

from vim_playground.actions import events as ev
from vim_playground.buffer import EditorState, Mode, Position, WaitKind
from vim_playground.keymaps import ActionRef, Binding, KeymapRegistry, KeyStroke
from vim_playground.modes import (
    InsertMode,
    KeyInput,
    ModeManager,
    NormalMode,
    dispatch,
)


def make_manager() -> ModeManager:
    return ModeManager()


def press(state: EditorState, *tokens: str, manager: ModeManager | None = None) -> EditorState:
    manager = manager or make_manager()
    for token in tokens:
        state = manager.dispatch(state, KeyInput.parse(token))
    return state


def make_state(lines: Sequence[str], cursor: tuple[int, int] = (0, 0)) -> EditorState:
    return EditorState.from_lines(lines, cursor=cursor)


def test_module_dispatch_uses_default_keymaps() -> None:
    state = make_state(["abc def", "ghi"])

    moved = dispatch(state, KeyInput("w"))

    assert moved.cursor == Position(0, 4)


def test_insert_type_escape_round_trip() -> None:
    state = press(make_state([""]), "i", "x", "ESC")

    assert state.lines == ("x",)
    assert state.cursor == Position(0, 0)
    assert state.mode is Mode.NORMAL


def test_append_moves_after_cursor() -> None:
    state = press(make_state(["ac"]), "a", "b", "ESC")

    assert state.lines == ("abc",)
    assert state.cursor == Position(0, 1)


def test_insert_arrow_keys_move_caret() -> None:
    state = press(make_state(["ab", "cd"]), "i", "RIGHT", "RIGHT", "DOWN", "!")

    assert state.lines == ("ab", "cd!")
    assert state.cursor == Position(1, 3)


def test_insert_enter_and_backspace() -> None:
    state = press(make_state(["abcd"], (0, 2)), "i", "ENTER")
    merged = press(state, "BACKSPACE")

    assert state.lines == ("ab", "cd")
    assert merged.lines == ("abcd",)
    assert merged.cursor == Position(0, 2)


def test_visual_yank_from_keys() -> None:
    state = press(make_state(["hello"]), "v", "$", "y")

    assert state.clipboard == "hello"
    assert state.mode is Mode.NORMAL
    assert state.cursor == Position(0, 0)


def test_visual_v_and_escape_exit() -> None:
    toggled = press(make_state(["abc"]), "v", "l", "v")
    escaped = press(make_state(["abc"]), "V", "ESC")

    assert toggled.mode is Mode.NORMAL
    assert toggled.visual_start is None
    assert escaped.mode is Mode.NORMAL


def test_visual_block_insert_from_keys() -> None:
    state = press(
        make_state(["abc", "abc", "abc"]), "ctrl+v", "j", "j", "I", "#", "ESC"
    )

    assert state.lines == ("#abc", "#abc", "#abc")
    assert state.mode is Mode.NORMAL


def test_block_insert_ignores_motion_keys() -> None:
    manager = make_manager()
    state = press(make_state(["abc", "abc"]), "ctrl+v", "j", "A", manager=manager)

    after = press(state, "LEFT", manager=manager)

    assert state.mode is Mode.VISUAL_BLOCK_INSERT
    assert after.cursor == state.cursor
    assert manager.last_result is not None
    assert not manager.last_result.consumed


def test_block_insert_enter_finishes() -> None:
    state = press(make_state(["ab", "ab"]), "ctrl+v", "j", "A", "x", "ENTER")

    assert state.lines == ("axb", "axb")
    assert state.mode is Mode.NORMAL


def test_replace_mode_from_keys() -> None:
    replaced = press(make_state(["abc"], (0, 1)), "r", "z")
    cancelled = press(make_state(["abc"], (0, 1)), "r", "ESC")

    assert replaced.lines == ("azc",)
    assert replaced.mode is Mode.NORMAL
    assert cancelled.lines == ("abc",)
    assert cancelled.mode is Mode.NORMAL


def test_pending_wait_takes_priority() -> None:
    waiting = press(make_state(["a(b)c"]), "f")
    ignored = press(waiting, "ENTER")
    found = press(ignored, "(")
    cancelled = press(waiting, "ESC")

    assert waiting.pending is WaitKind.FIND_FORWARD
    assert ignored.pending is WaitKind.FIND_FORWARD
    assert found.cursor == Position(0, 1)
    assert found.pending is None
    assert cancelled.cursor == Position(0, 0)
    assert cancelled.pending is None


def test_visual_replace_from_keys() -> None:
    state = press(make_state(["abcd"]), "v", "l", "r", "x")

    assert state.lines == ("xxcd",)
    assert state.mode is Mode.NORMAL


def test_unbound_key_is_not_consumed() -> None:
    manager = make_manager()

    state = press(make_state(["abc"]), "Q", manager=manager)

    assert state.lines == ("abc",)
    assert manager.last_result is not None
    assert manager.last_result.consumed is False


def test_custom_binding_extends_normal_keymap() -> None:
    registry = KeymapRegistry()
    manager = ModeManager(keymap_registry=registry, load_defaults=False)
    registry.register_action(
        ActionRef(
            id="custom.line_end",
            handler=lambda state, stroke: ev.LineBoundary("$"),
        )
    )
    registry.register_binding(
        Binding(
            id="normal:E",
            mode="normal",
            stroke=KeyStroke("E"),
            action_id="custom.line_end",
        )
    )

    state = press(make_state(["hello"]), "E", manager=manager)

    assert state.cursor == Position(0, 4)


def test_register_mode_rejects_duplicates() -> None:
    manager = make_manager()

    with pytest.raises(ValueError):
        manager.register_mode(NormalMode)
    with pytest.raises(ValueError):
        manager.register_mode(InsertMode)


def test_open_line_and_substitute_enter_insert() -> None:
    opened = press(make_state(["a"]), "o", "b", "ESC")
    substituted = press(make_state(["abc"]), "s", "X", "ESC")

    assert opened.lines == ("a", "b")
    assert substituted.lines == ("Xbc",)
