from __future__ import annotations

import pytest

from vim_playground.actions import events as ev
from vim_playground.buffer import EditorState, Mode, Position
from vim_playground.modes import REDUCERS, reduce


def test_every_action_type_has_a_reducer() -> None:
    missing = [action.__name__ for action in ev.ACTION_TYPES if action not in REDUCERS]

    assert missing == []
    assert set(REDUCERS) == set(ev.ACTION_TYPES)


def test_unknown_action_raises_type_error() -> None:
    state = EditorState.from_lines(["abc"])

    with pytest.raises(TypeError):
        reduce(state, object())  # type: ignore[arg-type]


def test_reduce_returns_new_state_and_leaves_input_alone() -> None:
    state = EditorState.from_lines(["abc", "def"])

    deleted = reduce(state, ev.LineOp("delete"))

    assert deleted is not state
    assert state.lines == ("abc", "def")
    assert state.history.is_empty
    assert deleted.lines == ("def",)


def test_first_action_seeds_history() -> None:
    state = EditorState.from_lines(["abc"], cursor=(0, 1))

    moved = reduce(state, ev.CharMove("l"))

    assert len(moved.history.entries) == 1
    assert moved.history.current is not None
    assert moved.history.current.cursor == Position(0, 1)


def test_exit_from_insert_steps_back_one_column() -> None:
    state = EditorState.from_lines([""])

    typed = reduce(reduce(state, ev.EnterMode(Mode.INSERT)), ev.TypeChar("x"))
    exited = reduce(typed, ev.ExitMode())

    assert typed.cursor == Position(0, 1)
    assert exited.lines == ("x",)
    assert exited.cursor == Position(0, 0)
    assert exited.mode is Mode.NORMAL


def test_command_buffer_actions() -> None:
    state = EditorState.from_lines(["abc"])

    pending = reduce(reduce(state, ev.AppendToBuffer("1")), ev.AppendToBuffer("g"))
    cleared = reduce(pending, ev.ClearBuffer())

    assert pending.command_buffer == "1g"
    assert cleared.command_buffer == ""


def test_type_char_in_command_mode_edits_search_bar() -> None:
    state = reduce(EditorState.from_lines(["abc"]), ev.SearchStart())

    typed = reduce(state, ev.TypeChar("b"))
    erased = reduce(typed, ev.DeleteChar())

    assert typed.command_bar == "/b"
    assert erased.command_bar == "/"
    assert erased.lines == ("abc",)
