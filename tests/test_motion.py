from __future__ import annotations

from dataclasses import replace
from typing import Sequence, Tuple

from vim_playground.actions import events as ev
from vim_playground.buffer import EditorState, Mode, Position, WaitKind
from vim_playground.config import EngineConfig
from vim_playground.modes import reduce


def make_state(
    lines: Sequence[str],
    cursor: Tuple[int, int] = (0, 0),
    *,
    mode: Mode = Mode.NORMAL,
    settings: EngineConfig | None = None,
) -> EditorState:
    state = EditorState.from_lines(lines, cursor=cursor, settings=settings)
    return replace(state, mode=mode)


def run(state: EditorState, *actions: ev.Action) -> EditorState:
    for action in actions:
        state = reduce(state, action)
    return state


def test_word_motion_lands_on_next_word() -> None:
    state = make_state(["abc def", "ghi"])

    moved = run(state, ev.WordMove("w"))

    assert moved.cursor == Position(0, 4)


def test_word_motion_on_last_word_clamps_to_line() -> None:
    state = make_state(["abc"])

    moved = run(state, ev.WordMove("w"))

    assert moved.cursor == Position(0, 2)


def test_char_moves_clamp_by_mode() -> None:
    normal = make_state(["abc"], (0, 2))
    insert = make_state(["abc"], (0, 2), mode=Mode.INSERT)

    assert run(normal, ev.CharMove("l")).cursor == Position(0, 2)
    assert run(insert, ev.CharMove("l")).cursor == Position(0, 3)
    assert run(make_state(["abc"]), ev.CharMove("h")).cursor == Position(0, 0)


def test_vertical_move_reclamps_column() -> None:
    state = make_state(["abcdef", "ab"], (0, 5))

    down = run(state, ev.CharMove("j"))
    past_end = run(down, ev.CharMove("j"))

    assert down.cursor == Position(1, 1)
    assert past_end.cursor == Position(1, 1)


def test_line_boundaries() -> None:
    assert run(make_state(["hello"]), ev.LineBoundary("$")).cursor == Position(0, 4)
    assert run(make_state([""]), ev.LineBoundary("$")).cursor == Position(0, 0)
    assert run(make_state(["   x"]), ev.LineBoundary("_")).cursor == Position(0, 3)
    assert run(make_state(["   "]), ev.LineBoundary("_")).cursor == Position(0, 2)


def test_bracket_match_on_one_line() -> None:
    lines = ["(a [b] c)"]

    assert run(make_state(lines), ev.BracketMatch()).cursor == Position(0, 8)
    assert run(make_state(lines, (0, 8)), ev.BracketMatch()).cursor == Position(0, 0)
    assert run(make_state(lines, (0, 3)), ev.BracketMatch()).cursor == Position(0, 5)


def test_bracket_match_across_lines() -> None:
    lines = ["if (", "  x", ")"]

    forward = run(make_state(lines, (0, 3)), ev.BracketMatch())
    backward = run(make_state(lines, (2, 0)), ev.BracketMatch())

    assert forward.cursor == Position(2, 0)
    assert backward.cursor == Position(0, 3)


def test_bracket_match_without_partner_keeps_cursor() -> None:
    assert run(make_state(["(abc"]), ev.BracketMatch()).cursor == Position(0, 0)
    assert run(make_state(["abc"], (0, 1)), ev.BracketMatch()).cursor == Position(0, 1)


def test_scroll_uses_configured_amount() -> None:
    lines = [f"line {n}" for n in range(30)]

    default = run(make_state(lines), ev.Scroll("down"))
    custom = run(
        make_state(lines, settings=EngineConfig(scroll_amount=3)), ev.Scroll("down")
    )
    up = run(make_state(lines, (5, 0)), ev.Scroll("up"))

    assert default.cursor == Position(10, 0)
    assert custom.cursor == Position(3, 0)
    assert up.cursor == Position(0, 0)


def test_jump_targets() -> None:
    lines = ["a", "b", "c", "d"]

    assert run(make_state(lines, (1, 0)), ev.Jump("end")).cursor == Position(3, 0)
    assert run(make_state(lines, (3, 0)), ev.Jump("start")).cursor == Position(0, 0)
    assert run(make_state(lines), ev.Jump("start", 3)).cursor == Position(2, 0)
    assert run(make_state(lines), ev.Jump("end", 100)).cursor == Position(3, 0)


def test_find_char_forward_and_backward() -> None:
    state = make_state(["a,b,c"])

    waiting = run(state, ev.WaitForChar(WaitKind.FIND_FORWARD))
    found = run(waiting, ev.ResolveWait(","))
    again = run(found, ev.WaitForChar(WaitKind.FIND_FORWARD), ev.ResolveWait(","))
    back = run(again, ev.WaitForChar(WaitKind.FIND_BACKWARD), ev.ResolveWait(","))

    assert waiting.waiting_for_char
    assert found.cursor == Position(0, 1)
    assert not found.waiting_for_char
    assert again.cursor == Position(0, 3)
    assert back.cursor == Position(0, 1)


def test_find_char_without_match_keeps_cursor() -> None:
    state = make_state(["abc"])

    result = run(state, ev.WaitForChar(WaitKind.FIND_FORWARD), ev.ResolveWait("z"))

    assert result.cursor == Position(0, 0)
    assert not result.waiting_for_char
