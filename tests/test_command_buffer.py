from __future__ import annotations

from typing import Sequence

from vim_playground.actions import events as ev
from vim_playground.buffer import EditorState, Position
from vim_playground.modes import BufferStatus, CommandBuffer
from vim_playground.session import EditorSession


def make_session(lines: Sequence[str], cursor: tuple[int, int] = (0, 0)) -> EditorSession:
    return EditorSession(EditorState.from_lines(lines, cursor=cursor))


def numbered(count: int) -> list[str]:
    return [f"line {n}" for n in range(count)]


def test_parse_splits_count_and_prefix() -> None:
    parsed = CommandBuffer.parse("12g")

    assert parsed.digits == "12"
    assert parsed.prefix == "g"
    assert parsed.count == 12
    assert CommandBuffer.parse("").count is None


def test_feed_accumulates_digits_and_prefix() -> None:
    buffer, outcome = CommandBuffer().feed("1")
    buffer, second = buffer.feed("2")
    buffer, third = buffer.feed("g")

    assert outcome.status is BufferStatus.PENDING
    assert second.status is BufferStatus.PENDING
    assert third.status is BufferStatus.PENDING
    assert buffer.text == "12g"


def test_feed_completes_jumps_and_line_operators() -> None:
    _, end = CommandBuffer("12").feed("G")
    _, start = CommandBuffer("3", "g").feed("g")
    _, delete = CommandBuffer("", "d").feed("d")
    _, counted = CommandBuffer("3", "y").feed("y")

    assert end.action == ev.Jump("end", 12)
    assert start.action == ev.Jump("start", 3)
    assert delete.action == ev.LineOp("delete")
    assert counted.action == ev.LineOp("yank")


def test_feed_cancels_unknown_continuation() -> None:
    buffer, outcome = CommandBuffer("2", "d").feed("x")
    _, digit = CommandBuffer("", "g").feed("5")

    assert outcome.status is BufferStatus.CANCELLED
    assert buffer == CommandBuffer()
    assert digit.status is BufferStatus.CANCELLED


def test_feed_passes_through_plain_keys() -> None:
    buffer, outcome = CommandBuffer("4").feed("j")

    assert outcome.status is BufferStatus.PASSTHROUGH
    assert buffer.text == ""


def test_count_then_capital_g_jumps_to_line() -> None:
    session = make_session(numbered(15))

    session.feed_keys("12")
    pending = session.state
    session.feed("G")

    assert pending.command_buffer == "12"
    assert session.state.cursor == Position(11, 0)
    assert session.state.command_buffer == ""


def test_bare_g_motions() -> None:
    session = make_session(numbered(5), (2, 3))

    session.feed("G")
    at_end = session.state.cursor
    session.feed_keys("gg")
    at_start = session.state.cursor
    session.feed_keys("3gg")

    assert at_end == Position(4, 0)
    assert at_start == Position(0, 0)
    assert session.state.cursor == Position(2, 0)


def test_unknown_continuation_clears_buffer_without_editing() -> None:
    session = make_session(["abc", "def"])

    session.feed_keys("2dx")

    assert session.state.command_buffer == ""
    assert session.state.lines == ("abc", "def")


def test_count_is_not_applied_to_line_operators() -> None:
    session = make_session(["a", "b", "c", "d"])

    session.feed_keys("3dd")

    assert session.state.lines == ("b", "c", "d")
    assert session.state.clipboard == "a\n"


def test_count_before_motion_is_discarded() -> None:
    session = make_session(numbered(10))

    session.feed_keys("5j")

    assert session.state.cursor == Position(1, 0)
    assert session.state.command_buffer == ""


def test_undo_is_not_swallowed_by_pending_prefix() -> None:
    session = make_session(["abc", "def"])

    session.feed_keys("dd")
    session.feed_keys("du")

    assert session.state.lines == ("abc", "def")
    assert session.state.command_buffer == ""


def test_yank_line_then_change_line() -> None:
    session = make_session(["abc", "def"])

    session.feed_keys("yyjp")
    pasted = session.state.lines
    session.feed_keys("cc")

    assert pasted == ("abc", "def", "abc")
    assert session.state.lines == ("abc", "def", "")
    assert session.state.clipboard == "abc\n"
