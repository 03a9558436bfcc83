from __future__ import annotations

from typing import Sequence

from vim_playground.actions import events as ev
from vim_playground.actions.search import (
    find_all_matches,
    next_match,
    prev_match,
    word_under_cursor,
)
from vim_playground.buffer import EditorState, Mode, Position
from vim_playground.modes import reduce
from vim_playground.session import EditorSession


def make_session(lines: Sequence[str]) -> EditorSession:
    return EditorSession(EditorState.from_lines(lines))


def test_find_all_matches_includes_overlaps() -> None:
    assert find_all_matches(["aaa", "xa"], "aa") == [Position(0, 0), Position(0, 1)]
    assert find_all_matches(["abc"], "") == []


def test_next_and_prev_wrap_around() -> None:
    lines = ["foo", "bar", "foo"]

    assert next_match(lines, "foo", Position(0, 0)) == Position(2, 0)
    assert next_match(lines, "foo", Position(2, 0)) == Position(0, 0)
    assert prev_match(lines, "foo", Position(2, 0)) == Position(0, 0)
    assert prev_match(lines, "foo", Position(0, 0)) == Position(2, 0)
    assert next_match(lines, "zzz", Position(0, 0)) is None


def test_search_next_from_stored_query() -> None:
    state = EditorState.from_lines(["foo", "bar", "foo"])
    state = reduce(state, ev.SearchStart())
    for char in "foo":
        state = reduce(state, ev.SearchTypeChar(char))

    submitted = reduce(state, ev.SearchSubmit())
    wrapped = reduce(submitted, ev.SearchNext())

    assert submitted.cursor == Position(2, 0)
    assert submitted.search_query == "foo"
    assert submitted.mode is Mode.NORMAL
    assert submitted.command_bar is None
    assert wrapped.cursor == Position(0, 0)


def test_search_keys_drive_command_bar() -> None:
    session = make_session(["foo", "bar", "foo"])

    session.feed_keys(["/", "f", "o"])
    typing = session.state
    session.feed_keys(["o", "ENTER"])
    found = session.state
    session.feed("n")
    wrapped = session.state
    session.feed("N")

    assert typing.mode is Mode.COMMAND
    assert typing.command_bar == "/fo"
    assert found.cursor == Position(2, 0)
    assert wrapped.cursor == Position(0, 0)
    assert session.state.cursor == Position(2, 0)


def test_search_without_match_keeps_cursor() -> None:
    session = make_session(["abc", "def"])

    session.feed_keys(["j", "/", "z", "ENTER"])

    assert session.state.cursor == Position(1, 0)
    assert session.state.mode is Mode.NORMAL
    assert session.state.search_query == "z"


def test_backspace_past_prompt_cancels_search() -> None:
    session = make_session(["abc"])

    session.feed_keys(["/", "a", "BACKSPACE"])
    trimmed = session.state
    session.feed("BACKSPACE")

    assert trimmed.command_bar == "/"
    assert session.state.mode is Mode.NORMAL
    assert session.state.command_bar is None


def test_escape_cancels_search() -> None:
    session = make_session(["abc", "abc"])

    session.feed_keys(["/", "a", "ESC"])

    assert session.state.mode is Mode.NORMAL
    assert session.state.cursor == Position(0, 0)
    assert session.state.search_query == ""


def test_star_searches_word_under_cursor() -> None:
    session = make_session(["foo bar", "x foo"])

    session.feed("*")

    assert session.state.cursor == Position(1, 2)
    assert session.state.search_query == "foo"


def test_word_under_cursor() -> None:
    assert word_under_cursor("foo_bar baz", 2) == "foo_bar"
    assert word_under_cursor("foo bar", 3) == ""
