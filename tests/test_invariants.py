from __future__ import annotations

import random

import pytest

from vim_playground.buffer import EditorState, Position, max_col, normalize_range
from vim_playground.session import EditorSession

KEYS = (
    "h", "j", "k", "l", "w", "b", "e", "$", "_", "%", "G", "g", "d", "y", "c",
    "x", "s", "r", "J", "p", "o", "O", "i", "a", "v", "V", "I", "A", "~", "U",
    ">", "<", "/", "n", "N", "*", "u", "f", "F", "1", "2", "0", " ", "(", ")",
    "ctrl+v", "ctrl+r", "ctrl+d", "ctrl+u", "ESC", "ENTER", "BACKSPACE",
    "LEFT", "RIGHT", "UP", "DOWN",
)


def assert_consistent(state: EditorState) -> None:
    assert len(state.lines) >= 1
    line, col = state.cursor
    assert 0 <= line < len(state.lines)
    limit = max_col(state.lines[line], insert_like=state.mode.is_insert_like)
    assert 0 <= col <= limit
    assert len(state.history.entries) <= state.settings.history_limit


@pytest.mark.parametrize("seed", [3, 17, 2024])
def test_random_key_sequences_keep_cursor_in_bounds(seed: int) -> None:
    rng = random.Random(seed)
    session = EditorSession(lines=["foo (bar) baz", "", "  qux", "foo"])

    for _ in range(400):
        session.feed(rng.choice(KEYS))
        assert_consistent(session.state)


def test_normalize_range_is_symmetric() -> None:
    a = Position(2, 1)
    b = Position(0, 5)

    assert normalize_range(a, b) == normalize_range(b, a) == (b, a)
    assert normalize_range(a, a) == (a, a)
