from vim_playground.actions.words import (
    classify,
    next_word_end,
    next_word_start,
    prev_word_start,
)
from vim_playground.buffer import Position


def test_classify_groups_characters() -> None:
    assert classify("a") == "word"
    assert classify("7") == "word"
    assert classify("_") == "word"
    assert classify(" ") == "space"
    assert classify("") == "space"
    assert classify(".") == "special"


def test_next_word_start_skips_to_following_token() -> None:
    lines = ["abc def", "ghi"]

    assert next_word_start(lines, Position(0, 0)) == Position(0, 4)
    assert next_word_start(lines, Position(0, 4)) == Position(1, 0)


def test_next_word_start_stops_on_empty_line() -> None:
    lines = ["abc", "", "def"]

    first = next_word_start(lines, Position(0, 0))
    second = next_word_start(lines, first)

    assert first == Position(1, 0)
    assert second == Position(2, 0)


def test_next_word_start_splits_word_and_punctuation() -> None:
    lines = ["foo.bar"]

    assert next_word_start(lines, Position(0, 0)) == Position(0, 3)
    assert next_word_start(lines, Position(0, 3)) == Position(0, 4)


def test_prev_word_start_moves_to_token_start() -> None:
    lines = ["abc def"]

    assert prev_word_start(lines, Position(0, 6)) == Position(0, 4)
    assert prev_word_start(lines, Position(0, 4)) == Position(0, 0)
    assert prev_word_start(lines, Position(0, 0)) == Position(0, 0)


def test_prev_word_start_crosses_lines() -> None:
    lines = ["abc", "def"]

    assert prev_word_start(lines, Position(1, 0)) == Position(0, 0)


def test_next_word_end_reaches_last_character() -> None:
    lines = ["abc def"]

    assert next_word_end(lines, Position(0, 0)) == Position(0, 2)
    assert next_word_end(lines, Position(0, 2)) == Position(0, 6)
    assert next_word_end(lines, Position(0, 6)) == Position(0, 6)


def test_next_word_end_crosses_lines() -> None:
    lines = ["ab", "cd"]

    assert next_word_end(lines, Position(0, 1)) == Position(1, 1)


def test_word_forward_then_back_returns_to_start() -> None:
    lines = ["alpha beta gamma"]
    start = Position(0, 6)

    forward = next_word_start(lines, start)
    back = prev_word_start(lines, forward)

    assert forward == Position(0, 11)
    assert back == start
