from __future__ import annotations

from typing import List

from vim_playground.adapters.textual import TextualUIHooks, TextualVimAdapter
from vim_playground.buffer import EditorMirror, Mode, Position
from vim_playground.session import EditorSession


def make_adapter(
    lines: List[str],
    *,
    mirrors: List[EditorMirror] | None = None,
    statuses: List[str] | None = None,
    command_lines: List[str] | None = None,
    logs: List[str] | None = None,
) -> TextualVimAdapter:
    mirrors = mirrors if mirrors is not None else []
    statuses = statuses if statuses is not None else []
    command_lines = command_lines if command_lines is not None else []
    logs = logs if logs is not None else []
    hooks = TextualUIHooks(
        update_buffer=mirrors.append,
        update_status=statuses.append,
        show_command=command_lines.append,
        log=logs.append,
    )
    return TextualVimAdapter(EditorSession(lines=lines), hooks)


def test_adapter_pushes_initial_snapshot() -> None:
    mirrors: List[EditorMirror] = []
    statuses: List[str] = []

    make_adapter(["hello"], mirrors=mirrors, statuses=statuses)

    assert mirrors[0].text == "hello"
    assert statuses[0].startswith("-- NORMAL --")


def test_adapter_updates_buffer_and_status() -> None:
    mirrors: List[EditorMirror] = []
    statuses: List[str] = []
    adapter = make_adapter([""], mirrors=mirrors, statuses=statuses)

    adapter.handle_textual_key("i", text="i")
    inserting = statuses[-1]
    adapter.handle_textual_key("x", text="x")
    result = adapter.handle_textual_key("ESC")

    assert inserting.startswith("-- INSERT --")
    assert result.consumed
    assert mirrors[-1].lines == ("x",)
    assert mirrors[-1].mode is Mode.NORMAL
    assert mirrors[-1].cursor == Position(0, 0)


def test_adapter_relays_search_prompt() -> None:
    command_lines: List[str] = []
    adapter = make_adapter(["bar", "foo"], command_lines=command_lines)

    adapter.handle_textual_key("/", text="/")
    adapter.handle_textual_key("f", text="f")
    adapter.handle_textual_key("o", text="o")
    typed = command_lines[-1]
    adapter.handle_textual_key("ENTER")

    assert typed == "/fo"
    assert command_lines[-1] == ""
    assert adapter.session.state.cursor == Position(1, 0)


def test_adapter_lowercases_modifiers() -> None:
    adapter = make_adapter(["abc"])

    adapter.handle_textual_key("v", modifiers=("CTRL",))

    assert adapter.session.state.mode is Mode.VISUAL_BLOCK


def test_adapter_logs_key_and_result_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter(["abc"], logs=logs)

    adapter.handle_textual_key("l", text="l")

    assert logs[0].startswith("key ->")
    assert "key='l'" in logs[0]
    assert logs[1].startswith("result <-")
    assert "cursor=(0, 1)" in logs[1]


def test_unbound_key_reports_not_consumed() -> None:
    adapter = make_adapter(["abc"])

    result = adapter.handle_textual_key("Q", text="Q")

    assert result.consumed is False
    assert result.status == "unbound"
