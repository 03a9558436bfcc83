"""Buffer mutations: typing, backspace, line split/join, line operators, paste."""

from __future__ import annotations

from dataclasses import replace

from vim_playground.buffer.document import Position
from vim_playground.buffer.registers import RegisterShape, RegisterValue
from vim_playground.buffer.state import EditorState, Mode, VisualBlock
from vim_playground.buffer.validation import clamp_cursor

from .core import exit_to_normal
from .events import (
    DeleteChar,
    JoinLines,
    LineOp,
    NewLine,
    Paste,
    ReplaceChar,
    Substitute,
    TypeChar,
)


def _block_lines(block: VisualBlock) -> range:
    return range(
        min(block.start_line, block.end_line), max(block.start_line, block.end_line) + 1
    )


def type_char(state: EditorState, action: TypeChar) -> EditorState:
    if state.mode is Mode.VISUAL_BLOCK_INSERT and state.visual_block:
        return _block_type(state, action.char, state.visual_block)
    if state.mode is not Mode.INSERT:
        return state

    line, col = state.cursor
    text = state.current_line
    document = state.document.set_line(line, text[:col] + action.char + text[col:])
    return replace(
        state, document=document, cursor=Position(line, col + len(action.char))
    )


def _block_type(state: EditorState, char: str, block: VisualBlock) -> EditorState:
    col = block.col
    lines = list(state.lines)
    for row in _block_lines(block):
        text = lines[row]
        if col <= len(text):
            lines[row] = text[:col] + char + text[col:]
        else:
            lines[row] = text + " " * (col - len(text)) + char
    advanced = col + len(char)
    document = state.document.replace(lines=lines)
    return replace(
        state,
        document=document,
        cursor=clamp_cursor(
            document, (state.cursor.line, advanced), insert_like=True
        ),
        visual_block=replace(block, col=advanced),
    )


def delete_char(state: EditorState, action: DeleteChar) -> EditorState:
    """Backspace in INSERT and VISUAL_BLOCK_INSERT."""

    del action
    if state.mode is Mode.VISUAL_BLOCK_INSERT and state.visual_block:
        return _block_backspace(state, state.visual_block)
    if state.mode is not Mode.INSERT:
        return state

    line, col = state.cursor
    text = state.current_line
    if col > 0:
        document = state.document.set_line(line, text[: col - 1] + text[col:])
        return replace(state, document=document, cursor=Position(line, col - 1))
    if line == 0:
        return state

    previous = state.document.get_line(line - 1)
    document = state.document.update_lines(line - 1, line + 1, (previous + text,))
    return replace(state, document=document, cursor=Position(line - 1, len(previous)))


def _block_backspace(state: EditorState, block: VisualBlock) -> EditorState:
    col = block.col
    if col <= 0:
        return state
    lines = list(state.lines)
    for row in _block_lines(block):
        text = lines[row]
        if col <= len(text):
            lines[row] = text[: col - 1] + text[col:]
    document = state.document.replace(lines=lines)
    return replace(
        state,
        document=document,
        cursor=clamp_cursor(document, (state.cursor.line, col - 1), insert_like=True),
        visual_block=replace(block, col=col - 1),
    )


def new_line(state: EditorState, action: NewLine) -> EditorState:
    del action
    if state.mode is Mode.VISUAL_BLOCK_INSERT:
        return exit_to_normal(state)
    if state.mode is not Mode.INSERT:
        return state

    line, col = state.cursor
    text = state.current_line
    document = state.document.update_lines(line, line + 1, (text[:col], text[col:]))
    return replace(state, document=document, cursor=Position(line + 1, 0))


def substitute(state: EditorState, action: Substitute) -> EditorState:
    del action
    line, col = state.cursor
    text = state.current_line
    document = state.document
    if text:
        document = document.set_line(line, text[:col] + text[col + 1 :])
    return replace(
        state, document=document, mode=Mode.INSERT, command_buffer="", pending=None
    )


def replace_char(state: EditorState, action: ReplaceChar) -> EditorState:
    if action.char is None:
        return replace(state, mode=Mode.REPLACE, command_buffer="")

    line, col = state.cursor
    text = state.current_line
    document = state.document
    if col < len(text):
        document = document.set_line(line, text[:col] + action.char + text[col + 1 :])
    return replace(state, document=document, mode=Mode.NORMAL, command_buffer="")


def join_lines(state: EditorState, action: JoinLines) -> EditorState:
    del action
    line = state.cursor.line
    if line >= state.document.last_line:
        return state
    head = state.current_line
    tail = state.document.get_line(line + 1).lstrip()
    document = state.document.update_lines(line, line + 2, (f"{head} {tail}",))
    return replace(
        state, document=document, cursor=Position(line, len(head)), command_buffer=""
    )


def line_op(state: EditorState, action: LineOp) -> EditorState:
    line = state.cursor.line
    text = state.current_line
    document = state.document
    cursor = state.cursor
    mode = state.mode
    register = state.register
    yanked = RegisterValue(text=text + "\n", shape=RegisterShape.LINE)

    if action.op == "delete":
        register = yanked
        document = document.delete_lines(line, line + 1)
        cursor = Position(min(line, document.last_line), cursor.col)
    elif action.op == "yank":
        register = yanked
    elif action.op == "change":
        register = yanked
        document = document.set_line(line, "")
        cursor = Position(line, 0)
        mode = Mode.INSERT
    elif action.op == "open_below":
        document = document.insert_lines(line + 1, ("",))
        cursor = Position(line + 1, 0)
        mode = Mode.INSERT
    elif action.op == "open_above":
        document = document.insert_lines(line, ("",))
        cursor = Position(line, 0)
        mode = Mode.INSERT

    if mode is Mode.NORMAL:
        cursor = clamp_cursor(document, cursor)
    return replace(
        state,
        document=document,
        cursor=cursor,
        mode=mode,
        register=register,
        command_buffer="",
    )


def paste(state: EditorState, action: Paste) -> EditorState:
    del action
    register = state.register
    if register is None or not register.text:
        return state

    line, col = state.cursor
    text = register.text
    if register.linewise:
        segments = text.split("\n")
        if text.endswith("\n"):
            segments = segments[:-1]
        document = state.document.insert_lines(line + 1, segments)
        return replace(
            state, document=document, cursor=Position(line + 1, 0), command_buffer=""
        )

    current = state.current_line
    insert_at = col + 1
    prefix, suffix = current[:insert_at], current[insert_at:]
    segments = text.split("\n")
    if len(segments) == 1:
        document = state.document.set_line(line, prefix + text + suffix)
    else:
        new_lines = [prefix + segments[0], *segments[1:-1], segments[-1] + suffix]
        document = state.document.update_lines(line, line + 1, new_lines)
    return replace(state, document=document, command_buffer="")


__all__ = [
    "delete_char",
    "join_lines",
    "line_op",
    "new_line",
    "paste",
    "replace_char",
    "substitute",
    "type_char",
]
