"""Mode handlers, the command-buffer parser and key dispatch."""

from .base_mode import IGNORED, KeyInput, ModeHandler, ModeResult
from .command_buffer import BufferOutcome, BufferStatus, CommandBuffer
from .reducer import REDUCERS, reduce
from .normal_mode import NormalMode
from .insert_mode import BlockInsertMode, InsertMode, ReplaceMode
from .visual_mode import VisualMode
from .command_mode import CommandMode
from .wait_mode import WaitMode
from .mode_manager import ModeManager, default_manager, dispatch

__all__ = [
    "IGNORED",
    "KeyInput",
    "ModeHandler",
    "ModeResult",
    "BufferOutcome",
    "BufferStatus",
    "CommandBuffer",
    "REDUCERS",
    "reduce",
    "NormalMode",
    "InsertMode",
    "BlockInsertMode",
    "ReplaceMode",
    "VisualMode",
    "CommandMode",
    "WaitMode",
    "ModeManager",
    "default_manager",
    "dispatch",
]
