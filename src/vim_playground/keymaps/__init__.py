"""Keymap registry, binding models and the built-in key tables."""

from .models import ActionRef, Binding, HandlerResult, KeyHandler, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import (
    BLOCK_INSERT,
    COMMAND,
    DEFAULT_ACTIONS,
    DEFAULT_BINDINGS,
    INSERT,
    NORMAL,
    VISUAL,
    load_default_keymaps,
)

__all__ = [
    "ActionRef",
    "Binding",
    "HandlerResult",
    "KeyHandler",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "BLOCK_INSERT",
    "COMMAND",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "INSERT",
    "NORMAL",
    "VISUAL",
    "load_default_keymaps",
]
