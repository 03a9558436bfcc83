"""Textual host: key normalization, snapshot rendering and the demo app."""

from .controller import TextualUIHooks, TextualVimAdapter

__all__ = ["TextualUIHooks", "TextualVimAdapter"]
