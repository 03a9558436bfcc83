"""Modal Vim-style editing engine with a Textual playground."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "keymaps",
    "modes",
    "runtime",
    "session",
]

__version__ = "0.1.0"
