"""Engine tunables with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from vim_playground.runtime.telemetry import ENV_PREFIX

DEFAULT_HISTORY_LIMIT = 50
DEFAULT_SCROLL_AMOUNT = 10
DEFAULT_INDENT_WIDTH = 2


def _env_int(
    environ: Mapping[str, str], name: str, default: int, *, minimum: int
) -> int:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ValueError(f"{ENV_PREFIX}{name} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Numeric knobs consulted by the editing handlers."""

    history_limit: int = DEFAULT_HISTORY_LIMIT
    scroll_amount: int = DEFAULT_SCROLL_AMOUNT
    indent_width: int = DEFAULT_INDENT_WIDTH

    @property
    def indent_unit(self) -> str:
        return " " * self.indent_width

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Read ``VIM_PLAYGROUND_HISTORY_LIMIT`` and friends."""

        env = os.environ if environ is None else environ
        return cls(
            history_limit=_env_int(
                env, "HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT, minimum=1
            ),
            scroll_amount=_env_int(
                env, "SCROLL_AMOUNT", DEFAULT_SCROLL_AMOUNT, minimum=1
            ),
            indent_width=_env_int(env, "INDENT_WIDTH", DEFAULT_INDENT_WIDTH, minimum=1),
        )


__all__ = [
    "DEFAULT_HISTORY_LIMIT",
    "DEFAULT_INDENT_WIDTH",
    "DEFAULT_SCROLL_AMOUNT",
    "EngineConfig",
]
