"""telelog wiring for the playground.

Everything else in the package logs through four calls: ``configure``,
``get_logger``, ``record_event`` and ``span``. Output is driven by
``VIM_PLAYGROUND_*`` environment variables or by one of the named ``PRESETS``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "VIM_PLAYGROUND_"
DEFAULT_LOGGER_NAME = "vim_playground"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env(name: str, environ: Mapping[str, str]) -> Optional[str]:
    value = environ.get(f"{ENV_PREFIX}{name}")
    return value or None


def _flag(name: str, environ: Mapping[str, str], default: bool) -> bool:
    raw = _env(name, environ)
    if raw is None:
        return default
    return raw.lower() in _TRUTHY


@dataclass(frozen=True)
class LogSettings:
    """Plain description of a telelog ``Config``."""

    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: Optional[str] = None
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LogSettings":
        environ = os.environ if environ is None else environ
        buffer_size = None
        if _flag("LOG_BUFFERED", environ, False):
            buffer_size = int(_env("LOG_BUFFER_SIZE", environ) or "2048")
        return cls(
            level=(_env("LOG_LEVEL", environ) or "INFO").upper(),
            console=not _flag("DISABLE_CONSOLE", environ, False),
            colored=not _flag("NO_COLOR", environ, False),
            json=_flag("LOG_JSON", environ, False),
            log_file=_env("LOG_FILE", environ),
            buffer_size=buffer_size,
        )

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        # span() relies on logger.profile
        config.with_profiling(True)
        return config


PRESET_SETTINGS: Dict[str, LogSettings] = {
    "development": LogSettings(level="DEBUG"),
    "production": LogSettings(
        console=False, log_file="vim_playground.log", buffer_size=2048
    ),
    "performance": LogSettings(
        level="DEBUG",
        console=False,
        json=True,
        log_file="vim_playground-performance.log",
        buffer_size=2048,
    ),
}
PRESETS = tuple(PRESET_SETTINGS)

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def preset_settings(
    preset: str, environ: Optional[Mapping[str, str]] = None
) -> LogSettings:
    """Settings for ``preset``; ``VIM_PLAYGROUND_LOG_FILE`` still wins."""

    try:
        settings = PRESET_SETTINGS[preset.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown preset '{preset}'.") from exc
    log_file = _env("LOG_FILE", os.environ if environ is None else environ)
    if log_file and settings.log_file:
        settings = replace(settings, log_file=log_file)
    return settings


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog configuration and drop cached loggers.

    ``config`` is a ready ``telelog.Config``; ``preset`` names one of
    ``PRESETS``. With neither, settings are read from the environment.
    """

    global _config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if config is None:
        settings = preset_settings(preset) if preset else LogSettings.from_env()
        config = settings.build()
    else:
        config.with_profiling(True)
    _config = config
    _loggers.clear()


def _active_config() -> Any:
    if _config is None:
        configure(preset=os.environ.get(f"{ENV_PREFIX}PRESET") or None)
    return _config


def get_logger(name: Optional[str] = None) -> Any:
    """Cached ``telelog.Logger`` bound to the active configuration."""

    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _loggers.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _active_config())
        _loggers[logger_name] = logger
    return logger


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _emit(logger: Any, level: str, message: str, fields: Mapping[str, Any]) -> None:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    pairs = [(str(key), _text(value)) for key, value in fields.items()]
    if structured is not None:
        structured(message, pairs)
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    rendered = " ".join(f"{key}={value}" for key, value in pairs)
    plain(f"{message} {rendered}" if rendered else message)


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Mapping[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", dict(data or {}))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Mapping[str, Any]] = None,
) -> Iterator[Any]:
    """Profile a block under ``name`` and yield the logger doing it.

    ``component=True`` also tracks the block as a component of the same name;
    a string names the component explicitly. ``metadata`` is pushed as log
    context for the duration of the block.
    """

    logger = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}

    with ExitStack() as stack:
        for key, value in context.items():
            logger.add_context(key, value)
            stack.callback(logger.remove_context, key)
        if component_name:
            stack.enter_context(logger.track_component(component_name))
        stack.enter_context(logger.profile(name))
        try:
            yield logger
        except Exception as exc:
            _emit(logger, "error", "span::fail", {"span": name, "reason": str(exc)})
            raise


__all__ = [
    "ENV_PREFIX",
    "PRESETS",
    "LogSettings",
    "configure",
    "get_logger",
    "preset_settings",
    "record_event",
    "span",
]
