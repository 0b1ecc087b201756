"""Diagnostics for the editor, built directly on telelog.

The rest of the package only touches four names:

``configure(...)`` -- install a telelog configuration (explicit, preset, or env)
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component

Diagnostics stay off the editor's stdout unless ``EDM_LOG_CONSOLE`` is set,
since stdout belongs to the buffer printer.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from typing import Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from edm.config import EditorConfig, env_value

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = env_value("LOGGER", "edm") or "edm"

# Each preset lists (builder method, argument) pairs applied to a fresh Config.
_PRESETS: Dict[str, List[Tuple[str, Any]]] = {
    "development": [
        ("with_min_level", "DEBUG"),
        ("with_console_output", True),
        ("with_colored_output", True),
        ("with_json_format", False),
    ],
    "quiet": [
        ("with_min_level", "ERROR"),
        ("with_console_output", False),
    ],
    "session_file": [
        ("with_min_level", "DEBUG"),
        ("with_console_output", False),
        ("with_json_format", True),
        ("with_buffering", True),
    ],
}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _preset_config(preset: str) -> Any:
    steps = _PRESETS.get(preset.lower())
    if steps is None:
        raise ValueError(f"Unknown preset '{preset}'.")
    config = tl.Config()
    for method, argument in steps:
        getattr(config, method)(argument)
    if preset.lower() == "session_file":
        config.with_file_output(env_value("LOG_FILE") or "edm-session.log")
    return config


def _settings_config(settings: EditorConfig) -> Any:
    config = tl.Config()
    config.with_min_level(settings.log_level)
    config.with_console_output(settings.log_console)
    if settings.log_console:
        config.with_colored_output(settings.color)
    if settings.log_json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.log_buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.log_buffer_size)
    return config


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    settings: Optional[EditorConfig] = None,
) -> None:
    """Replace the active telelog configuration.

    ``config`` adopts an explicit ``tl.Config``; ``preset`` names one of
    ``development``, ``quiet`` or ``session_file``. Otherwise the config is
    derived from ``settings`` (``EditorConfig.from_env()`` by default).
    Profiling is always switched on.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _preset_config(preset)
    elif config is None:
        config = _settings_config(settings or EditorConfig.from_env())

    config.with_profiling(True)
    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    if _ACTIVE_CONFIG is None:
        configure()
    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _emit(logger: Any, level: Any, message: str, payload: Dict[str, Any]) -> None:
    """Log ``message`` with ``payload`` as key/value pairs when supported."""

    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(key), _text(val)) for key, val in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str | Any = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` as structured pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[None]:
    """Profile a code block and (optionally) track it as a component.

    ``component=True`` reuses ``name`` as the component id. Metadata is pushed
    as logger context for the duration of the block, and an exception escaping
    the block is logged as ``span::fail`` before it propagates.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}

    for key, value in context.items():
        log.add_context(key, value)
    try:
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            try:
                yield
            except Exception as exc:
                failure = {"span": name, **context, "reason": str(exc)}
                if component_name:
                    failure["component"] = component_name
                _emit(log, "error", "span::fail", failure)
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = ["configure", "get_logger", "record_event", "span"]
