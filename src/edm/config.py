"""Environment-driven editor configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "EDM_"


def env_value(
    name: str,
    default: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    source = os.environ if environ is None else environ
    return source.get(f"{ENV_PREFIX}{name}", default)


def env_flag(
    name: str, default: bool, *, environ: Optional[Mapping[str, str]] = None
) -> bool:
    raw = env_value(name, environ=environ)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def env_int(
    name: str, fallback: int, *, environ: Optional[Mapping[str, str]] = None
) -> int:
    value = env_value(name, environ=environ)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True)
class EditorConfig:
    """Settings shared by the console REPL and the Textual front-end."""

    prompt: str = ":"
    color: bool = True
    log_level: str = "INFO"
    log_file: str = ""
    log_console: bool = False
    log_json: bool = False
    log_buffered: bool = False
    log_buffer_size: int = 2048

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        source = os.environ if environ is None else environ
        no_color = env_flag("NO_COLOR", False, environ=source) or "NO_COLOR" in source
        return cls(
            prompt=env_value("PROMPT", ":", environ=source) or "",
            color=not no_color,
            log_level=(env_value("LOG_LEVEL", environ=source) or "INFO").upper(),
            log_file=env_value("LOG_FILE", "", environ=source) or "",
            log_console=env_flag("LOG_CONSOLE", False, environ=source),
            log_json=env_flag("LOG_JSON", False, environ=source),
            log_buffered=env_flag("LOG_BUFFERED", False, environ=source),
            log_buffer_size=env_int("LOG_BUFFER_SIZE", 2048, environ=source),
        )


__all__ = ["ENV_PREFIX", "EditorConfig", "env_flag", "env_int", "env_value"]
