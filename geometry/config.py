"""Environment-driven configuration for the geometry package."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class GeometryConfig:
    """Immutable geometry package configuration."""

    log_level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json
    abs_tolerance: float = 1e-9
    grid_trace_enabled: bool = False


_CONFIG: ContextVar[GeometryConfig | None] = ContextVar("geometry_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _format(raw: str, fallback: str) -> str:
    value = raw.strip().lower()
    if value not in {"text", "json"}:
        return fallback
    return value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("GEOMETRY_LOG_LEVEL", env=env)
    if value is None:
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_config(*, env: Mapping[str, str] | None = None) -> GeometryConfig:
    """Load configuration from env vars, or from ``env`` when given."""
    file_path = _text("GEOMETRY_LOG_FILE", "", env=env)
    return GeometryConfig(
        log_level_name=resolve_log_level_name(env=env),
        console_format=_format(_text("GEOMETRY_LOG_FORMAT", "text", env=env), "text"),
        file_path=file_path or None,
        file_format=_format(_text("GEOMETRY_LOG_FILE_FORMAT", "json", env=env), "json"),
        abs_tolerance=_float("GEOMETRY_ABS_TOLERANCE", 1e-9, minimum=0.0, env=env),
        grid_trace_enabled=_flag("GEOMETRY_GRID_TRACE", False, env=env),
    )


def initialize_config(*, env: Mapping[str, str] | None = None) -> GeometryConfig:
    config = load_config(env=env)
    _CONFIG.set(config)
    return config


def set_config(config: GeometryConfig) -> GeometryConfig:
    _CONFIG.set(config)
    return config


def get_config() -> GeometryConfig:
    config = _CONFIG.get()
    if config is not None:
        return config
    return initialize_config()


__all__ = [
    "GeometryConfig",
    "get_config",
    "initialize_config",
    "load_config",
    "resolve_log_level_name",
    "set_config",
]
