"""Settings resolution and user config merging for the CLI."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from myprs_core.errors import ConfigError

CONFIG_ENV = "GH_MYPRS_CONFIG"

DEFAULT_SETTINGS: dict[str, Any] = {
    "fetch_timeout_seconds": 10.0,
    "identity_timeout_seconds": 3.0,
    "hostname": None,
    "log_level": "WARNING",
}

TIMEOUT_KEYS = ("fetch_timeout_seconds", "identity_timeout_seconds")


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise ConfigError(f"config path not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON config: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("config root must be a JSON object")
    return raw


def _positive_seconds(key: str, value: Any) -> float:
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be a number, got {value!r}") from None
    if seconds <= 0:
        raise ConfigError(f"{key} must be positive, got {value!r}")
    return seconds


def resolve_settings(config_path: str | None = None, overrides: dict[str, Any] | None = None) -> dict:
    """Merge defaults, the optional JSON config and CLI overrides (highest wins)."""
    resolved = dict(DEFAULT_SETTINGS)
    user_config = load_user_config(config_path or os.environ.get(CONFIG_ENV))

    for key in DEFAULT_SETTINGS:
        if key in user_config:
            resolved[key] = user_config[key]

    for key, value in (overrides or {}).items():
        if value is not None:
            resolved[key] = value

    for key in TIMEOUT_KEYS:
        resolved[key] = _positive_seconds(key, resolved[key])

    level = str(resolved["log_level"]).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown log level: {resolved['log_level']}")
    resolved["log_level"] = level
    return resolved
