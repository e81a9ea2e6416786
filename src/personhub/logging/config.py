"""Persisted logging settings.

The settings live in a small JSON document (``~/.personhub/logging.json`` by
default). ``PERSONHUB_LOG_LEVEL`` takes precedence over the stored level so a
single run can be made more verbose without touching the file.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

PathLike = os.PathLike[str] | str


def config_path(config_file: Optional[PathLike] = None) -> Path:
    """Resolve the settings file from the argument or the environment."""

    if config_file is not None:
        return Path(config_file)
    explicit = (os.environ.get("PERSONHUB_LOG_CONFIG") or "").strip()
    if explicit:
        return Path(explicit).expanduser()
    config_dir = (os.environ.get("PERSONHUB_CONFIG_DIR") or "").strip()
    base = Path(config_dir).expanduser() if config_dir else Path.home() / ".personhub"
    return base / "logging.json"


def load_config(config_file: Optional[PathLike] = None) -> dict[str, Any]:
    """Read the settings file; a missing or unreadable file yields ``{}``."""

    path = config_path(config_file)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict[str, Any], config_file: Optional[PathLike] = None) -> Path:
    path = config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(config, handle, indent=2, sort_keys=True)
        handle.write("\n")
    return path


def level_number(level: str | int | None) -> Optional[int]:
    """Map a level name or number to its numeric value, ``None`` if unknown."""

    if level is None:
        return None
    if isinstance(level, int):
        return level
    candidate = logging.getLevelName(str(level).strip().upper())
    return candidate if isinstance(candidate, int) else None


def load_log_level(config_file: Optional[PathLike] = None) -> Optional[int]:
    """Return the level from ``PERSONHUB_LOG_LEVEL`` or the settings file."""

    from_env = level_number(os.environ.get("PERSONHUB_LOG_LEVEL") or None)
    if from_env is not None:
        return from_env
    return level_number(load_config(config_file).get("log_level"))


def save_log_level(level: str | int, config_file: Optional[PathLike] = None) -> Path:
    """Persist ``level`` and return the settings path.

    Raises
    ------
    ValueError
        If ``level`` is not a known logging level.
    """

    numeric = level_number(level)
    if numeric is None:
        raise ValueError(f"Unknown logging level: {level!r}")
    config = load_config(config_file)
    config["log_level"] = logging.getLevelName(numeric)
    return save_config(config, config_file)


__all__ = [
    "config_path",
    "load_config",
    "save_config",
    "load_log_level",
    "save_log_level",
]
