from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict


DEFAULT_CONFIG_PATH = Path("config.toml")
CONFIG_PATH_ENV = "AR_CONFIG"
ROOT_TABLE = "adventurer_registry"


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Return ``path``, else ``$AR_CONFIG``, else ``config.toml``."""
    if path is not None:
        return Path(path)
    return Path(os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the bot's TOML config.

    Returns an empty dict when the file is missing so callers can fall back to
    environment variables.
    """
    target = resolve_config_path(path)
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        return tomllib.load(handle)


def section(config: Dict[str, Any] | None, name: str) -> Dict[str, Any]:
    """Return the ``[adventurer_registry.<name>]`` table, or ``{}``."""
    value = (config or {}).get(ROOT_TABLE, {}).get(name, {})
    return value if isinstance(value, dict) else {}


__all__ = [
    "load_raw_config",
    "resolve_config_path",
    "section",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_PATH_ENV",
]
