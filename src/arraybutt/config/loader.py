from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.toml")
CONFIG_PATH_ENV = "ARRAYBUTT_CONFIG"


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Explicit ``path`` first, then ``$ARRAYBUTT_CONFIG``, then ./config.toml."""

    if path is not None:
        return Path(path)
    env_path = os.getenv(CONFIG_PATH_ENV, "").strip()
    return Path(env_path) if env_path else DEFAULT_CONFIG_PATH


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the ``[arraybutt]`` tables of the optional TOML config file.

    A missing file yields an empty dict so every setting falls back to the
    environment. Unrelated top-level tables are ignored. An unreadable file
    raises :class:`ValueError` naming it.
    """
    target = resolve_config_path(path)
    if not target.is_file():
        if path is not None or os.getenv(CONFIG_PATH_ENV):
            logger.warning("Config file %s not found; using environment only", target)
        return {}

    try:
        with target.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid config file {target}: {exc}") from exc

    section = data.get("arraybutt", {})
    if not isinstance(section, dict):
        raise ValueError(f"Invalid config file {target}: [arraybutt] must be a table")

    logger.info("Loaded configuration overrides from %s", target)
    return {"arraybutt": section}


__all__ = ["load_raw_config", "resolve_config_path", "DEFAULT_CONFIG_PATH", "CONFIG_PATH_ENV"]
