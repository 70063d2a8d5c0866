"""Location and I/O of the persisted preferences file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .models import AppConfig

logger = logging.getLogger(__name__)

CONFIG_ENV = "WATCHFACE_CONFIG"
CONFIG_FILENAME = ".watchface_config.json"


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Read preferences, falling back to defaults on any read or parse error."""
    p = path or config_path()
    if not p.exists():
        return AppConfig()
    try:
        return AppConfig.from_json(p.read_text(encoding="utf-8"))
    except (OSError, ValueError, TypeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", p, exc)
        return AppConfig()


def save_config(cfg: AppConfig, path: Optional[Path] = None) -> bool:
    """Write preferences; returns False if the file could not be written."""
    p = path or config_path()
    try:
        p.write_text(cfg.to_json(), encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not save config to %s: %s", p, exc)
        return False
    logger.debug("Saved config to %s", p)
    return True


__all__ = ["CONFIG_ENV", "config_path", "load_config", "save_config"]
