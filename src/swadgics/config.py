"""Configuration file management for swadgics.

Reads ~/.swadgics/config.json for defaults that would otherwise
have to be passed on every run (shield gravity and scale, font path).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from swadgics.gravity import Gravity, parse_gravity

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH: Path = Path.home() / ".swadgics" / "config.json"


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        logger.warning("Ignoring unreadable config file %s", path)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: top level is not an object", path)
        return {}
    return data


def get_default_gravity(config: dict) -> Gravity | None:
    """Return the configured shield gravity, or None if unset or invalid."""
    raw = config.get("shield_gravity")
    if raw is None:
        return None
    gravity = parse_gravity(raw) if isinstance(raw, str) else None
    if gravity is None:
        logger.warning("Ignoring invalid shield_gravity in config: %r", raw)
    return gravity


def get_default_scale(config: dict) -> float | None:
    """Return the configured shield scale, or None if unset or invalid."""
    raw = config.get("shield_scale")
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, (int, float)) or raw <= 0:
        logger.warning("Ignoring invalid shield_scale in config: %r", raw)
        return None
    return float(raw)


def _get_path(config: dict, key: str) -> Path | None:
    raw = config.get(key)
    if raw is None or raw == "":
        return None
    if not isinstance(raw, str):
        logger.warning("Ignoring invalid %s in config: %r", key, raw)
        return None
    return Path(raw).expanduser()


def get_font_path(config: dict) -> Path | None:
    """Return the configured font path, or None if unset or invalid."""
    return _get_path(config, "font")


def get_badge_path(config: dict) -> Path | None:
    """Return the configured corner badge path, or None if unset or invalid."""
    return _get_path(config, "badge")
