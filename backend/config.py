# backend/config.py

import copy
import os
from typing import Any, Dict

import yaml

from .board import PLACEMENT_STRATEGIES
from .glyphs import DEFAULT_COUNT_GLYPHS, DEFAULT_HIDDEN, DEFAULT_MINE_GLYPH, GlyphTable

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "config", "default.yaml")

DEFAULTS: Dict[str, Any] = {
    "glyphs": {
        "mine": DEFAULT_MINE_GLYPH,
        "counts": list(DEFAULT_COUNT_GLYPHS),
    },
    "hidden": DEFAULT_HIDDEN,
    "reveal": {
        "max_attempts": 100,
    },
    "placement": "unique",
}


class ConfigError(ValueError):
    pass


def _merge(base: Dict[str, Any], override: Dict[str, Any], path: str = "") -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        name = f"{path}{key}"
        if key not in base:
            raise ConfigError(f"Unknown config key '{name}'")
        if isinstance(base[key], dict):
            if not isinstance(value, dict):
                raise ConfigError(f"Config key '{name}' must be a mapping")
            merged[key] = _merge(base[key], value, path=f"{name}.")
        else:
            merged[key] = value
    return merged


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check value types and build the glyph table once so a bad file fails
    at load time rather than at render time.
    """
    try:
        cfg["glyph_table"] = GlyphTable(cfg["glyphs"]["mine"], cfg["glyphs"]["counts"])
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid glyphs: {exc}") from exc

    if not isinstance(cfg["hidden"], str):
        raise ConfigError("'hidden' must be a string")
    try:
        cfg["hidden"].format(glyph=cfg["glyph_table"].mine)
    except (ValueError, KeyError, IndexError) as exc:
        raise ConfigError(f"Invalid 'hidden' placeholder {cfg['hidden']!r}: {exc}") from exc

    max_attempts = cfg["reveal"]["max_attempts"]
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 0:
        raise ConfigError("'reveal.max_attempts' must be a non-negative integer")

    if cfg["placement"] not in PLACEMENT_STRATEGIES:
        raise ConfigError(
            f"'placement' must be one of {', '.join(PLACEMENT_STRATEGIES)}, got {cfg['placement']!r}"
        )
    return cfg


def load_config(path: str = None) -> Dict[str, Any]:
    """
    Load a YAML config and merge it over the built-in defaults.

    With no path, the repository's config/default.yaml is used if present.
    An explicit path that does not exist is an error.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not os.path.exists(path):
            return validate_config(copy.deepcopy(DEFAULTS))
    elif not os.path.exists(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Top level of {path} must be a mapping")

    return validate_config(_merge(DEFAULTS, raw))
