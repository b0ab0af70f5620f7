# classicpass/config.py
"""
Simple settings persistence for ClassicPass.
Settings saved as JSON in %APPDATA%/ClassicPass/config.json (Windows) or ~/.classicpass/config.json (fallback).
CLASSICPASS_CONFIG_DIR overrides the directory. Only settings are stored, never passwords.
"""

import os
import json
import logging
from typing import Dict, Any, Tuple

from .controls import clamp_length
from .generator import GenerationOptions

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 12,
    "min_length": 4,
    "max_length": 32,
    "include_letters": True,
    "include_numbers": True,
    "include_symbols": True,
    "copy_feedback_ms": 2000,
    "clipboard_clear_seconds": 20,
    "log_level": "WARNING",
}

def _appdata_dir() -> str:
    override = os.getenv("CLASSICPASS_CONFIG_DIR")
    appdata = os.getenv("APPDATA")
    if override:
        d = override
    elif appdata:
        d = os.path.join(appdata, "ClassicPass")
    else:
        d = os.path.join(os.path.expanduser("~"), ".classicpass")
    os.makedirs(d, exist_ok=True)
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("could not read %s, using defaults: %s", p, e)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    if isinstance(data, dict):
        out.update(data)
    else:
        logger.warning("ignoring non-object config in %s", p)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    logger.info("saved settings to %s", p)

def _int_setting(cfg: Dict[str, Any], key: str) -> int:
    try:
        return int(cfg.get(key, DEFAULTS[key]))
    except (TypeError, ValueError):
        logger.warning("invalid %s in config: %r; using %r", key, cfg.get(key), DEFAULTS[key])
        return DEFAULTS[key]

def length_bounds(cfg: Dict[str, Any]) -> Tuple[int, int]:
    """(min_length, max_length) from a config, falling back to the defaults for bad values."""
    return _int_setting(cfg, "min_length"), _int_setting(cfg, "max_length")

def default_options(cfg: Dict[str, Any]) -> GenerationOptions:
    """Initial generator options for a config; never returns an all-disabled set."""
    letters = bool(cfg.get("include_letters", True))
    numbers = bool(cfg.get("include_numbers", True))
    symbols = bool(cfg.get("include_symbols", True))
    if not (letters or numbers or symbols):
        logger.warning("config disables every character class; enabling letters")
        letters = True
    length = clamp_length(_int_setting(cfg, "length"), *length_bounds(cfg))
    return GenerationOptions(length, letters, numbers, symbols)
