# randpass/config.py
"""
Settings for randpass.
Read from JSON at %APPDATA%/randpass/config.json (Windows) or ~/.randpass/config.json (fallback).
RANDPASS_CONFIG points at a different file.
"""

import os
import json
import math
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "default_length": 12,
    "copied_reset_seconds": 3,
}

# bool is an int subclass, so it is rejected explicitly
_CHECKS = {
    "default_length": lambda v: isinstance(v, int) and not isinstance(v, bool) and v >= 1,
    "copied_reset_seconds": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v) and v >= 0,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "randpass")
    return os.path.join(os.path.expanduser("~"), ".randpass")

def config_path() -> str:
    override = os.getenv("RANDPASS_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read config %s, using defaults: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object, using defaults", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    for key, valid in _CHECKS.items():
        if not valid(out[key]):
            logger.warning("Config %s: bad value for %s (%r), using %r", p, key, out[key], DEFAULTS[key])
            out[key] = DEFAULTS[key]
    return out
