"""
GaussSolver — JSON-backed settings for the interactive solver.

Settings are read from ``<project>/data/gausssolver.json`` unless the
``GAUSSSOLVER_SETTINGS`` environment variable or an explicit path points
elsewhere.  The file is optional and is never written by the solver.
"""

import json
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "gausssolver.json")
_ENV_VAR = "GAUSSSOLVER_SETTINGS"

# ── Default settings ────────────────────────────────────────────────────
DEFAULT_SETTINGS = {
    "max_equations": 10,
    "max_variables": 10,
    "random_min": -100,
    "random_max": 100,
    "max_magnitude": 1e12,   # largest |value| accepted at the prompt
    "seed": None,            # None → fresh entropy for random matrices
    "log_level": "WARNING",
    "log_file": None,
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _settings_path(path: Optional[str]) -> str:
    if path:
        return path
    return os.environ.get(_ENV_VAR) or _DATA_FILE


def _load_file(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", path)
        return {}
    return data


def validate_settings(settings: dict) -> dict:
    """Raise ValueError if *settings* cannot drive a solve session."""
    for key in ("max_equations", "max_variables"):
        value = settings[key]
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ValueError(f"'{key}' must be a positive integer, got {value!r}.")
    for key in ("random_min", "random_max"):
        if not isinstance(settings[key], int) or isinstance(settings[key], bool):
            raise ValueError(f"'{key}' must be an integer, got {settings[key]!r}.")
    if settings["random_min"] > settings["random_max"]:
        raise ValueError("'random_min' must not be greater than 'random_max'.")
    if settings["random_min"] == 0 and settings["random_max"] == 0:
        raise ValueError("The random range [0, 0] leaves no nonzero coefficients.")
    magnitude = settings["max_magnitude"]
    if isinstance(magnitude, bool) or not isinstance(magnitude, (int, float)) or magnitude <= 0:
        raise ValueError(f"'max_magnitude' must be a positive number, got {magnitude!r}.")
    seed = settings["seed"]
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
        raise ValueError(f"'seed' must be a non-negative integer or null, got {seed!r}.")
    if str(settings["log_level"]).upper() not in _LOG_LEVELS:
        raise ValueError(f"Unknown 'log_level' {settings['log_level']!r}.")
    return settings


def get_settings(path: Optional[str] = None) -> dict:
    """Return the defaults merged with the settings file, if any."""
    source = _settings_path(path)
    stored = _load_file(source)
    merged = dict(DEFAULT_SETTINGS)
    for key, value in stored.items():
        if key in DEFAULT_SETTINGS:
            merged[key] = value
        else:
            logger.warning("Ignoring unknown setting %r in %s", key, source)
    return validate_settings(merged)
