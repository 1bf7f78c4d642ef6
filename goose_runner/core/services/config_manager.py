"""
config_manager.py
-----------------
JSON configuration loading merged over defaults.

Features:
- Recursively merges loaded values over defaults
- Ignores '_notes' keys for human-readable configs
- Falls back to defaults on missing or malformed files unless strict
"""

import os
import json
from goose_runner.core.debug.debug_logger import DebugLogger


# ===========================================================
# Public API
# ===========================================================

def load_config(path, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        path: File path
        default_dict: Default fallback config
        strict: If True, raise on missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    if not os.path.exists(path) and not strict:
        DebugLogger.system(f"{os.path.basename(path)} not found - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    try:
        data = _load_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, ValueError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not loadable: {path}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def save_config(path, data) -> bool:
    """
    Write a dict as JSON. Returns False (and logs) on failure instead of raising.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        DebugLogger.system(f"Saved {os.path.basename(path)}", category="loading")
        return True
    except (OSError, TypeError) as e:
        DebugLogger.warn(f"Failed to save {path}: {e}", category="loading")
        return False


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys. Never mutates inputs."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
