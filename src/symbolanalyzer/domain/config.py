from __future__ import annotations

"""
Configuration Domain Management.

Handles the persistent application state (last session and global
settings) stored as JSON in the user data directory, with default fallback
when the file is missing or corrupted.
"""

import json
import logging
import os
from typing import Any, Dict

from symbolanalyzer.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_MIN_SIZE
from symbolanalyzer.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_config_file() -> str:
    """Absolute location of the persisted application state."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default session configuration driving an analysis run.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "input_path": "",

        # Filter state
        "min_size": DEFAULT_MIN_SIZE,
        "categories": [],
        "search_term": "",

        # Report
        "max_depth": 0,
        "show_stats": True,

        # Storage
        "remember_recent": True,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the full structure stored in config.json.

    Returns:
        Dict[str, Any]: Version stamp, global settings and last session.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "app_settings": {
            "locale": "en",
            "log_level": "INFO",
        },
        "last_session": get_default_config(),
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_app_state() -> Dict[str, Any]:
    """
    Load the application state from disk.

    Returns:
        Dict[str, Any]: The stored state merged over defaults, or the
                        defaults alone when the file is absent or invalid.
    """
    state = get_default_app_state()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    for section in ("app_settings", "last_session"):
        stored = data.get(section)
        if isinstance(stored, dict):
            state[section].update(stored)

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist the application state to disk.

    Args:
        state: The state dictionary to save.
    """
    config_file = get_config_file()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")

# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------

def load_config() -> Dict[str, Any]:
    """Retrieve the last session configuration merged over defaults."""
    config = get_default_config()
    config.update(load_app_state().get("last_session", {}))
    return config


def save_config(config: Dict[str, Any]) -> None:
    """Store the provided configuration as the last session."""
    state = load_app_state()
    state["last_session"] = dict(config)
    save_app_state(state)
