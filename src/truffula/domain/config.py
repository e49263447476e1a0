from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences using JSON. The stored
'last_session' block is merged over the built-in defaults so that new keys
always exist, and corrupted files degrade to defaults instead of failing.
"""

import json
import logging
import os
from typing import Any, Dict

from truffula.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_COLOR_NAMES = ["WHITE", "PURPLE", "YELLOW"]


def get_config_file() -> str:
    """Absolute path of the persistent configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "input_path": os.getcwd(),
        "show_hidden": False,
        "use_color": True,
        "color_sequence": list(DEFAULT_COLOR_NAMES),
        "output_file": "",
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default state structure stored in config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    default_state = get_default_app_state()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    session = data.get("last_session")
    if isinstance(session, dict):
        default_state["last_session"].update(session)
    return default_state


def save_app_state(state: Dict[str, Any]) -> bool:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    config_file = get_config_file()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Retrieve the active configuration (last session merged over defaults).
    """
    defaults = get_default_config()
    defaults.update(load_app_state().get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> bool:
    """
    Save the provided config as the 'last_session'.
    """
    state = load_app_state()
    state["last_session"] = dict(config)
    return save_app_state(state)
