from __future__ import annotations

"""
Configuration Domain Management.

Holds the default audit settings and persists the last used session as
JSON inside the user data directory.
"""

import json
import logging
import os
from typing import Any, Dict

from fileaudit.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_DAYS,
    default_exclude_patterns,
)
from fileaudit.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"


def get_config_file() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of the audit pipeline.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": os.getcwd(),
        "output_path": "",

        # Audit Window
        "days": DEFAULT_DAYS,
        "exclude_patterns": default_exclude_patterns(),

        # Presentation
        "client_name": "",
        "company_name": "",
        "tree_view": False,
        "dark_mode": False,
        "open_report": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Retrieve the last saved session merged over the defaults.

    A missing or corrupted file yields the defaults.

    Returns:
        Dict[str, Any]: The active configuration.
    """
    defaults = get_default_config()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict) or not isinstance(data.get("last_session"), dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    known = {k: v for k, v in data["last_session"].items() if k in defaults}
    defaults.update(known)
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the provided config as the 'last_session'.

    Args:
        config: The configuration dictionary to save.
    """
    config_file = get_config_file()
    state = {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": {k: v for k, v in config.items() if k in get_default_config()},
    }
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
