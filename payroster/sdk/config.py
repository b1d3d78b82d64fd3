"""Configuration management for Pay Roster.

Configuration lives in the config directory:

1. settings.json - Machine-specific settings
   - roster: path to a roster YAML file (optional)

2. roster.yaml - Default roster file, used when settings.json has no
   'roster' key

Config directory resolution:
1. PAY_ROSTER_CONFIG_PATH environment variable (if set)
2. ~/.config/pay-roster/ (XDG_CONFIG_HOME fallback)

When no roster is configured the CLI falls back to the bundled sample
roster.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional


APP_NAME = "pay-roster"
SETTINGS_FILENAME = "settings.json"
ROSTER_FILENAME = "roster.yaml"


class RosterNotFoundError(Exception):
    """Raised when a required or configured roster file is missing."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. PAY_ROSTER_CONFIG_PATH environment variable
    2. ~/.config/pay-roster/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    # 1. Check environment variable
    env_path = os.environ.get("PAY_ROSTER_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    # 2. Fall back to XDG config path
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json.

    Returns:
        Path to settings.json (may not exist yet)
    """
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def get_roster_path(require_exists: bool = False) -> Optional[Path]:
    """Get the path to the configured roster file.

    Resolution order:
    1. settings.json "roster" key (if set)
    2. roster.yaml in config directory

    Args:
        require_exists: If True, raises RosterNotFoundError when nothing
            is configured

    Returns:
        Path to the roster file, or None if none is configured

    Raises:
        RosterNotFoundError: If the configured path is missing, or if
            require_exists=True and no roster is found
    """
    config_dir = get_config_dir()

    # 1. Check settings.json for custom roster path
    custom_roster = get_setting("roster")
    if custom_roster:
        roster_path = Path(custom_roster).expanduser()
        if not roster_path.exists():
            raise RosterNotFoundError(
                f"Roster not found at configured path: {roster_path}\n\n"
                f"Update with: pay-roster settings roster /path/to/roster.yaml"
            )
        return roster_path

    # 2. Check for roster.yaml in config directory
    roster_path = config_dir / ROSTER_FILENAME
    if roster_path.exists():
        return roster_path

    if require_exists:
        raise RosterNotFoundError(
            f"No roster found. Checked:\n"
            f"  1. settings.json 'roster' key (not set)\n"
            f"  2. {roster_path} (not found)\n\n"
            f"Set a roster with: pay-roster settings roster /path/to/roster.yaml"
        )

    return None
