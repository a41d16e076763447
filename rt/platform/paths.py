"""Platform-aware path utilities.

Locates the user-level config directory (config.toml) and data directory
(one JSON file per tracked year).
"""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from pathlib import Path

__all__ = [
    "APP_NAME",
    "HOME_ENV_VAR",
    "data_dir_override",
    "home",
    "user_config_dir",
    "user_data_dir",
]

# Application name used for directory naming
APP_NAME = "release-tracker"

# Points the data directory somewhere else (CI, tests, shared drives)
HOME_ENV_VAR = "RT_HOME"


def _is_windows() -> bool:
    return sys.platform == "win32"


@lru_cache(maxsize=1)
def home() -> Path:
    """Get user's home directory.

    Uses USERPROFILE on Windows, HOME on Unix, then Path.home().
    """
    if _is_windows():
        userprofile = os.environ.get("USERPROFILE")
        if userprofile:
            return Path(userprofile)
    else:
        home_env = os.environ.get("HOME")
        if home_env:
            return Path(home_env)

    return Path.home()


@lru_cache(maxsize=1)
def user_config_dir() -> Path:
    """Get the user-level configuration directory.

    Location: ~/.config/release-tracker/ (Linux/macOS) or
    ~/AppData/Roaming/release-tracker/ (Windows).
    """
    if _is_windows():
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data) / APP_NAME
        return home() / "AppData" / "Roaming" / APP_NAME

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME
    return home() / ".config" / APP_NAME


@lru_cache(maxsize=1)
def user_data_dir() -> Path:
    """Get the user-level data directory holding persisted releases.

    Location: ~/.local/share/release-tracker/ (Linux/macOS) or
    ~/AppData/Local/release-tracker/ (Windows).
    """
    if _is_windows():
        local_app_data = os.environ.get("LOCALAPPDATA")
        if local_app_data:
            return Path(local_app_data) / APP_NAME
        return home() / "AppData" / "Local" / APP_NAME

    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / APP_NAME
    return home() / ".local" / "share" / APP_NAME


def data_dir_override() -> Path | None:
    """Return the data directory from RT_HOME, if set."""
    value = os.environ.get(HOME_ENV_VAR, "").strip()
    if not value:
        return None
    return Path(value).expanduser()


def clear_caches() -> None:
    """Clear all cached paths.

    Useful for testing when environment variables change.
    """
    home.cache_clear()
    user_config_dir.cache_clear()
    user_data_dir.cache_clear()
