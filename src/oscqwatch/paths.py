# src/oscqwatch/paths.py
"""Per-user path resolution for the helper service files."""

import os
import sys
from pathlib import Path

import platformdirs

APP_NAME = "Giggletech"
CONFIG_FILENAME = "config_oscq.yml"
EXECUTABLE_STEM = "giggletech_oscq"


def is_windows() -> bool:
    """Check if the current operating system is Windows."""
    return sys.platform == "win32"


def get_app_data_dir() -> Path:
    """
    Get the per-user local data directory shared with the helper service.

    On Windows this is %LOCALAPPDATA%\\Giggletech.
    """
    return Path(platformdirs.user_data_dir(APP_NAME, appauthor=False, roaming=False))


def get_default_config_path() -> Path:
    """Get the default path of the helper's YAML configuration file."""
    return get_app_data_dir() / CONFIG_FILENAME


def get_default_executable_path() -> Path:
    """Get the default path of the helper service executable."""
    name = f"{EXECUTABLE_STEM}.exe" if is_windows() else EXECUTABLE_STEM
    return get_app_data_dir() / name


def expand_path(path: str | Path) -> Path:
    """Expand environment variables and user home directory in a path."""
    return Path(os.path.expandvars(os.path.expanduser(str(path))))
