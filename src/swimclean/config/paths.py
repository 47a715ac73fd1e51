"""Platform-aware configuration path resolution.

Handles config file locations for:
- Any platform: $XDG_CONFIG_HOME/swim-clean-all.yaml when set
- Windows: %APPDATA%/swim-clean-all.yaml
- macOS: ~/Library/Application Support/swim-clean-all.yaml
- Other Unix: ~/.config/swim-clean-all.yaml
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

CONFIG_FILENAME = "swim-clean-all.yaml"


def get_config_dir() -> Path | None:
    """Get the per-user configuration directory.

    Returns:
        The directory to look in, or None if it cannot be determined.
        The directory may not exist.
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)

    if sys.platform == "win32":
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data)
        return None

    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    return home / ".config"


def get_user_config_path() -> Path | None:
    """Get the default config file path.

    Returns:
        Path to the config file, or None if no config directory exists.
        The file itself may not exist.
    """
    config_dir = get_config_dir()
    if config_dir is None or not config_dir.is_dir():
        return None
    return config_dir / CONFIG_FILENAME
