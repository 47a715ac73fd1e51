"""Configuration management for swim-clean-all.

Provides YAML-based configuration with:
- A per-user config file (XDG / %APPDATA% / Application Support)
- Environment variable overrides (SWIM_CLEAN_LOG)
- Merging with command-line options into an immutable SearchConfig

Example usage:
    from swimclean.config import load_config, merge_search_config

    file_config = load_config()
    search = merge_search_config(file_config, root=".", skip=["vendor"])
"""

from swimclean.config.loader import (
    build_search_config,
    load_config,
    merge_search_config,
)
from swimclean.config.paths import (
    CONFIG_FILENAME,
    get_config_dir,
    get_user_config_path,
)
from swimclean.config.schema import (
    DEFAULT_MAX_DEPTH,
    FileConfig,
    LoggingConfig,
    SearchConfig,
)

__all__ = [
    # Main API
    "SearchConfig",
    "load_config",
    "build_search_config",
    "merge_search_config",
    # Schema types
    "FileConfig",
    "LoggingConfig",
    "DEFAULT_MAX_DEPTH",
    # Path utilities
    "CONFIG_FILENAME",
    "get_config_dir",
    "get_user_config_path",
]
