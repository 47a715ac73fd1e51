"""Configuration file loading and search config construction.

Handles:
- YAML file parsing
- Environment variable overrides
- Conversion from dict to typed FileConfig dataclass
- Merging with command-line options into a SearchConfig
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from swimclean.config.merge import first_set, merge_options
from swimclean.config.paths import get_user_config_path
from swimclean.config.schema import (
    DEFAULT_MAX_DEPTH,
    FileConfig,
    LoggingConfig,
    SearchConfig,
)
from swimclean.errors import ConfigError

# Module logger (may not be configured yet at import time)
_log = logging.getLogger("swimclean.config")


def load_yaml_file(path: Path, required: bool = False) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found or invalid.

    Args:
        path: Path to the YAML file.
        required: Raise ConfigError instead of warning when the file
            exists but cannot be read or parsed.

    Returns:
        Parsed YAML as dict, or empty dict on error.
    """
    if not path.is_file():
        if required:
            _log.warning("Config file %s does not exist or is not a file", path)
        else:
            _log.debug("No config file at %s", path)
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        if required:
            raise ConfigError(f"Failed to parse config file {path}: {e}") from e
        _log.warning("Invalid YAML in %s: %s", path, e)
        return {}
    except OSError as e:
        if required:
            raise ConfigError(f"Failed to load config file {path}: {e}") from e
        _log.warning("Error reading %s: %s", path, e)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        if required:
            raise ConfigError(f"Config file {path} must contain a mapping")
        _log.warning("Ignoring %s: top level is not a mapping", path)
        return {}
    return data


def env_overrides() -> dict[str, Any]:
    """Build config dict from environment variables.

    Returns:
        Config dict with values from environment.
    """
    overrides: dict[str, Any] = {}

    log_path = os.environ.get("SWIM_CLEAN_LOG")
    if log_path:
        overrides["logging"] = {"file": log_path}

    return overrides


def _invalid(message: str, required: bool) -> None:
    if required:
        raise ConfigError(f"Invalid config file: {message}")
    _log.warning("Ignoring invalid config value: %s", message)


def dict_to_config(data: dict[str, Any], required: bool = False) -> FileConfig:
    """Convert a parsed config dict to a typed FileConfig.

    Wrongly typed logging values are dropped with a warning, or raise
    ConfigError when required is set (an explicit --config file).

    Args:
        data: Configuration dictionary.
        required: Treat invalid values as fatal.

    Returns:
        Typed FileConfig object.
    """
    skip_data = data.get("skip") or []
    if isinstance(skip_data, str):
        skip_data = [skip_data]
    skip = [str(s) for s in skip_data if isinstance(s, (str, os.PathLike))]

    # Both spellings are accepted; the CLI flag is --max-depth
    max_depth = data.get("max_depth", data.get("max-depth"))

    log_data = data.get("logging")
    if log_data is None:
        log_data = {}
    elif not isinstance(log_data, dict):
        _invalid(f"'logging' must be a mapping, got {log_data!r}", required)
        log_data = {}

    log_fields: dict[str, str | None] = {}
    for key in ("level", "file"):
        value = log_data.get(key)
        if value is not None and not isinstance(value, str):
            _invalid(f"'logging.{key}' must be a string, got {value!r}", required)
            value = None
        log_fields[key] = value
    logging_config = LoggingConfig(**log_fields)

    known_keys = {"skip", "max_depth", "max-depth", "logging"}
    extra = {k: v for k, v in data.items() if k not in known_keys}

    return FileConfig(
        skip=skip,
        max_depth=max_depth,
        logging=logging_config,
        extra=extra,
    )


def load_config(config_path: Path | None = None, ignore_file: bool = False) -> FileConfig:
    """Load the config file and apply environment overrides.

    Args:
        config_path: Explicit config file. When None, the platform default
            location is used.
        ignore_file: Skip reading any file; only environment overrides apply.

    Returns:
        The loaded FileConfig (empty when no file was found).

    Raises:
        ConfigError: If an explicit config file exists but is invalid.
    """
    data: dict[str, Any] = {}

    if not ignore_file:
        if config_path is not None:
            data = load_yaml_file(expand_user(config_path), required=True)
        else:
            default_path = get_user_config_path()
            if default_path is None:
                _log.warning("No config directory found on system")
            else:
                data = load_yaml_file(default_path)
        if data:
            _log.debug("Loaded config from %s", config_path or default_path)

    config = dict_to_config(data, required=config_path is not None and not ignore_file)

    env_config = env_overrides()
    if env_config:
        config.logging.file = env_config["logging"]["file"]

    return config


def expand_user(path: Path | str) -> Path:
    """Expand a leading ``~`` in a path."""
    return Path(os.path.expanduser(str(path)))


def canonicalize(path: Path | str) -> Path:
    """Expand ``~`` and resolve symlinks, requiring the path to exist.

    Raises:
        OSError: If the path does not exist.
    """
    return expand_user(path).resolve(strict=True)


def build_search_config(
    root: Path | str,
    skip: Iterable[str] = (),
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> SearchConfig:
    """Validate inputs and construct the immutable SearchConfig.

    Args:
        root: Search root; canonicalized here.
        skip: Skip patterns.
        max_depth: Maximum depth below root, must be >= 0.

    Raises:
        ConfigError: If the root is missing or not a directory, or the depth
            is not a non-negative integer.
    """
    try:
        search_root = canonicalize(root)
    except OSError as e:
        raise ConfigError(f"Failed to canonicalize search root {root}: {e}") from e
    if not search_root.is_dir():
        raise ConfigError(f"Search root {root} is not a directory")

    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise ConfigError(f"max_depth must be an integer, got {max_depth!r}")
    if max_depth < 0:
        raise ConfigError(f"max_depth must be >= 0, got {max_depth}")

    return SearchConfig(root=search_root, skip=tuple(skip), max_depth=max_depth)


def merge_search_config(
    file_config: FileConfig,
    root: Path | str,
    skip: Iterable[str] | None = None,
    max_depth: int | None = None,
) -> SearchConfig:
    """Merge command-line options over a FileConfig into a SearchConfig.

    Skip lists are unioned. max_depth uses the command-line value if given,
    else the file value, else DEFAULT_MAX_DEPTH.
    """
    merged = merge_options(
        {"skip": file_config.skip, "max_depth": file_config.max_depth},
        {"skip": list(skip) if skip else [], "max_depth": max_depth},
    )
    return build_search_config(
        root,
        skip=merged.get("skip", []),
        max_depth=first_set(merged.get("max_depth"), default=DEFAULT_MAX_DEPTH),
    )
