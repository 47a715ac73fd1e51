"""Configuration schema dataclasses for swim-clean-all.

FileConfig mirrors the YAML config file; every field is optional so that a
partial file merges cleanly with command-line options. SearchConfig is the
immutable, already-merged input of the traversal engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_MAX_DEPTH = 100


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str | None = None  # DEBUG, INFO, WARNING, ERROR
    file: str | None = None  # Log file path
    verbose: bool = False  # Set by --verbose, never read from file


@dataclass
class FileConfig:
    """Contents of a swim-clean-all.yaml file.

    Example swim-clean-all.yaml:
        skip:
          - ~/vendor
          - node_modules
        max_depth: 20
        logging:
          level: info
    """

    skip: list[str] = field(default_factory=list)
    max_depth: int | None = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Unknown top-level keys, kept for forward compatibility
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchConfig:
    """Merged traversal settings, read-only for the duration of a run.

    Attributes:
        root: Canonical search root. Depth 0.
        skip: Skip patterns (see swimclean.skip for matching rules).
        max_depth: Deepest directory level below root that is visited.
    """

    root: Path
    skip: tuple[str, ...] = ()
    max_depth: int = DEFAULT_MAX_DEPTH
