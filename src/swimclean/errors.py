"""Error taxonomy for swim-clean-all.

Only ConfigError aborts a run. TraversalError and CleanError are recovered
locally and end up in the final report.
"""

from __future__ import annotations

from pathlib import Path


class SwimCleanError(Exception):
    """Base class for all swim-clean-all errors."""

    pass


class ConfigError(SwimCleanError):
    """Invalid search root or configuration.

    Raised before traversal starts when:
    - The search root does not exist or is not a directory
    - The maximum depth is negative
    - An explicitly requested config file cannot be read or parsed
    """

    pass


class TraversalError(SwimCleanError):
    """A single directory could not be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class CleanError(SwimCleanError):
    """A build directory could not be removed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
