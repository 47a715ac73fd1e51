"""Removal of a project's build directory."""

from __future__ import annotations

import errno
import os
import shutil
import stat
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from swimclean.errors import CleanError
from swimclean.logging import get_logger
from swimclean.project import Project

log = get_logger("cleaner")

# Asked before each removal with the project and its build size in bytes
ConfirmCallback = Callable[[Project, int | None], bool]


class OutcomeKind(Enum):
    """What happened to one project.

    - REMOVED: The build directory was deleted
    - NOT_PRESENT: No build directory (or the project vanished)
    - FAILED: The build directory could not be deleted
    - SKIPPED: Left in place by dry run or user choice
    """

    REMOVED = "removed"
    NOT_PRESENT = "not present"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class CleanOutcome:
    kind: OutcomeKind
    bytes_reclaimed: int | None = None
    reason: str | None = None

    @classmethod
    def removed(cls, bytes_reclaimed: int | None = None) -> CleanOutcome:
        return cls(OutcomeKind.REMOVED, bytes_reclaimed=bytes_reclaimed)

    @classmethod
    def not_present(cls) -> CleanOutcome:
        return cls(OutcomeKind.NOT_PRESENT)

    @classmethod
    def failed(cls, reason: str) -> CleanOutcome:
        return cls(OutcomeKind.FAILED, reason=reason)

    @classmethod
    def skipped(cls, reason: str, bytes_reclaimed: int | None = None) -> CleanOutcome:
        return cls(OutcomeKind.SKIPPED, bytes_reclaimed=bytes_reclaimed, reason=reason)


@dataclass(frozen=True)
class CleanResult:
    """Outcome of cleaning the project at path."""

    path: Path
    outcome: CleanOutcome

    @property
    def kind(self) -> OutcomeKind:
        return self.outcome.kind


def directory_size(path: Path) -> int | None:
    """Total size in bytes of the regular files below path.

    Symlinks are not followed. Returns None if the tree cannot be read.
    """
    total = 0
    try:
        for dirpath, _dirnames, filenames in os.walk(path, onerror=_raise):
            for name in filenames:
                st = os.lstat(os.path.join(dirpath, name))
                if stat.S_ISREG(st.st_mode):
                    total += st.st_size
    except OSError as e:
        log.debug("Cannot size %s: %s", path, e)
        return None
    return total


def _raise(error: OSError) -> None:
    raise error


def remove_build_output(project: Project) -> None:
    """Delete the project's build directory and everything in it.

    Raises:
        FileNotFoundError: If the build directory vanished before removal.
        CleanError: If removal failed for any other reason.
    """
    build = project.build_output
    if not os.path.lexists(build):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(build))
    if build.is_symlink() or not build.is_dir():
        raise CleanError(build, "not a directory")
    try:
        shutil.rmtree(build)
    except FileNotFoundError:
        if build.exists():
            raise CleanError(build, "entry vanished during removal") from None
        raise
    except OSError as e:
        raise CleanError(build, e.strerror or str(e)) from e


def clean(
    candidate: Path,
    *,
    dry_run: bool = False,
    confirm: ConfirmCallback | None = None,
) -> CleanResult:
    """Remove the build directory of the project at candidate.

    Never raises for per-project problems: races become NOT_PRESENT and
    removal errors become FAILED.

    Args:
        candidate: Directory yielded by the walker.
        dry_run: Report what would be removed without deleting anything.
        confirm: Asked before removal; a false answer skips the project.

    Returns:
        The CleanResult for candidate.
    """
    project = Project(candidate)

    if not project.marker.is_file():
        log.debug("Marker vanished from %s", candidate)
        return CleanResult(candidate, CleanOutcome.not_present())

    build = project.build_output
    if not os.path.lexists(build):
        return CleanResult(candidate, CleanOutcome.not_present())

    size = directory_size(build) if build.is_dir() and not build.is_symlink() else None

    if dry_run:
        log.info("Would remove %s", build)
        return CleanResult(candidate, CleanOutcome.skipped("dry run", size))

    if confirm is not None and not confirm(project, size):
        return CleanResult(candidate, CleanOutcome.skipped("declined", size))

    try:
        remove_build_output(project)
    except FileNotFoundError:
        log.debug("Build directory of %s vanished before removal", candidate)
        return CleanResult(candidate, CleanOutcome.not_present())
    except CleanError as e:
        log.warning("Failed to remove build directory for project at %s: %s", candidate, e.reason)
        return CleanResult(candidate, CleanOutcome.failed(e.reason))

    log.info("Removed %s", build)
    return CleanResult(candidate, CleanOutcome.removed(size))
