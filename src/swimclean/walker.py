"""Depth-bounded discovery of swim projects.

walk() is a generator: it yields a project directory as soon as it is
found, before descending into the project's children, so callers can
interleave cleaning with traversal.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

from swimclean.config.schema import SearchConfig
from swimclean.errors import TraversalError
from swimclean.logging import get_logger
from swimclean.project import BUILD_DIRECTORY, MARKER_FILE
from swimclean.skip import SkipMatcher

log = get_logger("walker")

ErrorCallback = Callable[[TraversalError], None]


def _list_directory(path: Path) -> list[os.DirEntry[str]]:
    with os.scandir(path) as it:
        return sorted(it, key=lambda entry: entry.name)


def _is_file(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_file()
    except OSError as e:
        log.debug("Cannot stat %s: %s", entry.path, e)
        return False


def _is_dir(entry: os.DirEntry[str]) -> bool:
    # Raises OSError when a symlink target cannot be stat'ed
    return entry.is_dir()


def walk(config: SearchConfig, on_error: ErrorCallback | None = None) -> Iterator[Path]:
    """Yield every directory under config.root that contains the marker file.

    Rules:
    - The root is depth 0 and is always visited, even if a skip pattern
      would match it
    - Subdirectories matching a skip pattern are pruned with their subtree
    - Directories deeper than config.max_depth are pruned silently
    - Symlinks are followed unless they lead back to a directory on the
      current descent path; each canonical project is yielded once
    - A project's build directory is never descended into
    - A directory that cannot be listed is reported and skipped

    Args:
        config: Merged search settings.
        on_error: Called with a TraversalError for each unreadable
            directory, including symlinks whose target cannot be stat'ed.
            Every such error is also logged as a warning.

    Yields:
        Candidate project directories, as reached from the root.
    """
    matcher = SkipMatcher(config.skip, root=config.root)
    yielded: set[str] = set()

    def report(path: Path, e: OSError) -> None:
        error = TraversalError(path, e.strerror or str(e))
        log.warning("Cannot read directory %s", error)
        if on_error is not None:
            on_error(error)

    # (path, depth, canonical path, canonical paths of its ancestors)
    stack: list[tuple[Path, int, str, frozenset[str]]] = [
        (config.root, 0, os.path.realpath(config.root), frozenset())
    ]

    while stack:
        path, depth, real, ancestors = stack.pop()

        if real in ancestors:
            log.debug("Not following %s: cycles back to %s", path, real)
            continue

        try:
            entries = _list_directory(path)
        except OSError as e:
            report(path, e)
            continue

        is_project = any(entry.name == MARKER_FILE and _is_file(entry) for entry in entries)
        if is_project and real not in yielded:
            yielded.add(real)
            log.debug("Found project %s", path)
            yield path

        if depth >= config.max_depth:
            continue

        lineage = ancestors | {real}
        children = []
        for entry in entries:
            try:
                if not _is_dir(entry):
                    continue
            except OSError as e:
                report(Path(entry.path), e)
                continue
            if is_project and entry.name == BUILD_DIRECTORY:
                continue

            child = Path(entry.path)
            if entry.is_symlink():
                child_real = os.path.realpath(child)
            else:
                child_real = os.path.join(real, entry.name)

            if matcher.matches(child, Path(child_real)):
                log.debug("Skipping %s", child)
                continue
            children.append((child, depth + 1, child_real, lineage))

        # Reversed so siblings pop in name order
        stack.extend(reversed(children))
