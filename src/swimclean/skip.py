"""Skip-pattern matching for directory traversal.

Pattern forms:
- Absolute (``/srv/mirror``, ``~/vendor``): matches the directory at exactly
  that location. Pruning the directory excludes its whole subtree.
- Explicitly relative (``.``, ``./out``, ``../x``): resolved against the
  working directory, then treated as absolute.
- Anything else (``node_modules``, ``vendor/*``, ``third_party/ip``): shell
  globs matched component-wise against the trailing components of the
  directory path, taken relative to the search root when one is given.
  A single component is a base-name match.

Matching uses fnmatch, so case sensitivity follows the host (os.path.normcase).
"""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterable
from pathlib import Path, PurePath


def _is_explicitly_relative(pattern: str) -> bool:
    # PurePath drops a leading "." component, so check the raw string
    prefixes = tuple(p + sep for p in (".", "..") for sep in {"/", os.sep})
    return pattern in (".", "..") or pattern.startswith(prefixes)


def _normalize_absolute(pattern: str, cwd: Path) -> str:
    path = Path(os.path.expanduser(pattern))
    if not path.is_absolute():
        path = cwd / path
    try:
        path = path.resolve(strict=True)
    except OSError:
        path = Path(os.path.normpath(path))
    return os.path.normcase(str(path))


class SkipMatcher:
    """Decides whether a directory should be pruned from traversal."""

    def __init__(
        self,
        patterns: Iterable[str],
        cwd: Path | None = None,
        root: Path | None = None,
    ) -> None:
        cwd = cwd or Path.cwd()
        self._root = root
        self._absolute: set[str] = set()
        self._suffixes: list[tuple[str, ...]] = []

        for pattern in patterns:
            pattern = str(pattern).strip()
            if not pattern:
                continue
            expanded = os.path.expanduser(pattern)
            if os.path.isabs(expanded) or _is_explicitly_relative(pattern):
                self._absolute.add(_normalize_absolute(expanded, cwd))
            else:
                parts = PurePath(pattern).parts
                if parts:
                    self._suffixes.append(parts)

    def __bool__(self) -> bool:
        return bool(self._absolute or self._suffixes)

    def matches(self, path: Path, real_path: Path | None = None) -> bool:
        """Check a directory against all patterns.

        Args:
            path: The directory as reached by traversal.
            real_path: Its canonical location, when known. Absolute patterns
                match either form.
        """
        if self._absolute:
            candidates = {os.path.normcase(str(path))}
            if real_path is not None:
                candidates.add(os.path.normcase(str(real_path)))
            if candidates & self._absolute:
                return True

        parts = path.parts
        if self._root is not None:
            # Components above the search root never take part in a match
            try:
                parts = path.relative_to(self._root).parts
            except ValueError:
                pass
        for suffix in self._suffixes:
            if len(suffix) > len(parts):
                continue
            tail = parts[len(parts) - len(suffix):]
            if all(fnmatch.fnmatch(name, pat) for name, pat in zip(tail, suffix)):
                return True
        return False
