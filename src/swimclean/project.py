"""Conventions of the swim build tool."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# A directory holding this file is a swim project root
MARKER_FILE = "swim.toml"

# swim forces this (for now)
BUILD_DIRECTORY = "build"


@dataclass(frozen=True)
class Project:
    """A candidate directory verified to contain the marker file."""

    root: Path

    @property
    def marker(self) -> Path:
        return self.root / MARKER_FILE

    @property
    def build_output(self) -> Path:
        return self.root / BUILD_DIRECTORY
