"""Root pytest configuration for all tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from swimclean.config.schema import SearchConfig
from swimclean.logging import reset_logging
from swimclean.project import BUILD_DIRECTORY, MARKER_FILE


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Keep the user's real config file and log settings out of tests."""
    config_home = tmp_path_factory.mktemp("config-home")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("SWIM_CLEAN_LOG", raising=False)
    yield config_home
    reset_logging()


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Canonical search root."""
    search_root = tmp_path / "root"
    search_root.mkdir()
    return search_root.resolve()


@pytest.fixture
def make_project(root: Path) -> Callable[..., Path]:
    """Create a swim project below root.

    Args:
        relative: Project directory relative to root ("" for root itself).
        build_files: Number of files to put in build/, or None for no build/.
    """

    def _make(relative: str, build_files: int | None = 0) -> Path:
        project = root / relative if relative else root
        project.mkdir(parents=True, exist_ok=True)
        (project / MARKER_FILE).write_text('name = "demo"\n')
        if build_files is not None:
            build = project / BUILD_DIRECTORY
            build.mkdir()
            for i in range(build_files):
                (build / f"artifact{i}.v").write_text("x" * (i + 1))
        return project

    return _make


@pytest.fixture
def search_config(root: Path) -> Callable[..., SearchConfig]:
    """Build a SearchConfig rooted at the test tree."""

    def _config(skip: tuple[str, ...] = (), max_depth: int = 100) -> SearchConfig:
        return SearchConfig(root=root, skip=tuple(skip), max_depth=max_depth)

    return _config
