"""Tests for skip-pattern matching."""

from __future__ import annotations

from pathlib import Path

import pytest

from swimclean.skip import SkipMatcher


class TestNamePatterns:
    """Single-component patterns match base names."""

    def test_base_name_match(self) -> None:
        matcher = SkipMatcher(["skip"])
        assert matcher.matches(Path("/work/skip"))
        assert matcher.matches(Path("/work/deep/down/skip"))

    def test_partial_name_does_not_match(self) -> None:
        matcher = SkipMatcher(["skip"])
        assert not matcher.matches(Path("/work/skipped"))
        assert not matcher.matches(Path("/work/ski"))

    def test_ancestor_name_does_not_match_descendant(self) -> None:
        # Subtree exclusion is the walker's job (it never descends)
        matcher = SkipMatcher(["skip"])
        assert not matcher.matches(Path("/work/skip/child"))

    def test_glob(self) -> None:
        matcher = SkipMatcher(["node_*", ".git"])
        assert matcher.matches(Path("/w/node_modules"))
        assert matcher.matches(Path("/w/.git"))
        assert not matcher.matches(Path("/w/nodes"))

    def test_trailing_slash_ignored(self) -> None:
        assert SkipMatcher(["vendor/"]).matches(Path("/w/vendor"))


class TestSuffixPatterns:
    """Multi-component relative patterns match path suffixes."""

    def test_suffix_match(self) -> None:
        matcher = SkipMatcher(["third_party/ip"])
        assert matcher.matches(Path("/w/a/third_party/ip"))
        assert not matcher.matches(Path("/w/a/ip"))
        assert not matcher.matches(Path("/w/third_party"))

    def test_suffix_glob(self) -> None:
        matcher = SkipMatcher(["vendor/*"])
        assert matcher.matches(Path("/w/vendor/lib"))
        assert not matcher.matches(Path("/w/vendor"))

    def test_suffix_longer_than_path(self) -> None:
        assert not SkipMatcher(["a/b/c/d"]).matches(Path("/c/d"))

    def test_relative_to_root(self) -> None:
        matcher = SkipMatcher(["work/*"], root=Path("/x/work"))
        assert not matcher.matches(Path("/x/work/child"))
        assert matcher.matches(Path("/x/work/work/child"))

    def test_root_does_not_limit_base_names(self) -> None:
        matcher = SkipMatcher(["skip"], root=Path("/x/skip"))
        assert not matcher.matches(Path("/x/skip"))
        assert matcher.matches(Path("/x/skip/a/skip"))

    def test_path_outside_root_uses_full_path(self) -> None:
        matcher = SkipMatcher(["vendor/*"], root=Path("/x/work"))
        assert matcher.matches(Path("/elsewhere/vendor/lib"))


class TestAbsolutePatterns:
    """Absolute and explicitly relative patterns name one directory."""

    def test_absolute_match(self, tmp_path: Path) -> None:
        target = tmp_path / "mirror"
        target.mkdir()
        matcher = SkipMatcher([str(target)])

        assert matcher.matches(target.resolve())
        assert not matcher.matches(tmp_path.resolve() / "other" / "mirror")

    def test_absolute_nonexistent_pattern(self) -> None:
        matcher = SkipMatcher(["/does/not/exist"])
        assert matcher.matches(Path("/does/not/exist"))
        assert not matcher.matches(Path("/elsewhere/exist"))

    def test_absolute_matches_real_path(self, tmp_path: Path) -> None:
        target = tmp_path / "real"
        target.mkdir()
        matcher = SkipMatcher([str(target)])

        assert matcher.matches(Path("/some/link"), real_path=target.resolve())

    def test_home_expansion(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "vendor").mkdir()
        matcher = SkipMatcher(["~/vendor"])

        assert matcher.matches((tmp_path / "vendor").resolve())

    def test_dot_relative_to_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "out").mkdir()
        matcher = SkipMatcher(["./out"], cwd=tmp_path)

        assert matcher.matches((tmp_path / "out").resolve())
        assert not matcher.matches(Path("/elsewhere/out"))

    def test_parent_relative_to_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "sibling").mkdir()
        (tmp_path / "here").mkdir()
        matcher = SkipMatcher(["../sibling"], cwd=tmp_path / "here")

        assert matcher.matches((tmp_path / "sibling").resolve())


class TestEmpty:
    def test_no_patterns(self) -> None:
        matcher = SkipMatcher([])
        assert not matcher
        assert not matcher.matches(Path("/anything"))

    def test_blank_patterns_ignored(self) -> None:
        assert not SkipMatcher(["", "  "])
