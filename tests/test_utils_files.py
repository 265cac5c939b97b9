"""Tests for file utilities."""

from __future__ import annotations

from pathlib import Path

from utilhub.utils.files import iter_utility_paths


class TestIterUtilityPaths:
    """Test iter_utility_paths function."""

    def test_matching_files_sorted_by_name(self, tmp_path: Path) -> None:
        """Should yield matching files ordered by file name."""
        (tmp_path / "zeta.csx").write_text("z")
        (tmp_path / "alpha.csx").write_text("a")
        (tmp_path / "mid.csx").write_text("m")

        paths = list(iter_utility_paths(tmp_path, "*.csx"))

        assert [p.name for p in paths] == ["alpha.csx", "mid.csx", "zeta.csx"]

    def test_ignores_other_extensions(self, tmp_path: Path) -> None:
        (tmp_path / "tool.csx").write_text("x")
        (tmp_path / "notes.txt").write_text("x")
        (tmp_path / "Program.cs").write_text("x")

        paths = list(iter_utility_paths(tmp_path, "*.csx"))

        assert [p.name for p in paths] == ["tool.csx"]

    def test_not_recursive(self, tmp_path: Path) -> None:
        """Files in subdirectories are not included."""
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "deep.csx").write_text("x")
        (tmp_path / "top.csx").write_text("x")

        paths = list(iter_utility_paths(tmp_path, "*.csx"))

        assert [p.name for p in paths] == ["top.csx"]

    def test_skips_directories_matching_pattern(self, tmp_path: Path) -> None:
        (tmp_path / "odd.csx").mkdir()

        assert list(iter_utility_paths(tmp_path, "*.csx")) == []

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list(iter_utility_paths(tmp_path, "*.csx")) == []

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing folder yields nothing."""
        assert list(iter_utility_paths(tmp_path / "missing", "*.csx")) == []

    def test_blank_and_none(self) -> None:
        """Blank or absent folders yield nothing."""
        assert list(iter_utility_paths(None, "*.csx")) == []
        assert list(iter_utility_paths("", "*.csx")) == []
        assert list(iter_utility_paths("   ", "*.csx")) == []

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        (tmp_path / "tool.csx").write_text("x")

        paths = list(iter_utility_paths(str(tmp_path), "*.csx"))

        assert paths == [tmp_path / "tool.csx"]
