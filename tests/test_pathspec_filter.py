"""Tests for gitignore-aware path filtering."""

import warnings
from pathlib import Path

from docblock_tags.filters import DEFAULT_IGNORE_PATTERNS, PathspecFilter


class TestPathspecFilter:
    def test_defaults_without_gitignore(self, tmp_path):
        path_filter = PathspecFilter(tmp_path)
        assert "node_modules/" in DEFAULT_IGNORE_PATTERNS
        assert path_filter.should_ignore(tmp_path / "node_modules" / "x.js")
        assert not path_filter.should_ignore(tmp_path / "src" / "x.js")

    def test_root_gitignore_replaces_defaults(self, tmp_path):
        (tmp_path / ".gitignore").write_text("*.gen.php\n", encoding="utf-8")
        path_filter = PathspecFilter(tmp_path)
        assert path_filter.should_ignore(tmp_path / "a.gen.php")
        assert not path_filter.should_ignore(tmp_path / "node_modules" / "x.js")

    def test_nested_gitignore_applies_below_its_directory(self, tmp_path):
        (tmp_path / "lib").mkdir()
        (tmp_path / "lib" / ".gitignore").write_text("cache/\n", encoding="utf-8")
        path_filter = PathspecFilter(tmp_path)

        assert path_filter.should_ignore(tmp_path / "lib" / "cache" / "a.php")
        assert not path_filter.should_ignore(tmp_path / "cache" / "a.php")

        flat = PathspecFilter(tmp_path, include_nested=False)
        assert not flat.should_ignore(tmp_path / "lib" / "cache" / "a.php")

    def test_filter_paths(self, tmp_path):
        path_filter = PathspecFilter(tmp_path)
        paths = [tmp_path / "a.php", tmp_path / "vendor" / "b.php"]
        assert path_filter.filter_paths(paths) == [tmp_path / "a.php"]

    def test_relative_root_matches_anchored_patterns(self, tmp_path, monkeypatch):
        project = tmp_path / "proj"
        (project / "gen").mkdir(parents=True)
        (project / ".gitignore").write_text("/gen\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        path_filter = PathspecFilter(Path("proj"))
        assert path_filter.root == project.resolve()
        assert path_filter.should_ignore(project / "gen" / "a.php")
        assert not path_filter.should_ignore(project / "src" / "gen" / "a.php")

    def test_building_specs_emits_no_deprecation_warning(self, tmp_path):
        (tmp_path / ".gitignore").write_text("*.gen.php\n", encoding="utf-8")
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            PathspecFilter(tmp_path)
