"""Pathspec-based file filtering.

Uses the pathspec library for gitignore handling, so negation
patterns, double-star globs and nested gitignore files behave as git does.
"""

import logging
from pathlib import Path
from typing import Optional

import pathspec

logger = logging.getLogger(__name__)


# Default ignore patterns when no .gitignore exists
DEFAULT_IGNORE_PATTERNS: list[str] = [
    "node_modules/",
    "vendor/",
    "venv/",
    ".venv/",
    "__pycache__/",
    ".git/",
    "dist/",
    "build/",
    "*.min.js",
    ".idea/",
    ".vscode/",
    "coverage/",
    "target/",  # Java/Kotlin
    "bin/",
    "obj/",  # .NET
]


def _spec_from_lines(lines: list[str]) -> pathspec.GitIgnoreSpec:
    return pathspec.GitIgnoreSpec.from_lines(lines)


class PathspecFilter:
    """File filter based on pathspec library with nested gitignore support."""

    def __init__(self, root: Path, include_nested: bool = True):
        """
        Initialize the filter.

        Args:
            root: Scan root path
            include_nested: Whether to include nested .gitignore files
        """
        self.root = root.resolve()
        self._root_spec = _spec_from_lines(DEFAULT_IGNORE_PATTERNS)
        self._nested_specs: dict[Path, pathspec.GitIgnoreSpec] = {}
        self._include_nested = include_nested
        self._load_gitignore()
        if include_nested:
            self._load_nested_gitignores()

    def _load_gitignore(self) -> None:
        """Load root .gitignore file, falling back to the defaults."""
        gitignore_path = self.root / ".gitignore"
        if not gitignore_path.exists():
            return

        try:
            lines = gitignore_path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            logger.warning(f"Failed to read {gitignore_path}: {e}")
            return
        self._root_spec = _spec_from_lines(lines)

    def _load_nested_gitignores(self) -> None:
        """Load nested .gitignore files from subdirectories."""
        for gitignore_path in self.root.rglob(".gitignore"):
            if gitignore_path.parent == self.root:
                continue  # root, already loaded

            try:
                lines = gitignore_path.read_text(encoding="utf-8").splitlines()
            except OSError as e:
                logger.warning(f"Failed to read {gitignore_path}: {e}")
                continue
            self._nested_specs[gitignore_path.parent] = _spec_from_lines(lines)

    def should_ignore(self, path: Path) -> bool:
        """
        Check if a file should be ignored.

        Root rules apply to every file; a nested .gitignore applies to
        files in its directory and below, deepest first.
        """
        relative = self._relative_to_root(path)
        if relative is None:
            return False

        relative_str = relative.as_posix()
        if self._root_spec.match_file(relative_str):
            return True

        if not self._include_nested:
            return False

        sorted_dirs = sorted(
            self._nested_specs.keys(),
            key=lambda p: len(p.parts),
            reverse=True,
        )
        for gitignore_dir in sorted_dirs:
            gitignore_relative = gitignore_dir.relative_to(self.root)
            try:
                path_from_gitignore = relative.relative_to(gitignore_relative)
            except ValueError:
                continue
            if self._nested_specs[gitignore_dir].match_file(path_from_gitignore.as_posix()):
                return True

        return False

    def _relative_to_root(self, path: Path) -> Optional[Path]:
        """Relative paths are taken as relative to the root already."""
        if not path.is_absolute():
            return path
        for candidate in (path, path.resolve()):
            try:
                return candidate.relative_to(self.root)
            except ValueError:
                continue
        return None

    def filter_paths(self, paths: list[Path]) -> list[Path]:
        """Filter paths, returning those that should NOT be ignored."""
        return [p for p in paths if not self.should_ignore(p)]
