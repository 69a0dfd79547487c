"""Tests for pattern-driven file discovery."""
import logging
import os
from pathlib import Path

import pytest

from pathglob.core.paths import sanitise_path
from pathglob.core.validators import InvalidPatternError
from pathglob.infrastructure.logger import Logger
from pathglob.scan.finder import FinderError, find_files


def _rel(root: Path, paths):
    prefix = sanitise_path(os.path.abspath(root)) + "/"
    return [path[len(prefix) :] for path in paths]


class TestFindFiles:
    """Tests for find_files."""

    def test_globstar_pattern(self, source_tree):
        """Files at any depth under the prefix are found."""
        found = find_files(str(source_tree), ["./src/**/*.js"])
        assert _rel(source_tree, found) == [
            "src/deep/path/filename.js",
            "src/shallow.js",
            "src/vendor/lib.js",
        ]

    def test_negative_pattern(self, source_tree):
        """Negated patterns remove files."""
        found = find_files(str(source_tree), ["./src/**/*.js", "!./src/vendor/**"])
        assert _rel(source_tree, found) == ["src/deep/path/filename.js", "src/shallow.js"]

    def test_multiple_positive_patterns(self, source_tree):
        """A file matching any positive pattern is included."""
        found = find_files(str(source_tree), ["./src/*.js", "./tests/*.js"])
        assert _rel(source_tree, found) == ["src/shallow.js", "tests/test.js"]

    def test_bare_filenames_name_root_files(self, source_tree):
        """Bare filenames select files in the root directory."""
        found = find_files(str(source_tree), ["README.md", ".gitignore", "!.gitignore"])
        assert _rel(source_tree, found) == ["README.md"]

    def test_absolute_pattern(self, source_tree):
        """Absolute patterns are used as written."""
        root = sanitise_path(os.path.abspath(source_tree))
        found = find_files(str(source_tree), [root + "/tests/*.js"])
        assert _rel(source_tree, found) == ["tests/test.js"]

    def test_results_are_sorted_and_normalized(self, source_tree):
        """Results are sorted, absolute and slash-delimited."""
        found = find_files(str(source_tree), ["./**/*.js"], rules={})
        assert found == sorted(found)
        assert all(path.startswith("/") and "\\" not in path for path in found)
        assert len(found) == 6

    def test_invalid_patterns_rejected(self, source_tree):
        """Invalid patterns raise before any walking happens."""
        with pytest.raises(InvalidPatternError) as exc_info:
            find_files(str(source_tree), ["**/*.js", "./src/*.js"])
        assert list(exc_info.value.violations) == ["**/*.js"]

    def test_validation_can_be_skipped(self, source_tree):
        """validate=False accepts any pattern."""
        found = find_files(str(source_tree), ["./**"], validate=False)
        assert len(found) == 9

    def test_custom_rules(self, source_tree):
        """Custom rule mappings replace the defaults."""
        with pytest.raises(InvalidPatternError):
            find_files(
                str(source_tree), ["./src/*.js"], rules={"no_js": lambda p: p.endswith(".js")}
            )

    def test_missing_root(self, tmp_path):
        """A root that is not a directory is an error."""
        with pytest.raises(FinderError) as exc_info:
            find_files(str(tmp_path / "missing"), ["./*.js"])
        assert "not a directory" in str(exc_info.value)

    def test_prunes_unreachable_directories(self, source_tree, caplog):
        """Directories no positive pattern can reach are never entered."""
        logger = Logger("pathglob.test.finder", level="DEBUG", handlers=[])
        logger.logger.propagate = True

        with caplog.at_level(logging.DEBUG, logger="pathglob.test.finder"):
            find_files(str(source_tree), ["./src/**/*.js"], logger=logger)

        pruned = [r.context["directory"] for r in caplog.records if "Pruned" in r.getMessage()]
        assert any(path.endswith("/lib") for path in pruned)
        assert any(path.endswith("/tests") for path in pruned)
        assert not any("/src" in path for path in pruned)
