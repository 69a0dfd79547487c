"""Tests for path normalization."""
import pytest

from pathglob.core.paths import is_absolute, join_root, sanitise_path, split_segments


class TestSanitisePath:
    """Test sanitise_path."""

    def test_full_windows_path(self):
        """Backslashes and drive letter are both handled."""
        assert sanitise_path("c:\\path\\to\\filename.js") == "/path/to/filename.js"

    def test_half_windows_path(self):
        """Drive letter with forward slashes."""
        assert sanitise_path("c:/path/to/filename.js") == "/path/to/filename.js"

    def test_windows_drive_root(self):
        """A bare drive root becomes '/'."""
        assert sanitise_path("c:\\") == "/"

    def test_uppercase_drive_letter(self):
        """Drive letters are matched regardless of case."""
        assert sanitise_path("D:\\data") == "/data"

    def test_drive_without_separator(self):
        """Remainder is rooted at '/' even without a separator."""
        assert sanitise_path("c:") == "/"
        assert sanitise_path("c:file.js") == "/file.js"

    def test_non_windows_path(self):
        """POSIX paths pass through unchanged."""
        assert sanitise_path("/path/to/filename.js") == "/path/to/filename.js"

    def test_relative_paths_unchanged(self):
        """Relative paths keep their leading './'."""
        assert sanitise_path("./src/file.js") == "./src/file.js"
        assert sanitise_path("src/file.js") == "src/file.js"

    def test_multi_letter_prefix_is_not_a_drive(self):
        """Only a single letter before ':' counts as a drive."""
        assert sanitise_path("ab:/x") == "ab:/x"

    def test_empty_path(self):
        """Empty string stays empty."""
        assert sanitise_path("") == ""

    @pytest.mark.parametrize(
        "path",
        [
            "c:\\path\\to\\filename.js",
            "c:/path/to/filename.js",
            "c:\\",
            "/path/to/filename.js",
            "relative\\path",
            "",
        ],
    )
    def test_idempotent(self, path):
        """Normalizing twice equals normalizing once."""
        once = sanitise_path(path)
        assert sanitise_path(once) == once


class TestSegments:
    """Test split_segments and is_absolute."""

    def test_split_relative(self):
        """Relative paths split into their names."""
        assert split_segments("./src/**/*.js") == [".", "src", "**", "*.js"]

    def test_split_absolute_has_leading_empty_segment(self):
        """Absolute paths start with an empty segment."""
        assert split_segments("/root/src") == ["", "root", "src"]

    def test_split_windows(self):
        """Windows paths are normalized before splitting."""
        assert split_segments("c:\\root\\src") == ["", "root", "src"]

    def test_is_absolute(self):
        """Absolute detection works on normalized form."""
        assert is_absolute("/root")
        assert is_absolute("c:\\root")
        assert not is_absolute("root")
        assert not is_absolute("./root")


class TestJoinRoot:
    """Test join_root."""

    def test_single_separator(self):
        """Exactly one separator between root and relative part."""
        assert join_root("/root", "a/b") == "/root/a/b"
        assert join_root("/root/", "a/b") == "/root/a/b"
        assert join_root("/root", "/a/b") == "/root/a/b"

    def test_filesystem_root(self):
        """Joining onto '/' does not double the separator."""
        assert join_root("/", "a") == "/a"

    def test_windows_root(self):
        """Windows roots are normalized."""
        assert join_root("c:\\root", "a.js") == "/root/a.js"
