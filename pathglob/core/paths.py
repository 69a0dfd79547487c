"""
pathglob Core: Path normalization.

Every component that accepts a raw path or pattern string funnels it through
``sanitise_path`` so that comparisons always happen on a single
slash-delimited form, whatever platform convention the string came from.

Example:
    >>> sanitise_path("c:\\\\path\\\\to\\\\filename.js")
    '/path/to/filename.js'
    >>> split_segments("./src/**/*.js")
    ['.', 'src', '**', '*.js']
"""
import re
from typing import List

from pathglob.core.constants import SEPARATOR

# Single drive letter followed by a colon, e.g. "c:" or "D:"
_DRIVE_DESIGNATOR = re.compile(r"^[A-Za-z]:")


def sanitise_path(path: str) -> str:
    """Convert a path to its canonical slash-delimited form.

    Backslashes become forward slashes and a leading drive designator is
    removed, leaving the remainder rooted at ``/``. Normalizing an already
    normalized path returns it unchanged.

    Args:
        path: Path or pattern string in any platform convention

    Returns:
        Normalized path
    """
    normalized = path.replace("\\", SEPARATOR)

    if _DRIVE_DESIGNATOR.match(normalized):
        normalized = normalized[2:]
        if not normalized.startswith(SEPARATOR):
            normalized = SEPARATOR + normalized

    return normalized


def split_segments(path: str) -> List[str]:
    """Normalize a path and split it into segments.

    An absolute path yields a leading empty segment, which keeps absolute and
    relative forms from ever matching each other.

    Args:
        path: Path or pattern string

    Returns:
        List of segments
    """
    return sanitise_path(path).split(SEPARATOR)


def is_absolute(path: str) -> bool:
    """Check whether a path is absolute once normalized."""
    return sanitise_path(path).startswith(SEPARATOR)


def join_root(root_path: str, relative: str) -> str:
    """Join a root path and a relative path with exactly one separator.

    Args:
        root_path: Directory to join onto
        relative: Relative path (leading separators are dropped)

    Returns:
        Joined, normalized path
    """
    root = sanitise_path(root_path).rstrip(SEPARATOR)
    return root + SEPARATOR + sanitise_path(relative).lstrip(SEPARATOR)
