#!/usr/bin/env python3
"""Directory pruning for pattern-driven tree walks.

``dir_might_match`` answers "could anything below this directory match the
pattern?" without listing the directory. It may answer True for a directory
that turns out to hold no match, but it never answers False for a directory
that does hold one, so a walker can safely skip every directory it rejects.

Example:
    >>> dir_might_match("/root/src", "/root/src/**/*.js")
    True
    >>> dir_might_match("/root/tests", "/root/src/**/*.js")
    False
"""

from typing import List

from pathglob.core.constants import GLOBSTAR, SEPARATOR
from pathglob.core.paths import sanitise_path, split_segments
from pathglob.rules.matcher import match_segment


def _directory_segments(directory_path: str) -> List[str]:
    # Trailing separators are ignored, so "/" becomes the single empty
    # segment every absolute pattern starts with
    return sanitise_path(directory_path).rstrip(SEPARATOR).split(SEPARATOR)


def dir_might_match(directory_path: str, pattern: str) -> bool:
    """Check whether descending into a directory could yield a match.

    Args:
        directory_path: Directory about to be descended into
        pattern: Glob pattern (without negation marker)

    Returns:
        False only if no path beneath the directory can match the pattern
    """
    dir_segments = _directory_segments(directory_path)
    pattern_segments = split_segments(pattern)

    for index, dir_segment in enumerate(dir_segments):
        if index == len(pattern_segments):
            # Directory is already deeper than the pattern reaches
            return False

        pattern_segment = pattern_segments[index]
        if pattern_segment == GLOBSTAR:
            return True

        if not match_segment(dir_segment, pattern_segment):
            return False

    # Directory exhausted: it is an ancestor of (or equal to) potential matches
    return True
