#!/usr/bin/env python3
"""Segment-wise wildcard matching of paths against patterns.

Matching rules:
- Paths and patterns are normalized, then split on '/'
- A literal segment must equal the path segment exactly (case-sensitive)
- '*' matches exactly one non-empty segment
- '**' matches zero or more whole segments
- '*' inside a segment (e.g. '*.js', '.*') matches any run of characters
  within that segment
- Both ends are anchored: the whole path must be consumed by the pattern

Absolute patterns only match absolute paths, and relative patterns only
relative ones: the leading empty segment of an absolute path never equals a
named segment.

Example:
    >>> matches_single_pattern("./src/deep/path/filename.js", "./src/**/*.js")
    True
    >>> matches_single_pattern("./lib/deep/src/filename.js", "./src/**/*.js")
    False
"""

import re
from typing import Dict, Sequence, Tuple

from pathglob.core.constants import GLOBSTAR, STAR
from pathglob.core.paths import split_segments


def has_wildcard(segment: str) -> bool:
    """Return True if a pattern segment contains a wildcard."""
    return STAR in segment


def match_segment(path_segment: str, pattern_segment: str) -> bool:
    """Match one path segment against one pattern segment.

    Args:
        path_segment: Segment of the candidate path
        pattern_segment: Segment of the pattern

    Returns:
        True if the segment matches
    """
    if pattern_segment == STAR:
        return path_segment != ""

    if not has_wildcard(pattern_segment):
        return path_segment == pattern_segment

    # Everything except '*' is literal
    regex = "[^/]*".join(re.escape(part) for part in pattern_segment.split(STAR))
    return re.fullmatch(regex, path_segment) is not None


def match_segments(path_segments: Sequence[str], pattern_segments: Sequence[str]) -> bool:
    """Match pre-split path segments against pre-split pattern segments.

    Walks (pattern_index, path_index) pairs, backtracking on '**' by trying
    the shortest consumption first. Results are memoized for the duration of
    this call only.

    Args:
        path_segments: Segments of the normalized candidate path
        pattern_segments: Segments of the normalized pattern

    Returns:
        True if the whole path matches the whole pattern
    """
    memo: Dict[Tuple[int, int], bool] = {}
    pattern_count = len(pattern_segments)
    path_count = len(path_segments)

    def _match(pattern_index: int, path_index: int) -> bool:
        key = (pattern_index, path_index)
        if key in memo:
            return memo[key]

        if pattern_index == pattern_count:
            result = path_index == path_count
        elif pattern_segments[pattern_index] == GLOBSTAR:
            # Zero segments first, then widen
            result = any(
                _match(pattern_index + 1, next_path_index)
                for next_path_index in range(path_index, path_count + 1)
            )
        elif path_index == path_count:
            result = False
        else:
            result = match_segment(
                path_segments[path_index], pattern_segments[pattern_index]
            ) and _match(pattern_index + 1, path_index + 1)

        memo[key] = result
        return result

    return _match(0, 0)


def matches_single_pattern(path: str, pattern: str) -> bool:
    """Check whether a path matches a single pattern.

    The pattern is matched as written; a leading '!' is not treated as
    negation here (see ``negative_patterns``).

    Args:
        path: Candidate path
        pattern: Glob pattern

    Returns:
        True if the full path matches the full pattern
    """
    return match_segments(split_segments(path), split_segments(pattern))
