#!/usr/bin/env python3
"""Pattern parsing, partitioning and anchoring.

This module handles the pattern list as a whole, before any path is matched:
- Parsing a raw pattern into its negation marker and normalized body
- Splitting a list into positive and negative patterns
- Anchoring relative patterns to a root directory

Example:
    >>> positive_patterns(["!negative", "positive"])
    ['positive']
    >>> negative_patterns(["!negative", "positive"])
    ['negative']
    >>> add_path_to_patterns("/root", ["./src/**/*.js", "!./.gitignore"])
    ['/root/src/**/*.js', '!/root/.gitignore']
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from pathglob.core.constants import CURRENT_DIR_PREFIX, NEGATION_MARKER, SEPARATOR
from pathglob.core.paths import join_root, sanitise_path


@dataclass(frozen=True)
class Pattern:
    """A raw pattern with its derived attributes.

    Matching depends only on ``segments``; ``negated`` is a set-membership
    concern for the caller.
    """

    raw: str
    negated: bool
    body: str
    normalized: str
    segments: Tuple[str, ...]

    @classmethod
    def parse(cls, raw: str) -> "Pattern":
        """Derive a Pattern from a raw string.

        Args:
            raw: Pattern as supplied by the user (may start with '!')

        Returns:
            Parsed pattern
        """
        negated = raw.startswith(NEGATION_MARKER)
        body = raw[len(NEGATION_MARKER) :] if negated else raw
        normalized = sanitise_path(body)
        return cls(
            raw=raw,
            negated=negated,
            body=body,
            normalized=normalized,
            segments=tuple(normalized.split(SEPARATOR)),
        )

    @property
    def is_absolute(self) -> bool:
        """Return True if the body is rooted at '/'."""
        return self.normalized.startswith(SEPARATOR)

    def __str__(self) -> str:
        return self.raw


def positive_patterns(patterns: Iterable[str]) -> List[str]:
    """Return the patterns without a negation marker, unchanged.

    Args:
        patterns: Raw patterns

    Returns:
        Positive patterns in their original order
    """
    return [pattern for pattern in patterns if not pattern.startswith(NEGATION_MARKER)]


def negative_patterns(patterns: Iterable[str]) -> List[str]:
    """Return the negated patterns with the marker stripped.

    Args:
        patterns: Raw patterns

    Returns:
        Negative pattern bodies in their original order
    """
    return [
        pattern[len(NEGATION_MARKER) :]
        for pattern in patterns
        if pattern.startswith(NEGATION_MARKER)
    ]


def partition_patterns(patterns: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split patterns into (positive, negative) lists."""
    return positive_patterns(patterns), negative_patterns(patterns)


def _anchor_one(root_path: str, pattern: str) -> str:
    parsed = Pattern.parse(pattern)
    body = parsed.normalized

    if parsed.is_absolute:
        return pattern

    # A bare filename is left as written
    if SEPARATOR not in body:
        return pattern

    if body.startswith(CURRENT_DIR_PREFIX):
        body = body[len(CURRENT_DIR_PREFIX) :]

    anchored = join_root(root_path, body)
    return NEGATION_MARKER + anchored if parsed.negated else anchored


def add_path_to_patterns(root_path: str, patterns: Iterable[str]) -> List[str]:
    """Rewrite relative patterns as absolute patterns under ``root_path``.

    Negation markers are preserved, absolute patterns are returned unchanged,
    and a single leading './' is dropped before joining. A bare filename with
    no separator at all is also returned unchanged.

    Args:
        root_path: Directory the patterns are relative to
        patterns: Raw patterns

    Returns:
        One pattern per input, in the same order
    """
    return [_anchor_one(root_path, pattern) for pattern in patterns]
