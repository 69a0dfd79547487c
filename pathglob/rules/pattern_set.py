#!/usr/bin/env python3
"""Include/exclude pattern sets anchored to a root directory.

PatternSet combines the single-pattern primitives into the usual file
selection policy:
1. A path is excluded if it matches any negative pattern
2. Otherwise it is included if it matches at least one positive pattern
3. A directory is worth descending into if any positive pattern might match
   beneath it

Example:
    >>> patterns = PatternSet("/project", ["./src/**/*.py", "!./src/**/test_*.py"])
    >>> patterns.matches("/project/src/pkg/module.py")
    True
    >>> patterns.matches("/project/src/pkg/test_module.py")
    False
    >>> patterns.should_descend("/project/docs")
    False
"""

from typing import Dict, List, Optional, Sequence

from pathglob.core.constants import CURRENT_DIR_PREFIX, NEGATION_MARKER, SEPARATOR
from pathglob.core.validators import RuleSet, collect_violations
from pathglob.rules.matcher import matches_single_pattern
from pathglob.rules.patterns import (
    Pattern,
    add_path_to_patterns,
    negative_patterns,
    positive_patterns,
)
from pathglob.rules.pruner import dir_might_match


def _root_relative(pattern: str) -> str:
    # add_path_to_patterns leaves bare filenames alone; under a root they
    # name files in the root directory
    parsed = Pattern.parse(pattern)
    if SEPARATOR in parsed.normalized:
        return pattern
    return (NEGATION_MARKER if parsed.negated else "") + CURRENT_DIR_PREFIX + parsed.body


class PatternSet:
    """Positive and negative patterns anchored to a root path.

    Patterns are anchored once on construction; the set holds no other state
    and may be shared between threads.
    """

    def __init__(self, root_path: Optional[str], patterns: Sequence[str]):
        """Initialize pattern set.

        Args:
            root_path: Directory relative patterns and bare filenames are
                anchored to, or None to use the patterns exactly as written
            patterns: Raw patterns, negated ones prefixed with '!'
        """
        self._raw = list(patterns)
        self._root_path = root_path

        if root_path:
            anchored = add_path_to_patterns(
                root_path, [_root_relative(pattern) for pattern in self._raw]
            )
        else:
            anchored = list(self._raw)
        self._include = positive_patterns(anchored)
        self._exclude = negative_patterns(anchored)

    @property
    def root_path(self) -> Optional[str]:
        """Root the patterns are anchored to."""
        return self._root_path

    @property
    def include(self) -> List[str]:
        """Anchored positive patterns."""
        return list(self._include)

    @property
    def exclude(self) -> List[str]:
        """Anchored negative patterns, without the negation marker."""
        return list(self._exclude)

    def matches(self, path: str) -> bool:
        """Check if a file path is selected by this set.

        Args:
            path: Candidate file path

        Returns:
            True if the path matches a positive pattern and no negative one
        """
        if any(matches_single_pattern(path, pattern) for pattern in self._exclude):
            return False

        return any(matches_single_pattern(path, pattern) for pattern in self._include)

    def should_descend(self, directory_path: str) -> bool:
        """Check if a directory might contain selected files.

        Negative patterns never prune: a directory matching an exclusion may
        still hold files the exclusion does not cover.

        Args:
            directory_path: Directory about to be walked

        Returns:
            True unless no positive pattern can match beneath the directory
        """
        return any(dir_might_match(directory_path, pattern) for pattern in self._include)

    def validate(self, rules: Optional[RuleSet] = None) -> Dict[str, List[str]]:
        """Validate the raw patterns.

        Args:
            rules: Rule mapping (defaults to the default rule set)

        Returns:
            Mapping of raw pattern to violated rule names, invalid ones only
        """
        return collect_violations(self._raw, rules)

    def __len__(self) -> int:
        """Return number of patterns."""
        return len(self._raw)

    def __repr__(self) -> str:
        return f"PatternSet(root_path={self._root_path!r}, patterns={self._raw!r})"
