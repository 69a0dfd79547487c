"""pathglob Rules System.

This module provides the pattern engine:
- Pattern parsing, partitioning and anchoring
- Segment-wise wildcard matching
- Directory pruning for tree walks
- PatternSet: include/exclude selection over a root directory

All functions are pure and keep no state between calls.
"""

from .matcher import match_segment, match_segments, matches_single_pattern
from .pattern_set import PatternSet
from .patterns import (
    Pattern,
    add_path_to_patterns,
    negative_patterns,
    partition_patterns,
    positive_patterns,
)
from .pruner import dir_might_match

__all__ = [
    # Patterns
    "Pattern",
    "positive_patterns",
    "negative_patterns",
    "partition_patterns",
    "add_path_to_patterns",
    # Matching
    "match_segment",
    "match_segments",
    "matches_single_pattern",
    "dir_might_match",
    # Pattern sets
    "PatternSet",
]
