"""pathglob - glob-style path pattern matching with directory pruning.

The public API is a set of pure functions over strings:

    >>> from pathglob import matches_single_pattern, dir_might_match
    >>> matches_single_pattern("./src/app/main.js", "./src/**/*.js")
    True
    >>> dir_might_match("/root/tests", "/root/src/**/*.js")
    False
"""

from pathglob.core.constants import PATHGLOB_VERSION as __version__
from pathglob.core.paths import sanitise_path
from pathglob.core.validators import (
    DEFAULT_RULES,
    InvalidPatternError,
    ValidationError,
    ValidationRule,
    check_patterns,
    validate_pattern,
)
from pathglob.rules import (
    Pattern,
    PatternSet,
    add_path_to_patterns,
    dir_might_match,
    matches_single_pattern,
    negative_patterns,
    positive_patterns,
)
from pathglob.scan import find_files

__all__ = [
    "__version__",
    "sanitise_path",
    "DEFAULT_RULES",
    "InvalidPatternError",
    "ValidationError",
    "ValidationRule",
    "check_patterns",
    "validate_pattern",
    "Pattern",
    "PatternSet",
    "add_path_to_patterns",
    "dir_might_match",
    "matches_single_pattern",
    "negative_patterns",
    "positive_patterns",
    "find_files",
]
