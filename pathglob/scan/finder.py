#!/usr/bin/env python3
"""Pattern-driven file discovery.

``find_files`` is the consumer the pattern engine was built for: it walks a
directory tree, skips subtrees no positive pattern can reach, and returns the
files selected by the include/exclude patterns.

Patterns are relative to the root unless absolute. Matching happens on
normalized absolute paths, so results are slash-delimited on every platform.

Example:
    >>> find_files("/project", ["./src/**/*.py", "!./src/**/test_*.py"])
    ['/project/src/pkg/__init__.py', '/project/src/pkg/module.py']
"""

import os
from typing import List, Optional, Sequence

from pathglob.core.constants import ErrorCode
from pathglob.core.paths import join_root, sanitise_path
from pathglob.core.validators import RuleSet, check_patterns
from pathglob.infrastructure.logger import Logger, get_logger
from pathglob.rules.pattern_set import PatternSet


class FinderError(Exception):
    """Raised when the root directory cannot be walked."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.NOT_FOUND):
        super().__init__(message)
        self.error_code = error_code


def find_files(
    root_path: str,
    patterns: Sequence[str],
    rules: Optional[RuleSet] = None,
    validate: bool = True,
    logger: Optional[Logger] = None,
) -> List[str]:
    """Find files under ``root_path`` selected by ``patterns``.

    Args:
        root_path: Directory to walk
        patterns: Raw patterns; negated ones are prefixed with '!'
        rules: Validation rules (defaults to the default rule set)
        validate: Reject the pattern list if any pattern is invalid
        logger: Logger to report progress to (defaults to the global one)

    Returns:
        Sorted normalized paths of the selected files

    Raises:
        InvalidPatternError: If validation is on and a pattern is invalid
        FinderError: If root_path is not a directory
    """
    logger = logger or get_logger()

    if validate:
        check_patterns(patterns, rules)

    if not os.path.isdir(root_path):
        raise FinderError(f"Root path is not a directory: {root_path}")

    root = sanitise_path(os.path.abspath(root_path))
    pattern_set = PatternSet(root, patterns)
    matches: List[str] = []

    def _on_error(error: OSError) -> None:
        logger.warning("Skipping unreadable directory", path=error.filename, error=error.strerror)

    with logger.add_context(root=root):
        logger.debug("Starting walk", include=pattern_set.include, exclude=pattern_set.exclude)

        for dirpath, dirnames, filenames in os.walk(root_path, onerror=_on_error):
            current = sanitise_path(os.path.abspath(dirpath))

            kept = []
            for dirname in sorted(dirnames):
                if pattern_set.should_descend(join_root(current, dirname)):
                    kept.append(dirname)
                else:
                    logger.debug("Pruned directory", directory=join_root(current, dirname))
            # os.walk only descends into what is left in dirnames
            dirnames[:] = kept

            for filename in filenames:
                candidate = join_root(current, filename)
                if pattern_set.matches(candidate):
                    matches.append(candidate)

        logger.debug("Finished walk", matches=len(matches))

    return sorted(matches)
