"""pathglob Scan - filesystem walking driven by the pattern engine."""

from .finder import FinderError, find_files

__all__ = [
    "FinderError",
    "find_files",
]
