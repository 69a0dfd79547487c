"""pathglob Core - Shared constants, path normalization and pattern validation.

Import specific functions from submodules:
    from pathglob.core import constants
    from pathglob.core.paths import sanitise_path
    from pathglob.core.validators import validate_pattern
"""

from pathglob.core import constants, paths, validators

__all__ = [
    "constants",
    "paths",
    "validators",
]
