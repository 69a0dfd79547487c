"""
pathglob Core: Constants

This module provides package-wide constants, error codes and configuration keys
shared by the pattern engine and its consumers.
"""
from enum import IntEnum

# Version information
PATHGLOB_VERSION = "1.0.0"


class ErrorCode(IntEnum):
    """Standardized error codes for pathglob operations."""

    SUCCESS = 0  # Operation completed successfully
    INVALID_INPUT = 1  # Bad pattern, invalid configuration
    NOT_FOUND = 2  # Root path or config file doesn't exist
    PERMISSION_DENIED = 3  # File could not be read


# Pattern syntax
SEPARATOR = "/"
NEGATION_MARKER = "!"
CURRENT_DIR_PREFIX = "./"
PARENT_DIR_PREFIX = "../"
STAR = "*"
GLOBSTAR = "**"


class DefaultRule:
    """Names of the default validation rules."""

    NO_LEADING_GLOBSTAR = "no_leading_globstar"
    NO_PARENT_TRAVERSAL = "no_parent_traversal"
    NO_REGEX_METACHARS = "no_regex_metachars"
    NO_BRACE_EXPANSION = "no_brace_expansion"
    NO_CHARACTER_CLASSES = "no_character_classes"


# Configuration keys
class ConfigKey:
    """Configuration key constants."""

    ROOT = "root"
    PATTERNS = "patterns"
    VALIDATION = "validation"
    VALIDATION_ENABLED = "enabled"
    DISABLED_RULES = "disabled_rules"
    EXTRA_RULES = "extra_rules"
    LOGGING = "logging"

    # Extra rule entries
    RULE_NAME = "name"
    RULE_MESSAGE = "message"
    RULE_REGEX = "regex"
