"""pathglob Infrastructure Layer.

Services used by the finder and the CLI:
- ConfigManager: Hierarchical YAML/environment configuration
- Logger: Structured logging with context
"""

from .config_manager import ConfigError, ConfigManager, ConfigSource, build_rules
from .logger import Logger, LogLevel, get_logger, set_global_logger

__all__ = [
    # Logger exports
    "Logger",
    "LogLevel",
    "get_logger",
    "set_global_logger",
    # ConfigManager exports
    "ConfigSource",
    "ConfigError",
    "ConfigManager",
    "build_rules",
]
