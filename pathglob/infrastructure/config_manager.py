#!/usr/bin/env python3
"""Hierarchical configuration for pathglob.

This module provides configuration management with:
- Precedence levels (defaults < config file < environment < CLI < runtime)
- YAML configuration files
- PATHGLOB_* environment variables
- Dot-separated key access
- Deep merge of nested sections
- Conversion of the validation section into a rule mapping

Configuration is read by the CLI and handed to the engine explicitly; the
engine never consults it on its own.

Example:
    >>> config = ConfigManager()
    >>> config.load_file("pathglob.yaml")
    >>> config.get("pathglob.logging.level", default="WARNING")
    >>> rules = config.get_rules()
"""

import copy
import os
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from pathglob.core.constants import ConfigKey, ErrorCode
from pathglob.core.validators import DEFAULT_RULES, RulePredicate, ValidationError, ValidationRule

ENV_PREFIX = "PATHGLOB_"
# Nested keys are separated by a double underscore: PATHGLOB_LOGGING__LEVEL
ENV_NESTING = "__"


class ConfigSource(Enum):
    """Configuration source precedence levels."""

    COMPILED_DEFAULTS = 1  # Lowest precedence
    USER_CONFIG = 2
    ENVIRONMENT = 3
    CLI_ARGS = 4
    RUNTIME = 5  # Highest precedence


class ConfigError(Exception):
    """Configuration error."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


def build_rules(validation: Optional[Mapping[str, Any]]) -> Dict[str, RulePredicate]:
    """Build a validation rule mapping from a ``validation`` config section.

    Starts from the default rules, drops the ones listed in
    ``disabled_rules`` and adds each ``extra_rules`` entry as a regex rule.
    A section with ``enabled: false`` yields an empty mapping.

    Args:
        validation: The ``pathglob.validation`` section (may be None)

    Returns:
        Rule mapping suitable for validate_pattern

    Raises:
        ConfigError: If a disabled rule is unknown or an extra rule is malformed
    """
    validation = validation or {}

    if not validation.get(ConfigKey.VALIDATION_ENABLED, True):
        return {}

    rules: Dict[str, RulePredicate] = dict(DEFAULT_RULES)

    for name in validation.get(ConfigKey.DISABLED_RULES) or []:
        if name not in rules:
            raise ConfigError(f"Unknown validation rule: {name}")
        del rules[name]

    for i, entry in enumerate(validation.get(ConfigKey.EXTRA_RULES) or []):
        if not isinstance(entry, dict):
            raise ConfigError(f"Extra rule at index {i} must be a dictionary")

        name = entry.get(ConfigKey.RULE_NAME)
        regex = entry.get(ConfigKey.RULE_REGEX)
        if not name or not regex:
            raise ConfigError(f"Extra rule at index {i} must have 'name' and 'regex' fields")

        message = entry.get(ConfigKey.RULE_MESSAGE) or f"matches {regex!r}"
        try:
            rules[name] = ValidationRule.from_regex(message, regex)
        except ValidationError as e:
            raise ConfigError(f"Invalid extra rule {name!r}: {e}")

    return rules


class ConfigManager:
    """Thread-safe hierarchical configuration manager.

    Manages configuration from multiple sources with precedence:
    1. Compiled defaults (lowest)
    2. User config file (YAML)
    3. Environment variables (PATHGLOB_*)
    4. CLI arguments
    5. Runtime updates (highest)
    """

    DEFAULT_CONFIG = {
        "pathglob": {
            ConfigKey.ROOT: None,
            ConfigKey.PATTERNS: [],
            ConfigKey.VALIDATION: {
                ConfigKey.VALIDATION_ENABLED: True,
                ConfigKey.DISABLED_RULES: [],
                ConfigKey.EXTRA_RULES: [],
            },
            ConfigKey.LOGGING: {
                "level": "WARNING",
                "file": None,
            },
        }
    }

    def __init__(self, config_file: Optional[str] = None, load_environment: bool = True):
        """Initialize configuration manager.

        Args:
            config_file: Optional config file to load
            load_environment: Whether to read PATHGLOB_* variables
        """
        self._config: Dict[ConfigSource, Dict[str, Any]] = {}
        self._lock = threading.RLock()

        self._config[ConfigSource.COMPILED_DEFAULTS] = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file:
            self.load_file(config_file)

        if load_environment:
            self._load_environment()

    def load_file(self, file_path: str, source: ConfigSource = ConfigSource.USER_CONFIG) -> None:
        """Load configuration from YAML file.

        Args:
            file_path: Path to YAML config file
            source: Configuration source level

        Raises:
            ConfigError: If file cannot be loaded or parsed
        """
        path = Path(file_path).expanduser().resolve()

        if not path.exists():
            raise ConfigError(f"Config file not found: {file_path}", ErrorCode.NOT_FOUND)

        try:
            with open(path, "r") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"YAML parse error in {file_path}: {e}", ErrorCode.INVALID_INPUT)
        except OSError as e:
            raise ConfigError(f"Error loading config {file_path}: {e}", ErrorCode.PERMISSION_DENIED)

        if not isinstance(config_data, dict):
            raise ConfigError(f"Invalid config format in {file_path}", ErrorCode.INVALID_INPUT)

        with self._lock:
            self._config[source] = config_data

    def load_dict(
        self, config_data: Dict[str, Any], source: ConfigSource = ConfigSource.RUNTIME
    ) -> None:
        """Load configuration from dictionary.

        Args:
            config_data: Configuration dictionary
            source: Configuration source level
        """
        with self._lock:
            self._config[source] = copy.deepcopy(config_data)

    def _load_environment(self) -> None:
        """Load configuration from environment variables.

        Environment variables in format: PATHGLOB_SECTION__KEY=value
        Example: PATHGLOB_VALIDATION__ENABLED=false
        """
        env_config: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue

            parts = key[len(ENV_PREFIX) :].lower().split(ENV_NESTING)

            current = env_config
            for part in parts[:-1]:
                current = current.setdefault(part, {})

            current[parts[-1]] = self._parse_env_value(value)

        if env_config:
            with self._lock:
                self._config[ConfigSource.ENVIRONMENT] = {"pathglob": env_config}

    def _parse_env_value(self, value: str) -> Any:
        """Parse environment variable value.

        Args:
            value: String value from environment

        Returns:
            Parsed value (bool, int, list of str, or str)
        """
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        # Comma-separated lists, e.g. PATHGLOB_PATTERNS=./src/**/*.py,!./src/tmp/*
        if "," in value:
            return [item.strip() for item in value.split(",") if item.strip()]

        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key.

        Args:
            key: Dot-separated key path (e.g., "pathglob.logging.level")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        with self._lock:
            for source in sorted(self._config.keys(), key=lambda s: s.value, reverse=True):
                value = self._get_nested(self._config[source], key)
                if value is not None:
                    return value

            return default

    def _get_nested(self, config: Dict[str, Any], key: str) -> Optional[Any]:
        """Get value from nested dictionary using dot notation."""
        current: Any = config

        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return None
            current = current[part]

        return current

    def set(self, key: str, value: Any, source: ConfigSource = ConfigSource.RUNTIME) -> None:
        """Set configuration value.

        Args:
            key: Dot-separated key path
            value: Value to set
            source: Configuration source level
        """
        with self._lock:
            current = self._config.setdefault(source, {})

            parts = key.split(".")
            for part in parts[:-1]:
                current = current.setdefault(part, {})

            current[parts[-1]] = value

    def get_all(self) -> Dict[str, Any]:
        """Get merged configuration from all sources.

        Returns:
            Merged configuration dictionary
        """
        with self._lock:
            merged: Dict[str, Any] = {}

            for source in sorted(self._config.keys(), key=lambda s: s.value):
                merged = self._deep_merge(merged, self._config[source])

            return merged

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries; values in ``override`` win."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get_rules(self) -> Dict[str, RulePredicate]:
        """Build the validation rule mapping from the merged configuration.

        Raises:
            ConfigError: If the validation section is malformed
        """
        section = self.get_all().get("pathglob", {}).get(ConfigKey.VALIDATION)
        return build_rules(section)

    def clear(self, source: Optional[ConfigSource] = None) -> None:
        """Clear configuration.

        Args:
            source: Specific source to clear, or None for all except defaults
        """
        with self._lock:
            if source:
                if source in self._config and source != ConfigSource.COMPILED_DEFAULTS:
                    del self._config[source]
            else:
                for s in [s for s in self._config if s != ConfigSource.COMPILED_DEFAULTS]:
                    del self._config[s]
