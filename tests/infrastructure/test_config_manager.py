#!/usr/bin/env python3
"""Tests for the ConfigManager module."""

import pytest
import yaml

from pathglob.core.constants import ErrorCode
from pathglob.core.validators import DEFAULT_RULES, validate_pattern
from pathglob.infrastructure.config_manager import (
    ConfigError,
    ConfigManager,
    ConfigSource,
    build_rules,
)


class TestConfigSource:
    """Tests for ConfigSource enum."""

    def test_precedence_order(self):
        """Sources are ordered from lowest to highest precedence."""
        sources = list(ConfigSource)
        assert sources[0] == ConfigSource.COMPILED_DEFAULTS
        assert sources[-1] == ConfigSource.RUNTIME
        assert [s.value for s in sources] == sorted(s.value for s in sources)


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_defaults(self):
        """Compiled defaults are available without any file."""
        config = ConfigManager()
        assert config.get("pathglob.logging.level") == "WARNING"
        assert config.get("pathglob.validation.enabled") is True
        assert config.get("pathglob.patterns") == []
        assert config.get("pathglob.missing", default="x") == "x"

    def test_load_file(self, config_file, source_tree):
        """YAML files override defaults."""
        config = ConfigManager(config_file=str(config_file))
        assert config.get("pathglob.root") == str(source_tree)
        assert config.get("pathglob.patterns") == ["./src/**/*.js", "!./src/vendor/**"]
        assert config.get("pathglob.logging.level") == "WARNING"

    def test_missing_file(self, tmp_path):
        """Missing files raise NOT_FOUND."""
        with pytest.raises(ConfigError) as exc_info:
            ConfigManager(config_file=str(tmp_path / "missing.yaml"))
        assert exc_info.value.error_code == ErrorCode.NOT_FOUND

    def test_invalid_yaml(self, tmp_path):
        """Unparseable YAML raises INVALID_INPUT."""
        path = tmp_path / "bad.yaml"
        path.write_text("pathglob: [unclosed")
        with pytest.raises(ConfigError) as exc_info:
            ConfigManager(config_file=str(path))
        assert exc_info.value.error_code == ErrorCode.INVALID_INPUT

    def test_non_mapping_yaml(self, tmp_path):
        """A YAML list is not a valid configuration."""
        path = tmp_path / "list.yaml"
        path.write_text(yaml.dump(["a", "b"]))
        with pytest.raises(ConfigError):
            ConfigManager(config_file=str(path))

    def test_environment(self, monkeypatch):
        """PATHGLOB_* variables override files and defaults."""
        monkeypatch.setenv("PATHGLOB_LOGGING__LEVEL", "DEBUG")
        monkeypatch.setenv("PATHGLOB_VALIDATION__ENABLED", "false")
        monkeypatch.setenv("PATHGLOB_PATTERNS", "./src/*.py, !./src/skip.py")
        config = ConfigManager()
        assert config.get("pathglob.logging.level") == "DEBUG"
        assert config.get("pathglob.validation.enabled") is False
        assert config.get("pathglob.patterns") == ["./src/*.py", "!./src/skip.py"]

    def test_environment_can_be_ignored(self, monkeypatch):
        """load_environment=False skips PATHGLOB_* variables."""
        monkeypatch.setenv("PATHGLOB_LOGGING__LEVEL", "DEBUG")
        config = ConfigManager(load_environment=False)
        assert config.get("pathglob.logging.level") == "WARNING"

    def test_parse_env_value(self):
        """Environment strings are converted to useful types."""
        config = ConfigManager(load_environment=False)
        assert config._parse_env_value("yes") is True
        assert config._parse_env_value("No") is False
        assert config._parse_env_value("42") == 42
        assert config._parse_env_value("a,b") == ["a", "b"]
        assert config._parse_env_value("./src/*.js") == "./src/*.js"

    def test_set_and_precedence(self, config_file):
        """Runtime values beat CLI values, which beat the file."""
        config = ConfigManager(config_file=str(config_file))
        config.set("pathglob.logging.level", "INFO", ConfigSource.CLI_ARGS)
        assert config.get("pathglob.logging.level") == "INFO"
        config.set("pathglob.logging.level", "ERROR")
        assert config.get("pathglob.logging.level") == "ERROR"

    def test_get_all_deep_merges(self, config_file):
        """Nested sections are merged key by key."""
        config = ConfigManager(config_file=str(config_file))
        config.set("pathglob.logging.file", "/tmp/pathglob.log", ConfigSource.CLI_ARGS)
        merged = config.get_all()["pathglob"]
        assert merged["logging"] == {"level": "WARNING", "file": "/tmp/pathglob.log"}
        assert merged["validation"]["enabled"] is True

    def test_load_dict_copies(self):
        """load_dict keeps its own copy of the data."""
        data = {"pathglob": {"patterns": ["./a"]}}
        config = ConfigManager(load_environment=False)
        config.load_dict(data)
        data["pathglob"]["patterns"].append("./b")
        assert config.get("pathglob.patterns") == ["./a"]

    def test_clear(self, config_file):
        """clear() drops everything except the defaults."""
        config = ConfigManager(config_file=str(config_file))
        config.set("pathglob.root", "/elsewhere")
        config.clear(ConfigSource.RUNTIME)
        assert config.get("pathglob.root") != "/elsewhere"
        config.clear()
        assert config.get("pathglob.root") is None
        assert config.get("pathglob.logging.level") == "WARNING"

    def test_get_rules(self, config_file):
        """The validation section becomes a rule mapping."""
        rules = ConfigManager(config_file=str(config_file)).get_rules()
        assert "no_character_classes" not in rules
        assert "no_tmp" in rules
        assert validate_pattern("./src/[ab].js", rules) == []
        assert validate_pattern("./build/x.tmp", rules) == ["no_tmp"]


class TestBuildRules:
    """Tests for build_rules."""

    def test_defaults(self):
        """No section means the default rules."""
        assert build_rules(None) == DEFAULT_RULES

    def test_disabled(self):
        """enabled: false turns validation off."""
        assert build_rules({"enabled": False}) == {}

    def test_unknown_disabled_rule(self):
        """Disabling an unknown rule is an error."""
        with pytest.raises(ConfigError) as exc_info:
            build_rules({"disabled_rules": ["no_such_rule"]})
        assert "no_such_rule" in str(exc_info.value)

    def test_extra_rule_requires_fields(self):
        """Extra rules need a name and a regex."""
        with pytest.raises(ConfigError):
            build_rules({"extra_rules": [{"name": "x"}]})
        with pytest.raises(ConfigError):
            build_rules({"extra_rules": ["not a dict"]})

    def test_extra_rule_bad_regex(self):
        """A regex that does not compile is reported as a config error."""
        with pytest.raises(ConfigError) as exc_info:
            build_rules({"extra_rules": [{"name": "broken", "regex": "("}]})
        assert "broken" in str(exc_info.value)

    def test_extra_rule_default_message(self):
        """Extra rules without a message describe their regex."""
        rules = build_rules({"extra_rules": [{"name": "no_tmp", "regex": "tmp"}]})
        assert rules["no_tmp"].message == "matches 'tmp'"
