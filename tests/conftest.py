"""Shared pytest fixtures for pathglob tests."""
import os
from pathlib import Path
from typing import Any, Dict

import pytest
import yaml

from pathglob.infrastructure import logger as logger_module


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a project directory with a known file layout."""
    root = tmp_path / "project"
    root.mkdir()

    (root / "README.md").write_text("# Project")
    (root / ".gitignore").write_text("build/")
    (root / "root.js").write_text("// root")

    (root / "src").mkdir()
    (root / "src" / "shallow.js").write_text("// shallow")
    (root / "src" / "deep").mkdir()
    (root / "src" / "deep" / "path").mkdir()
    (root / "src" / "deep" / "path" / "filename.js").write_text("// deep")
    (root / "src" / "deep" / "notes.txt").write_text("notes")
    (root / "src" / "vendor").mkdir()
    (root / "src" / "vendor" / "lib.js").write_text("// vendored")

    (root / "lib").mkdir()
    (root / "lib" / "deep").mkdir()
    (root / "lib" / "deep" / "src").mkdir()
    (root / "lib" / "deep" / "src" / "filename.js").write_text("// lib")

    (root / "tests").mkdir()
    (root / "tests" / "test.js").write_text("// test")

    return root


@pytest.fixture
def sample_config(source_tree: Path) -> Dict[str, Any]:
    """Provide a sample pathglob configuration."""
    return {
        "pathglob": {
            "root": str(source_tree),
            "patterns": [
                "./src/**/*.js",
                "!./src/vendor/**",
            ],
            "validation": {
                "enabled": True,
                "disabled_rules": ["no_character_classes"],
                "extra_rules": [
                    {
                        "name": "no_tmp",
                        "message": "temporary files are never selected",
                        "regex": r"\.tmp$",
                    }
                ],
            },
            "logging": {
                "level": "WARNING",
                "file": None,
            },
        }
    }


@pytest.fixture
def config_file(tmp_path: Path, sample_config: Dict[str, Any]) -> Path:
    """Create a configuration file."""
    config_path = tmp_path / "pathglob.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config, f)
    return config_path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PATHGLOB_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("PATHGLOB_"):
            monkeypatch.delenv(key)
    yield


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the global logger between tests."""
    yield
    logger_module._global_logger = None
