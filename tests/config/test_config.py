# Copyright 2026 Oxy Python Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the oxypy configuration module."""

from pathlib import Path

import pytest

from oxypy.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    OxyConfig,
    find_config,
    load_config,
    save_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_config_file_name_constant() -> None:
    """CONFIG_FILE_NAME has the expected value."""
    assert CONFIG_FILE_NAME == ".oxypy.yaml"


def test_defaults() -> None:
    """A default config prints text and uses color."""
    config = OxyConfig()
    assert config.output_format == "text"
    assert config.color is True


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    """An empty YAML file is treated as a config with all defaults."""
    config = load_config(_write_config(tmp_path, ""))
    assert config == OxyConfig()


def test_full_config(tmp_path: Path) -> None:
    """All supported keys are read with their dash-case names."""
    content = """\
output-format: json
color: false
"""
    config = load_config(_write_config(tmp_path, content))
    assert config.output_format == "json"
    assert config.color is False


def test_find_config_without_file_returns_defaults(tmp_path: Path) -> None:
    """find_config falls back to defaults when no config file exists."""
    assert find_config(tmp_path) == OxyConfig()


def test_find_config_reads_file(tmp_path: Path) -> None:
    """find_config loads the config file from the directory."""
    _write_config(tmp_path, "output-format: json\n")
    assert find_config(tmp_path).output_format == "json"


def test_save_and_load(tmp_path: Path) -> None:
    """A saved config loads back to an equal model."""
    path = tmp_path / CONFIG_FILE_NAME
    config = OxyConfig(output_format="json", color=False)
    save_config(config, path)
    assert "output-format: json" in path.read_text(encoding="utf-8")
    assert load_config(path) == config


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing config file raises ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    """Malformed YAML raises ConfigError."""
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "output-format: [unclosed\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    """A YAML document that is not a mapping raises ConfigError."""
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write_config(tmp_path, "- text\n- json\n"))


def test_unknown_output_format_raises(tmp_path: Path) -> None:
    """Only text and json are accepted output formats."""
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(_write_config(tmp_path, "output-format: xml\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    """Unknown keys are rejected."""
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(_write_config(tmp_path, "colour: true\n"))


def test_save_to_missing_directory_raises(tmp_path: Path) -> None:
    """Writing into a missing directory raises ConfigError."""
    with pytest.raises(ConfigError, match="Cannot write"):
        save_config(OxyConfig(), tmp_path / "missing" / CONFIG_FILE_NAME)


def test_non_utf8_file_raises(tmp_path: Path) -> None:
    """A config file that is not valid UTF-8 raises ConfigError."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_bytes(b"color: \xff\n")
    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(config_file)
