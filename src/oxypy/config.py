# Copyright 2026 Oxy Python Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration model and YAML loader for the oxypy command-line tool."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".oxypy.yaml"

OutputFormat = Literal["text", "json"]


class ConfigError(Exception):
    """Raised when a configuration file cannot be read, written, or is invalid."""


class OxyConfig(BaseModel):
    """Settings for the oxypy command-line tool.

    Attributes:
        output_format: How token listings are printed ("text" or "json").
        color: Whether diagnostics are colored.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    output_format: OutputFormat = Field(alias="output-format", default="text")
    color: bool = True


def load_config(path: Path) -> OxyConfig:
    """Load and validate a configuration file.

    An empty file is treated as a configuration with all defaults.

    Args:
        path: Path to the .oxypy.yaml file.

    Returns:
        A validated OxyConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return OxyConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> OxyConfig:
    """Load the config file in *directory*, or return defaults if there is none."""
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        return OxyConfig()
    return load_config(path)


def save_config(config: OxyConfig, path: Path) -> None:
    """Write *config* to *path* as YAML.

    Raises:
        ConfigError: If the file cannot be written.
    """
    data = config.model_dump(by_alias=True)
    try:
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=True), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot write config file '{path}': {exc}") from exc
