# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration file module."""

from pathlib import Path

import pytest

from schemacast.codec import InputFormat
from schemacast.config import CastConfig, ConfigError, load_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / ".schemacast.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_full_config(tmp_path: Path) -> None:
    """All known fields are parsed into the CastConfig."""
    content = """\
root-type: Rule
indent: 4
input-format: yaml
descriptor-table: /abs/table.yaml
"""
    config = load_config(_write_config(tmp_path, content))

    assert config == CastConfig(
        root_type="Rule",
        indent=4,
        input_format=InputFormat.YAML,
        descriptor_table=Path("/abs/table.yaml"),
    )


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    """An empty file yields the default configuration."""
    config = load_config(_write_config(tmp_path, ""))
    assert config == CastConfig()
    assert config.indent == 2
    assert config.input_format is InputFormat.JSON


def test_null_indent_renders_compactly(tmp_path: Path) -> None:
    """indent: null is kept as None."""
    config = load_config(_write_config(tmp_path, "indent: null\n"))
    assert config.indent is None


def test_relative_table_path_resolved_against_config_directory(tmp_path: Path) -> None:
    """A relative descriptor-table path is interpreted relative to the config file."""
    config = load_config(_write_config(tmp_path, "descriptor-table: tables/people.yaml\n"))
    assert config.descriptor_table == tmp_path / "tables" / "people.yaml"


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing config file raises ConfigError."""
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / ".schemacast.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    """Malformed YAML raises ConfigError."""
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "root-type: [unclosed\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    """A config that is not a mapping raises ConfigError."""
    with pytest.raises(ConfigError, match="config must be a YAML mapping"):
        load_config(_write_config(tmp_path, "- root-type\n"))


def test_unknown_field_raises(tmp_path: Path) -> None:
    """Unknown keys are listed in the error."""
    with pytest.raises(ConfigError, match="unknown field\\(s\\): root_type"):
        load_config(_write_config(tmp_path, "root_type: Rule\n"))


@pytest.mark.parametrize("indent", ["-1", "two", "true"])
def test_invalid_indent_raises(tmp_path: Path, indent: str) -> None:
    """Negative, textual and boolean indents are rejected."""
    with pytest.raises(ConfigError, match="'indent' must be a non-negative integer or null"):
        load_config(_write_config(tmp_path, f"indent: {indent}\n"))


def test_unknown_input_format_raises(tmp_path: Path) -> None:
    """Only json and yaml are accepted as input formats."""
    with pytest.raises(ConfigError, match="unknown input-format 'toml' \\(expected one of: json, yaml\\)"):
        load_config(_write_config(tmp_path, "input-format: toml\n"))


def test_non_string_root_type_raises(tmp_path: Path) -> None:
    """root-type must be a string."""
    with pytest.raises(ConfigError, match="'root-type' must be a string"):
        load_config(_write_config(tmp_path, "root-type: 42\n"))
