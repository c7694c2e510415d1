# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the Schemacast configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from schemacast.codec import InputFormat

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".schemacast.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class CastConfig:
    """The parsed Schemacast configuration.

    Attributes:
        root_type: Type name used when a command is not given ``--type``.
        indent: Indentation of encoded JSON output; ``None`` renders compactly.
        input_format: Notation of input files.
        descriptor_table: Path of an external descriptor table document, if any.
    """

    root_type: str | None = None
    indent: int | None = 2
    input_format: InputFormat = InputFormat.JSON
    descriptor_table: Path | None = None


def load_config(path: Path) -> CastConfig:
    """Load and parse a Schemacast configuration file.

    Relative ``descriptor-table`` paths are resolved against the directory
    containing the configuration file.

    Args:
        path: Path to the `.schemacast.yaml` file.

    Returns:
        A CastConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    config = _parse_config(text, source_label=str(path))
    if config.descriptor_table is not None and not config.descriptor_table.is_absolute():
        config.descriptor_table = path.parent / config.descriptor_table
    return config


# ################
# Implementation
# ################


def _parse_config(text: str, source_label: str = "<string>") -> CastConfig:
    """Parse config YAML text into a CastConfig.

    An empty document yields the default configuration.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return CastConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = CastConfig()
    if "root-type" in data:
        config.root_type = _require_string(data, "root-type", source_label)
    if "indent" in data:
        indent = data["indent"]
        if indent is not None and (not isinstance(indent, int) or isinstance(indent, bool) or indent < 0):
            raise ConfigError(f"{source_label}: 'indent' must be a non-negative integer or null")
        config.indent = indent
    if "input-format" in data:
        raw_format = _require_string(data, "input-format", source_label)
        try:
            config.input_format = InputFormat(raw_format)
        except ValueError:
            allowed = ", ".join(f.value for f in InputFormat)
            raise ConfigError(
                f"{source_label}: unknown input-format '{raw_format}' (expected one of: {allowed})"
            ) from None
    if "descriptor-table" in data:
        config.descriptor_table = Path(_require_string(data, "descriptor-table", source_label))
    return config


_KNOWN_KEYS = frozenset({"root-type", "indent", "input-format", "descriptor-table"})


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising ConfigError if it has another type."""
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value
