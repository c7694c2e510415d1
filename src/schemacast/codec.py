# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Decoding and encoding of structured text against a descriptor table.

Text is parsed into a generic tree (mappings, lists and scalars) before any
descriptor is consulted, so malformed text is reported as
:class:`~schemacast.errors.MalformedInput` and never as a conversion error.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from enum import Enum
from typing import Any

import yaml

from schemacast.engine.field_map import Direction, FieldMapCache
from schemacast.engine.interpreter import Interpreter
from schemacast.errors import MalformedInput, RenderError
from schemacast.model.descriptors import ref
from schemacast.model.table import DescriptorTable

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class InputFormat(Enum):
    """Structured text notations accepted as input."""

    JSON = "json"
    YAML = "yaml"


def parse_text(text: str, input_format: InputFormat = InputFormat.JSON) -> Any:
    """Parse *text* into a generic tree.

    Raises:
        MalformedInput: If the text is not well-formed in *input_format*.
    """
    if input_format is InputFormat.YAML:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise MalformedInput(f"Invalid YAML input: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInput(f"Invalid JSON input: {exc}") from exc


def render_text(tree: Any, indent: int | None = 2) -> str:
    """Render a generic tree as JSON, keeping key order as given.

    Dates and datetimes, which YAML input and date fields produce, are
    rendered as ISO-8601 text.

    Raises:
        RenderError: If the tree holds a value JSON has no notation for.
    """
    try:
        return json.dumps(tree, indent=indent, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError) as exc:
        raise RenderError(f"Cannot render value as JSON: {exc}") from exc


class Codec:
    """Converts between text, generic trees and typed values for one descriptor table."""

    def __init__(self, table: DescriptorTable, *, warm: bool = False) -> None:
        self.table = table
        cache = FieldMapCache()
        if warm:
            cache.warm(table)
        self.interpreter = Interpreter(table, cache)

    def decode(self, tree: Any, type_name: str) -> Any:
        """Convert a generic tree into a typed value of *type_name*.

        Raises:
            UnknownTypeReference: If *type_name* is not in the table.
            ConversionError: If the tree does not conform to *type_name*.
        """
        self.table.resolve(type_name)
        logger.debug("Decoding value as %s", type_name)
        return self.interpreter.transform(tree, ref(type_name), Direction.DECODE)

    def encode(self, value: Any, type_name: str) -> Any:
        """Convert a typed value of *type_name* back into a generic tree."""
        self.table.resolve(type_name)
        logger.debug("Encoding value as %s", type_name)
        return self.interpreter.transform(value, ref(type_name), Direction.ENCODE)

    def decode_text(self, text: str, type_name: str, input_format: InputFormat = InputFormat.JSON) -> Any:
        """Parse *text* and decode it as *type_name*."""
        return self.decode(parse_text(text, input_format), type_name)

    def encode_text(self, value: Any, type_name: str, indent: int | None = 2) -> str:
        """Encode *value* as *type_name* and render it as JSON text."""
        return render_text(self.encode(value, type_name), indent=indent)


# ################
# Implementation
# ################


def _json_default(value: Any) -> Any:
    # datetime is a subclass of date.
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
