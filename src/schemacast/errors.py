# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error kinds raised by the Schemacast engine."""

from __future__ import annotations

import json
from typing import Any

from schemacast.missing import MISSING

# ###############
# Public Interface
# ###############

# A path segment is a map key (always text) or a list index (always an int).
PathSegment = str | int


class SchemacastError(Exception):
    """Base class for all Schemacast errors."""


class MalformedInput(SchemacastError):
    """Raised when raw text is not well-formed structured data."""


class RenderError(SchemacastError):
    """Raised when a converted value cannot be rendered as JSON text."""


class UnknownTypeReference(SchemacastError):
    """Raised when a type name is not present in the descriptor table."""

    def __init__(self, name: str, referenced_from: str | None = None) -> None:
        self.name = name
        self.referenced_from = referenced_from
        location = f" (referenced from '{referenced_from}')" if referenced_from else ""
        super().__init__(f"Unknown type reference '{name}'{location}")


class DescriptorTableError(SchemacastError):
    """Raised when a descriptor table document cannot be loaded or is invalid."""


class ConversionError(SchemacastError):
    """Raised when a value does not conform to its descriptor.

    Attributes:
        expected: Human-readable description of the expected shape.
        actual: The offending value (or the missing marker).
        key: Key of the field holding the value, or None at the top level.
        parent: Name of the type declaring that field, if any.
        path: Keys and list indices leading from the top-level value to ``actual``.
    """

    def __init__(
        self,
        expected: str,
        actual: Any,
        key: Any = None,
        parent: str = "",
        path: tuple[PathSegment, ...] = (),
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.key = key
        self.parent = parent
        self.path = path
        super().__init__(self._format())

    @property
    def path_text(self) -> str:
        """Render the field path as ``metadata.properties.name`` / ``required[2]``."""
        return format_path(self.path)

    def _format(self) -> str:
        key_text = f' for key "{self.key}"' if self.key is not None else ""
        parent_text = f" on {self.parent}" if self.parent else ""
        path_text = f" at {self.path_text}" if self.path else ""
        return (
            f"Invalid value{key_text}{parent_text}{path_text}. "
            f"Expected {self.expected} but got {render_value(self.actual)}"
        )


def format_path(path: tuple[PathSegment, ...]) -> str:
    text = ""
    for segment in path:
        if isinstance(segment, int):
            text += f"[{segment}]"
        elif text:
            text += f".{segment}"
        else:
            text = segment
    return text


def render_value(value: Any) -> str:
    """Render an offending value for an error message."""
    if value is MISSING:
        return "missing"
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)
