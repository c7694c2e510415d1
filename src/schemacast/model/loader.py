# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading descriptor tables from YAML or JSON documents.

A table document has a single ``types`` mapping from type name to descriptor::

    types:
      Person:
        kind: object
        properties:
          - serialized_name: firstName
            type: {kind: primitive, primitive: string}
          - serialized_name: nickname
            type:
              kind: union
              members: [{kind: absent}, {kind: primitive, primitive: string}]
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from schemacast.errors import DescriptorTableError
from schemacast.model.descriptors import Descriptor
from schemacast.model.table import DescriptorTable

# ###############
# Public Interface
# ###############


class TableDocument(BaseModel):
    """Top-level model of a descriptor table document."""

    model_config = ConfigDict(extra="forbid")

    types: dict[str, Descriptor]


def load_descriptor_table(path: Path) -> DescriptorTable:
    """Load and validate a descriptor table from disk.

    Args:
        path: Path to a YAML (or JSON) table document.

    Returns:
        A DescriptorTable with every reference resolved.

    Raises:
        DescriptorTableError: If the file cannot be read, is not valid YAML,
            or does not conform to the table document schema.
        UnknownTypeReference: If a descriptor references an undeclared type.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DescriptorTableError(f"Cannot read descriptor table '{path}': {exc}") from exc
    return parse_descriptor_table(text, source_label=str(path))


def parse_descriptor_table(text: str, source_label: str = "<string>") -> DescriptorTable:
    """Parse descriptor table document text into a DescriptorTable."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DescriptorTableError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise DescriptorTableError(f"{source_label}: descriptor table must be a mapping")

    try:
        document = TableDocument.model_validate(data)
    except ValidationError as exc:
        raise DescriptorTableError(f"Invalid descriptor table {source_label}: {exc}") from exc
    return DescriptorTable(document.types)
