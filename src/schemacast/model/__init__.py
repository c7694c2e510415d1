# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors and descriptor tables."""

from schemacast.model.descriptors import (
    AbsentDescriptor,
    AnyDescriptor,
    ArrayDescriptor,
    DateDescriptor,
    Descriptor,
    LiteralSetDescriptor,
    NeverDescriptor,
    NullDescriptor,
    ObjectDescriptor,
    PrimitiveDescriptor,
    PrimitiveKind,
    PropertyDescriptor,
    ReferenceDescriptor,
    UnionDescriptor,
    array_of,
    boolean,
    literal_set,
    map_of,
    number,
    obj,
    optional,
    prop,
    ref,
    string,
    union,
)
from schemacast.model.loader import load_descriptor_table, parse_descriptor_table
from schemacast.model.table import DescriptorTable

__all__ = [
    # Descriptors
    "PrimitiveKind",
    "PrimitiveDescriptor",
    "LiteralSetDescriptor",
    "ArrayDescriptor",
    "UnionDescriptor",
    "PropertyDescriptor",
    "ObjectDescriptor",
    "ReferenceDescriptor",
    "DateDescriptor",
    "AnyDescriptor",
    "NullDescriptor",
    "AbsentDescriptor",
    "NeverDescriptor",
    "Descriptor",
    # Builders
    "string",
    "number",
    "boolean",
    "literal_set",
    "array_of",
    "union",
    "optional",
    "ref",
    "prop",
    "obj",
    "map_of",
    # Tables
    "DescriptorTable",
    "load_descriptor_table",
    "parse_descriptor_table",
]
