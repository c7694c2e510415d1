# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Memoized property-name translation tables for object descriptors.

Each object descriptor maps its input keys to output keys differently per
direction: decoding looks fields up by serialized name and writes them under
the typed name, encoding does the reverse. The translation table is built
once per (descriptor, direction) pair and shared afterwards.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from schemacast.model.descriptors import (
    ArrayDescriptor,
    Descriptor,
    ObjectDescriptor,
    UnionDescriptor,
)
from schemacast.model.table import DescriptorTable

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class Direction(Enum):
    """Conversion direction."""

    DECODE = "decode"
    """Serialized tree to typed value."""

    ENCODE = "encode"
    """Typed value to serialized tree."""


@dataclass(frozen=True)
class FieldTarget:
    """Where a looked-up input field is written, and how it is converted."""

    name: str
    type: Descriptor


FieldMap = Mapping[str, FieldTarget]


class FieldMapCache:
    """Thread-safe memo of field maps keyed by descriptor identity and direction.

    Every descriptor seen is kept alive for the lifetime of the cache. Tables
    are fixed, so a cache used with table descriptors stays bounded; callers
    converting against many freshly built inline descriptors should use a
    short-lived cache or call :meth:`clear`.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        # The descriptor is stored next to its map so its id() cannot be reused.
        self._maps: dict[tuple[int, Direction], tuple[ObjectDescriptor, FieldMap]] = {}

    def field_map(self, descriptor: ObjectDescriptor, direction: Direction) -> FieldMap:
        """Return the input-name → target mapping for *descriptor* in *direction*."""
        key = (id(descriptor), direction)
        entry = self._maps.get(key)
        if entry is not None:
            return entry[1]
        with self._lock:
            entry = self._maps.get(key)
            if entry is None:
                entry = (descriptor, _build_field_map(descriptor, direction))
                self._maps[key] = entry
                logger.debug("Built %s field map with %d entries", direction.value, len(entry[1]))
        return entry[1]

    def warm(self, table: DescriptorTable) -> None:
        """Precompute field maps for every object descriptor reachable from *table*."""
        for descriptor in table.values():
            for object_descriptor in _object_descriptors(descriptor):
                for direction in Direction:
                    self.field_map(object_descriptor, direction)

    def clear(self) -> None:
        """Drop every memoized field map."""
        with self._lock:
            self._maps.clear()

    def __len__(self) -> int:
        return len(self._maps)


# ################
# Implementation
# ################


def _build_field_map(descriptor: ObjectDescriptor, direction: Direction) -> FieldMap:
    mapping: dict[str, FieldTarget] = {}
    for prop in descriptor.properties:
        if direction is Direction.DECODE:
            mapping[prop.serialized_name] = FieldTarget(name=prop.typed_name, type=prop.type)
        else:
            mapping[prop.typed_name] = FieldTarget(name=prop.serialized_name, type=prop.type)
    return MappingProxyType(mapping)


def _object_descriptors(descriptor: Descriptor) -> Iterator[ObjectDescriptor]:
    """Yield every object descriptor nested in *descriptor*, without following references."""
    if isinstance(descriptor, ObjectDescriptor):
        yield descriptor
        for prop in descriptor.properties:
            yield from _object_descriptors(prop.type)
        yield from _object_descriptors(descriptor.additional)
    elif isinstance(descriptor, ArrayDescriptor):
        yield from _object_descriptors(descriptor.items)
    elif isinstance(descriptor, UnionDescriptor):
        for member in descriptor.members:
            yield from _object_descriptors(member)
