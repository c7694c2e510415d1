# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptor representations for the Schemacast conversion engine.

A descriptor is inert data describing the expected shape of a value. The
variants below are discriminated by their ``kind`` field so that descriptor
tables can be loaded from YAML or JSON documents as well as built in Python
with the builder functions at the end of this module.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveKind(Enum):
    """Scalar kinds a primitive descriptor can match."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PrimitiveDescriptor(_Descriptor):
    """Matches a scalar of the declared kind."""

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveKind


class LiteralSetDescriptor(_Descriptor):
    """Matches exactly one of a fixed, ordered set of string literals."""

    kind: Literal["literal-set"] = "literal-set"
    values: tuple[str, ...]


class ArrayDescriptor(_Descriptor):
    """Matches a sequence whose every element conforms to ``items``."""

    kind: Literal["array"] = "array"
    items: Descriptor


class UnionDescriptor(_Descriptor):
    """Matches the first of ``members`` that accepts the value."""

    kind: Literal["union"] = "union"
    members: tuple[Descriptor, ...]


class PropertyDescriptor(_Descriptor):
    """One declared field of an object: its serialized name, typed name and type."""

    serialized_name: str
    typed_name: str
    type: Descriptor
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_typed_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and "typed_name" not in data and "serialized_name" in data:
            return {**data, "typed_name": to_typed_name(data["serialized_name"])}
        return data


class ObjectDescriptor(_Descriptor):
    """Matches a mapping with declared properties.

    Keys not declared in ``properties`` are converted against ``additional``;
    use :class:`NeverDescriptor` to forbid them.
    """

    kind: Literal["object"] = "object"
    properties: tuple[PropertyDescriptor, ...] = ()
    additional: Descriptor = _Field(default_factory=lambda: NeverDescriptor())

    @model_validator(mode="after")
    def _check_unique_names(self) -> ObjectDescriptor:
        for attribute in ("serialized_name", "typed_name"):
            seen: set[str] = set()
            for prop in self.properties:
                name = getattr(prop, attribute)
                if name in seen:
                    raise ValueError(f"Duplicate {attribute.replace('_', ' ')} '{name}' in object descriptor")
                seen.add(name)
        return self


class ReferenceDescriptor(_Descriptor):
    """Indirection to a named descriptor in a descriptor table."""

    kind: Literal["ref"] = "ref"
    name: str


class DateDescriptor(_Descriptor):
    """Matches a value that parses as a point in time."""

    kind: Literal["date"] = "date"


class AnyDescriptor(_Descriptor):
    """Matches any value, which is passed through unchanged."""

    kind: Literal["any"] = "any"


class NullDescriptor(_Descriptor):
    """Matches only ``None``."""

    kind: Literal["null"] = "null"


class AbsentDescriptor(_Descriptor):
    """Matches only a missing field; the building block of optional fields."""

    kind: Literal["absent"] = "absent"


class NeverDescriptor(_Descriptor):
    """Rejects every value."""

    kind: Literal["never"] = "never"


# Any descriptor variant, tagged by its `kind` field.
Descriptor = Annotated[
    PrimitiveDescriptor
    | LiteralSetDescriptor
    | ArrayDescriptor
    | UnionDescriptor
    | ObjectDescriptor
    | ReferenceDescriptor
    | DateDescriptor
    | AnyDescriptor
    | NullDescriptor
    | AbsentDescriptor
    | NeverDescriptor,
    _Field(discriminator="kind"),
]


def string() -> PrimitiveDescriptor:
    return PrimitiveDescriptor(primitive=PrimitiveKind.STRING)


def number() -> PrimitiveDescriptor:
    return PrimitiveDescriptor(primitive=PrimitiveKind.NUMBER)


def boolean() -> PrimitiveDescriptor:
    return PrimitiveDescriptor(primitive=PrimitiveKind.BOOLEAN)


def literal_set(*values: str) -> LiteralSetDescriptor:
    return LiteralSetDescriptor(values=values)


def array_of(items: Descriptor) -> ArrayDescriptor:
    return ArrayDescriptor(items=items)


def union(*members: Descriptor) -> UnionDescriptor:
    return UnionDescriptor(members=members)


def optional(inner: Descriptor) -> UnionDescriptor:
    """Return a descriptor accepting either a missing field or *inner*."""
    return UnionDescriptor(members=(AbsentDescriptor(), inner))


def ref(name: str) -> ReferenceDescriptor:
    return ReferenceDescriptor(name=name)


def prop(serialized_name: str, type: Descriptor, typed_name: str | None = None) -> PropertyDescriptor:
    """Declare an object property.

    The typed name defaults to the snake_case form of the serialized name
    with any leading ``$`` removed, e.g. ``additionalProperties`` becomes
    ``additional_properties`` and ``$schema`` becomes ``schema``.
    """
    if typed_name is None:
        typed_name = to_typed_name(serialized_name)
    return PropertyDescriptor(serialized_name=serialized_name, typed_name=typed_name, type=type)


def obj(properties: list[PropertyDescriptor], additional: Descriptor | None = None) -> ObjectDescriptor:
    """Build an object descriptor; extra keys are forbidden unless *additional* is given."""
    return ObjectDescriptor(
        properties=tuple(properties),
        additional=additional if additional is not None else NeverDescriptor(),
    )


def map_of(values: Descriptor) -> ObjectDescriptor:
    """Build a descriptor for a mapping with arbitrary keys and uniform values."""
    return ObjectDescriptor(properties=(), additional=values)


def to_typed_name(serialized_name: str) -> str:
    """Convert a serialized (camelCase) property name into a snake_case typed name."""
    name = serialized_name.lstrip("$")
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _CAMEL_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()


# ################
# Implementation
# ################

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")

# Resolve forward references for models that use Descriptor.
ArrayDescriptor.model_rebuild()
UnionDescriptor.model_rebuild()
PropertyDescriptor.model_rebuild()
ObjectDescriptor.model_rebuild()
