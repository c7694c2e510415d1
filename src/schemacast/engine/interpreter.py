# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptor interpreter: converts values between serialized and typed form.

The interpreter walks a descriptor and a value in lock-step. Every step
returns either :class:`Converted` or :class:`Rejected`; union members are
tried in order by inspecting those results, and only :meth:`Interpreter.transform`
turns a rejection into a raised :class:`~schemacast.errors.ConversionError`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

from pydantic import TypeAdapter, ValidationError

from schemacast.engine.field_map import Direction, FieldMapCache
from schemacast.errors import ConversionError, PathSegment
from schemacast.missing import MISSING
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
    ReferenceDescriptor,
    UnionDescriptor,
)
from schemacast.model.table import DescriptorTable

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Converted:
    """A successful conversion step."""

    value: Any


@dataclass(frozen=True)
class Rejected:
    """A failed conversion step."""

    error: ConversionError


Outcome = Converted | Rejected


class Interpreter:
    """Converts values against descriptors resolved from a :class:`DescriptorTable`."""

    def __init__(self, table: DescriptorTable, cache: FieldMapCache | None = None) -> None:
        self.table = table
        self.cache = cache if cache is not None else FieldMapCache()

    def transform(self, value: Any, descriptor: Descriptor, direction: Direction) -> Any:
        """Convert *value* against *descriptor* in *direction*.

        Raises:
            ConversionError: On the first value that does not conform.
        """
        outcome = self.attempt(value, descriptor, direction)
        if isinstance(outcome, Rejected):
            raise outcome.error
        return outcome.value

    def attempt(self, value: Any, descriptor: Descriptor, direction: Direction) -> Outcome:
        """Like :meth:`transform`, but return the outcome instead of raising."""
        return self._transform(value, descriptor, direction, _Context())

    def _transform(self, value: Any, descriptor: Descriptor, direction: Direction, ctx: _Context) -> Outcome:
        ref_name: str | None = None
        while isinstance(descriptor, ReferenceDescriptor):
            ref_name = descriptor.name
            descriptor = self.table.resolve(descriptor.name)

        if isinstance(descriptor, AnyDescriptor):
            return Converted(value)
        if isinstance(descriptor, PrimitiveDescriptor):
            if _is_primitive(value, descriptor.primitive):
                return Converted(value)
            return ctx.reject(descriptor, value)
        if isinstance(descriptor, LiteralSetDescriptor):
            if isinstance(value, str) and value in descriptor.values:
                return Converted(value)
            return ctx.reject(descriptor, value)
        if isinstance(descriptor, NullDescriptor):
            return Converted(None) if value is None else ctx.reject(descriptor, value)
        if isinstance(descriptor, AbsentDescriptor):
            return Converted(MISSING) if value is MISSING else ctx.reject(descriptor, value)
        if isinstance(descriptor, NeverDescriptor):
            return ctx.reject(descriptor, value)
        if isinstance(descriptor, ArrayDescriptor):
            return self._transform_array(value, descriptor, direction, ctx)
        if isinstance(descriptor, UnionDescriptor):
            return self._transform_union(value, descriptor, direction, ctx)
        if isinstance(descriptor, ObjectDescriptor):
            return self._transform_object(value, descriptor, direction, ctx, ref_name)
        if isinstance(descriptor, DateDescriptor):
            return _transform_date(value, descriptor, direction, ctx)
        raise TypeError(f"Unsupported descriptor: {descriptor!r}")

    def _transform_array(
        self, value: Any, descriptor: ArrayDescriptor, direction: Direction, ctx: _Context
    ) -> Outcome:
        if not isinstance(value, list | tuple):
            return ctx.reject(descriptor, value)
        result = []
        for index, element in enumerate(value):
            outcome = self._transform(element, descriptor.items, direction, ctx.at_index(index))
            if isinstance(outcome, Rejected):
                return outcome
            result.append(outcome.value)
        return Converted(result)

    def _transform_union(
        self, value: Any, descriptor: UnionDescriptor, direction: Direction, ctx: _Context
    ) -> Outcome:
        for member in descriptor.members:
            outcome = self._transform(value, member, direction, ctx)
            if isinstance(outcome, Converted):
                return outcome
        return ctx.reject(descriptor, value)

    def _transform_object(
        self,
        value: Any,
        descriptor: ObjectDescriptor,
        direction: Direction,
        ctx: _Context,
        ref_name: str | None,
    ) -> Outcome:
        if not isinstance(value, Mapping):
            return ctx.reject(descriptor, value, expected=ref_name or "object")

        parent = ref_name or ""
        field_map = self.cache.field_map(descriptor, direction)
        result: dict[str, Any] = {}
        for source_name, target in field_map.items():
            field_value = value.get(source_name, MISSING)
            outcome = self._transform(field_value, target.type, direction, ctx.at_key(source_name, parent))
            if isinstance(outcome, Rejected):
                return outcome
            if outcome.value is not MISSING:
                result[target.name] = outcome.value

        for key, extra_value in value.items():
            if key in field_map:
                continue
            outcome = self._transform(extra_value, descriptor.additional, direction, ctx.at_key(key, parent))
            if isinstance(outcome, Rejected):
                return outcome
            result[key] = outcome.value
        return Converted(result)


def describe(descriptor: Descriptor) -> str:
    """Return a human-readable name for the shape *descriptor* expects."""
    if isinstance(descriptor, ReferenceDescriptor):
        return descriptor.name
    if isinstance(descriptor, PrimitiveDescriptor):
        return descriptor.primitive.value
    if isinstance(descriptor, LiteralSetDescriptor):
        return "one of [" + ", ".join(f'"{v}"' for v in descriptor.values) + "]"
    if isinstance(descriptor, UnionDescriptor):
        members = descriptor.members
        if len(members) == 2 and isinstance(members[0], AbsentDescriptor):
            return f"an optional {describe(members[1])}"
        return "one of [" + ", ".join(describe(m) for m in members) + "]"
    if isinstance(descriptor, ArrayDescriptor):
        return "array"
    if isinstance(descriptor, ObjectDescriptor):
        return "object"
    if isinstance(descriptor, DateDescriptor):
        return "Date"
    if isinstance(descriptor, NullDescriptor):
        return "null"
    if isinstance(descriptor, AbsentDescriptor):
        return "nothing (field must be absent)"
    if isinstance(descriptor, NeverDescriptor):
        return "nothing"
    return "any value"


# ################
# Implementation
# ################

_DATETIME_ADAPTER = TypeAdapter(datetime)
_NUMERIC_TEXT = re.compile(r"\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?\s*")


@dataclass(frozen=True)
class _Context:
    """Position of the value being converted, for error reporting."""

    key: Any = None
    parent: str = ""
    path: tuple[PathSegment, ...] = ()

    def at_key(self, key: Any, parent: str) -> _Context:
        # Integers in a path are list indices, so other map keys are recorded as text.
        segment = key if isinstance(key, str) else str(key)
        return _Context(key=key, parent=parent, path=(*self.path, segment))

    def at_index(self, index: int) -> _Context:
        return _Context(key=self.key, parent=self.parent, path=(*self.path, index))

    def reject(self, descriptor: Descriptor, value: Any, expected: str | None = None) -> Rejected:
        return Rejected(
            ConversionError(
                expected=expected if expected is not None else describe(descriptor),
                actual=value,
                key=self.key,
                parent=self.parent,
                path=self.path,
            )
        )


def _is_primitive(value: Any, kind: PrimitiveKind) -> bool:
    # bool is a subclass of int, so it is checked explicitly.
    if kind is PrimitiveKind.BOOLEAN:
        return isinstance(value, bool)
    if kind is PrimitiveKind.NUMBER:
        return isinstance(value, int | float) and not isinstance(value, bool)
    return isinstance(value, str)


def _transform_date(value: Any, descriptor: DateDescriptor, direction: Direction, ctx: _Context) -> Outcome:
    if value is None:
        return Converted(None)
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        # YAML loads date-only scalars as date objects; they mean midnight like date-only text.
        parsed = datetime.combine(value, time())
    elif isinstance(value, str):
        # Numbers, as text or not, would parse as epoch offsets but are not accepted as timestamps.
        if _NUMERIC_TEXT.fullmatch(value):
            return ctx.reject(descriptor, value)
        try:
            parsed = _DATETIME_ADAPTER.validate_python(value)
        except ValidationError:
            return ctx.reject(descriptor, value)
    else:
        return ctx.reject(descriptor, value)

    if direction is Direction.ENCODE:
        return Converted(parsed.isoformat())
    return Converted(parsed)
