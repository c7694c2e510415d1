# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptor interpreter and its property mapping cache."""

from schemacast.engine.field_map import Direction, FieldMapCache, FieldTarget
from schemacast.engine.interpreter import Converted, Interpreter, Rejected, describe

__all__ = [
    "Direction",
    "FieldMapCache",
    "FieldTarget",
    "Interpreter",
    "Converted",
    "Rejected",
    "describe",
]
