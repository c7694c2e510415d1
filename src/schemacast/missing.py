# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Marker for a field that is not present in its input mapping."""

from __future__ import annotations

from typing import Final


class _Missing:
    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()
