# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schemacast - descriptor-driven validation and conversion of structured data."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("schemacast")
except PackageNotFoundError:
    __version__ = "(local)"
