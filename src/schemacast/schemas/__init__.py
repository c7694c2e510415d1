# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Built-in descriptor tables."""
