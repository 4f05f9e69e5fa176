# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Command-line interface for the forbidden identifier linter."""

from omnibase_forbid.cli.commands import cli, main

__all__: list[str] = ["cli", "main"]
