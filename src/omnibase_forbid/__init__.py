# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Forbidden identifier linter for Python sources.

Reports uses of identifiers (names and dotted selectors) that match
user-supplied forbidden patterns, with per-pattern messages, file ignore
globs, package qualifiers and same-line ``# allow:`` suppressions.

Key Components:
    - ForbiddenIdentifierLinter: the linter engine
    - parse_pattern: pattern specification parser
    - ImportTypeInfo: import-based canonical name resolution
    - cli: click command group (``omnibase-forbid check``)
"""

from omnibase_forbid.errors import (
    ConfigurationError,
    ForbidError,
    GlobSyntaxError,
    PatternParseError,
)
from omnibase_forbid.models import Issue, ModelLinterConfig, Pattern
from omnibase_forbid.validation import (
    ForbiddenIdentifierLinter,
    ImportTypeInfo,
    parse_pattern,
)

__version__ = "0.1.0"

__all__: list[str] = [
    "ConfigurationError",
    "ForbidError",
    "ForbiddenIdentifierLinter",
    "GlobSyntaxError",
    "ImportTypeInfo",
    "Issue",
    "ModelLinterConfig",
    "Pattern",
    "PatternParseError",
    "parse_pattern",
]
