# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Forbidden identifier linter errors.

Exports:
    ForbidError: Base error for the linter
    PatternParseError: Pattern construction failure (see EnumPatternErrorKind)
    GlobSyntaxError: Malformed ignore glob
    ConfigurationError: Invalid or missing configuration file
    ModelForbidErrorContext: Structured error context
"""

from omnibase_forbid.errors.error_forbid import (
    ConfigurationError,
    ForbidError,
    GlobSyntaxError,
    PatternParseError,
)
from omnibase_forbid.errors.model_forbid_error_context import (
    ModelForbidErrorContext,
)

__all__: list[str] = [
    "ConfigurationError",
    "ForbidError",
    "GlobSyntaxError",
    "ModelForbidErrorContext",
    "PatternParseError",
]
