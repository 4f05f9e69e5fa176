# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Forbidden identifier linter enumerations.

Exports:
    EnumPatternErrorKind: Pattern construction failure kinds
"""

from omnibase_forbid.enums.enum_pattern_error_kind import EnumPatternErrorKind

__all__: list[str] = ["EnumPatternErrorKind"]
