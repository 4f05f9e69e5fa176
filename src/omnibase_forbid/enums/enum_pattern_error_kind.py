# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Failure classification for forbidden-identifier pattern parsing."""

from __future__ import annotations

from enum import Enum


class EnumPatternErrorKind(str, Enum):
    """Kind of failure raised while constructing a Pattern.

    Values:
        INVALID_EXPRESSION: The source or package expression does not compile.
        INVALID_SHAPE: The input is neither a bare expression nor a record.
        INVALID_GLOB: An ignore glob is structurally malformed.
    """

    INVALID_EXPRESSION = "invalid_expression"
    """The source or package expression does not compile."""

    INVALID_SHAPE = "invalid_shape"
    """The input is neither a bare expression nor a structured record."""

    INVALID_GLOB = "invalid_glob"
    """An ignore glob is structurally malformed."""

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumPatternErrorKind"]
