# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Forbidden identifier issue emitted by the linter."""

from __future__ import annotations

from dataclasses import dataclass

from omnibase_forbid.models.model_pattern import Pattern


@dataclass(frozen=True)
class Issue:
    """One use of a forbidden identifier.

    Attributes:
        file_path: File containing the use.
        line: 1-based line.
        column: 1-based column.
        matched_text: The text form that satisfied the pattern.
        pattern: The pattern that fired.
    """

    file_path: str
    line: int
    column: int
    matched_text: str
    pattern: Pattern

    @property
    def position(self) -> str:
        """``file:line:column`` location string."""
        return f"{self.file_path}:{self.line}:{self.column}"

    @property
    def sort_key(self) -> tuple[str, int, int, str]:
        """Deterministic ordering key: file, line, column, pattern source."""
        return (self.file_path, self.line, self.column, self.pattern.source_text)

    def details(self) -> str:
        """Describe the violation without its location."""
        text = (
            f"use of `{self.matched_text}` disallowed by pattern "
            f"`{self.pattern.source_text}`"
        )
        if self.pattern.message:
            text += f": {self.pattern.message}"
        return text

    def to_dict(self) -> dict[str, str | int]:
        """Serialize for JSON reporting."""
        return {
            "file": self.file_path,
            "line": self.line,
            "column": self.column,
            "matched_text": self.matched_text,
            "pattern": self.pattern.source_text,
            "message": self.pattern.message,
        }

    def __str__(self) -> str:
        return f"{self.details()} at {self.position}"


__all__: list[str] = ["Issue"]
