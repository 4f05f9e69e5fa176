# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Forbidden Identifier Linter Error Classes.

Error Hierarchy:
    ForbidError (base linter error)
    ├── PatternParseError
    ├── GlobSyntaxError
    └── ConfigurationError

All errors:
    - Support proper error chaining with `raise ... from e`
    - Carry structured context via ModelForbidErrorContext
    - Accept extra keyword context for debugging

Pattern and glob errors are construction-time errors. Once a linter has been
built, running it never raises for source content.
"""

from __future__ import annotations

from omnibase_forbid.enums import EnumPatternErrorKind
from omnibase_forbid.errors.model_forbid_error_context import (
    ModelForbidErrorContext,
)


class ForbidError(Exception):
    """Base error class for the forbidden identifier linter.

    Structured Fields (via ModelForbidErrorContext):
        operation: Operation being performed
        target_name: Subject of the operation
        correlation_id: Correlation ID for tracing
    """

    def __init__(
        self,
        message: str,
        context: ModelForbidErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize ForbidError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled error context
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        structured_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
        self.extra_context = structured_context

    @property
    def correlation_id(self) -> object:
        """Correlation ID from the bundled context, if any."""
        return self.context.correlation_id if self.context is not None else None

    def __str__(self) -> str:
        return self.message


class PatternParseError(ForbidError):
    """Raised when a forbidden-identifier pattern cannot be constructed.

    Example:
        >>> try:
        ...     parse_pattern("fmt\\\\")
        ... except PatternParseError as e:
        ...     assert e.kind is EnumPatternErrorKind.INVALID_EXPRESSION
    """

    def __init__(
        self,
        message: str,
        kind: EnumPatternErrorKind,
        source_text: str | None = None,
        context: ModelForbidErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize PatternParseError.

        Args:
            message: Human-readable error message
            kind: Failure classification
            source_text: The raw pattern specification that failed
            context: Bundled error context
            **extra_context: Additional context information
        """
        extra_context["kind"] = kind.value
        if source_text is not None:
            extra_context["source_text"] = source_text
        super().__init__(message, context=context, **extra_context)
        self.kind = kind
        self.source_text = source_text


class GlobSyntaxError(ForbidError):
    """Raised when an ignore glob is structurally malformed."""

    def __init__(
        self,
        message: str,
        glob: str,
        context: ModelForbidErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        extra_context["glob"] = glob
        super().__init__(message, context=context, **extra_context)
        self.glob = glob


class ConfigurationError(ForbidError):
    """Raised when a linter configuration file is missing or invalid.

    Used for unreadable files, YAML syntax errors and schema violations.
    """


__all__: list[str] = [
    "ConfigurationError",
    "ForbidError",
    "GlobSyntaxError",
    "PatternParseError",
]
