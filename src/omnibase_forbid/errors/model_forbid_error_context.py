# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Error Context Configuration Model.

Bundles the structured fields shared by all linter errors so error
constructors keep a short, strongly typed signature.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelForbidErrorContext(BaseModel):
    """Structured context attached to linter errors.

    Attributes:
        operation: Operation being performed (parse_pattern, load_config, ...)
        target_name: Pattern source text, file path or other subject
        correlation_id: Correlation ID for tracing one CLI invocation

    Example:
        >>> context = ModelForbidErrorContext(
        ...     operation="parse_pattern",
        ...     target_name=r"fmt\\.Printf",
        ... )
        >>> raise PatternParseError("bad pattern", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (parse_pattern, load_config, etc.)",
    )
    target_name: str | None = Field(
        default=None,
        description="Subject of the operation (pattern text, file path)",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing one invocation",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: str | None,
    ) -> ModelForbidErrorContext:
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__: list[str] = ["ModelForbidErrorContext"]
