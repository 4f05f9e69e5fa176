# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Linter configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelLinterConfig(BaseModel):
    """Options controlling a linter run.

    Attributes:
        patterns: Raw pattern entries (strings or record mappings). Empty
            means the default pattern set.
        exclude_doc_examples: Skip identifiers inside documentation examples.
        ignore_allow_directives: Report matches even when an ``allow:``
            comment names them.
        analyze_types: Resolve imports so patterns can match canonical paths.
        include_tests: Analyze test modules as well.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    patterns: tuple[str | dict[str, object], ...] = Field(
        default=(),
        description="Raw pattern entries; empty selects the defaults",
    )
    exclude_doc_examples: bool = Field(
        default=True,
        description="Skip identifiers inside documentation example functions",
    )
    ignore_allow_directives: bool = Field(
        default=False,
        description="Ignore '# allow:' directives",
    )
    analyze_types: bool = Field(
        default=True,
        description="Resolve imports to canonical module paths",
    )
    include_tests: bool = Field(
        default=True,
        description="Include test modules when loading sources",
    )


__all__: list[str] = ["ModelLinterConfig"]
