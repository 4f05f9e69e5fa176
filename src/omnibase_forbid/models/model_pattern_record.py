# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Structured record form of a pattern specification.

Accepted YAML spellings::

    {p: ^fmt\\.Println$, msg: use logging, ignore: ["**", "!**/main.py"]}

    p: ^os\\.getenv$
    pkg: ^os$
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelPatternRecord(BaseModel):
    """Structured pattern specification.

    Unknown keys are rejected so that a mapping which is not a record can be
    told apart from one that is.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    p: str = Field(
        min_length=1,
        description="Source expression matched against identifiers",
    )
    msg: str = Field(default="", description="Explanation appended to issues")
    pkg: str = Field(
        default="",
        description="Expression the resolved package path must satisfy",
    )
    ignore: tuple[str, ...] = Field(
        default=(),
        description="Ordered ignore globs; a leading '!' re-includes files",
    )


__all__: list[str] = ["ModelPatternRecord"]
