# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Normalized forbidden-identifier pattern.

Every accepted specification shape (bare expression, expression with an
inline comment group, structured record) is normalized into one ``Pattern``
by ``omnibase_forbid.validation.pattern_parser``. Nothing downstream
branches on the original shape.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from omnibase_forbid.utils.util_glob import GlobRule, compile_glob_rule


@dataclass(frozen=True)
class Pattern:
    """An immutable forbidden-identifier rule.

    Attributes:
        source_text: The bare expression as supplied by the user, or the
            ``p`` expression of a structured record. This is what
            ``allow:`` directives and issue messages refer to.
        matcher: Compiled source expression, tested with ``search``.
        message: Optional explanation appended to issues.
        package_qualifier: Optional expression the resolved package path of
            a candidate must satisfy.
        ignore_globs: Ordered ignore rules; ``!`` negates a rule.
        glob_rules: ``ignore_globs`` compiled at construction time. Not an
            init argument, so it always follows ``ignore_globs``, including
            across ``dataclasses.replace``.
    """

    source_text: str
    matcher: re.Pattern[str]
    message: str = ""
    package_qualifier: re.Pattern[str] | None = None
    ignore_globs: tuple[str, ...] = ()
    glob_rules: tuple[GlobRule, ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        rules = tuple(compile_glob_rule(entry) for entry in self.ignore_globs)
        object.__setattr__(self, "glob_rules", rules)

    @property
    def package(self) -> str:
        """Source of the package qualifier, empty when absent."""
        if self.package_qualifier is None:
            return ""
        return self.package_qualifier.pattern

    def __str__(self) -> str:
        return self.source_text


__all__: list[str] = ["Pattern"]
