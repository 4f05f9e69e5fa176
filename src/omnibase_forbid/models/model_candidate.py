# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Candidate identifier occurrence produced by the identifier resolver."""

from __future__ import annotations

import ast
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Candidate:
    """A single name or dotted selector found in a syntax tree.

    Candidates are produced fresh for every resolver pass and never cached.

    Attributes:
        file_path: Path of the file the tree was parsed from.
        line: 1-based line of the expression.
        column: 1-based column of the expression.
        local_text: The name or dotted selector as written (``_os.getenv``).
        qualified_text: The selector with its root replaced by the canonical
            import path (``os.getenv``), when type information resolves it.
        package: Canonical import path of the module the root refers to.
        enclosing: Enclosing function and class definitions, outermost first.
        node: The expression node itself.
    """

    file_path: str
    line: int
    column: int
    local_text: str
    qualified_text: str | None = None
    package: str | None = None
    enclosing: tuple[ast.AST, ...] = field(default=(), compare=False, repr=False)
    node: ast.AST | None = field(default=None, compare=False, repr=False)

    @property
    def texts(self) -> tuple[str, ...]:
        """Match strings in the order they are tried."""
        if self.qualified_text is None or self.qualified_text == self.local_text:
            return (self.local_text,)
        return (self.local_text, self.qualified_text)


__all__: list[str] = ["Candidate"]
