# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""A parsed source file handed to the linter."""

from __future__ import annotations

import ast
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceUnit:
    """One source file with its syntax tree.

    Attributes:
        file_path: Path used in issue positions and ignore-glob matching.
        source: Full source text, used for comment directives.
        tree: Parsed module, or None if the source does not parse.
        package: Dotted package of the module, for relative imports.
    """

    file_path: str
    source: str
    tree: ast.Module | None = field(default=None, compare=False, repr=False)
    package: str | None = None

    @classmethod
    def from_source(
        cls, source: str, file_path: str, package: str | None = None
    ) -> SourceUnit:
        """Parse ``source``; a syntax error yields a unit without a tree."""
        try:
            tree = ast.parse(source, filename=file_path)
        except SyntaxError:
            tree = None
        return cls(file_path=file_path, source=source, tree=tree, package=package)


__all__: list[str] = ["SourceUnit"]
