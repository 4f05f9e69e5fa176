# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Identifier candidate resolution.

Walks a parsed module and projects every name and dotted selector into a
``Candidate`` carrying its source spelling and, when type information is
available, its fully-qualified form.

Candidate shapes:
    - ``ast.Name``: ``print``, ``getenv``
    - ``ast.Attribute`` chains rooted at a name: ``os.getenv``,
      ``os.path.join``. The chain is one candidate; its inner names are not
      reported again.

Attribute chains rooted at anything else (``get_client().send``) are not
candidates themselves, but the walk descends into them, so names inside
(``get_client``) still are.

Without type information the resolver degrades to source spelling only.
This is not an error.

With type information, names bound inside an enclosing function or lambda
(parameters, assignment targets, nested definitions) are local variables,
not imports. They are never qualified, and a selector rooted at one
(``def f(os): os.getenv()``) is not a candidate; the walk still reports the
local name itself. Names declared ``global`` or ``nonlocal`` are not local
to the declaring function.
"""

from __future__ import annotations

import ast

from omnibase_forbid.models.model_candidate import Candidate
from omnibase_forbid.models.model_pattern import Pattern
from omnibase_forbid.protocols.protocol_type_info import ProtocolTypeInfo

_SCOPE_NODES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)
_NESTED_SCOPES = (*_SCOPE_NODES, ast.Lambda)


class CandidateCollector(ast.NodeVisitor):
    """AST visitor collecting identifier candidates.

    Attributes:
        file_path: Path reported in candidate positions.
        type_info: Optional resolver for import bindings.
        candidates: Candidates in traversal order.
    """

    def __init__(
        self, file_path: str, type_info: ProtocolTypeInfo | None = None
    ) -> None:
        self.file_path = file_path
        self.type_info = type_info
        self.candidates: list[Candidate] = []
        self._scopes: list[ast.AST] = []
        self._local_names: list[frozenset[str]] = []

    def _visit_scope(self, node: ast.AST) -> None:
        self._scopes.append(node)
        self.generic_visit(node)
        self._scopes.pop()

    def _visit_function(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> None:
        self._local_names.append(function_local_names(node))
        self._visit_scope(node)
        self._local_names.pop()

    visit_FunctionDef = _visit_function
    visit_AsyncFunctionDef = _visit_function
    visit_ClassDef = _visit_scope

    def visit_Lambda(self, node: ast.Lambda) -> None:
        self._local_names.append(frozenset(_parameter_names(node.args)))
        self.generic_visit(node)
        self._local_names.pop()

    def visit_Name(self, node: ast.Name) -> None:
        self._add(node, node.id)

    def visit_Attribute(self, node: ast.Attribute) -> None:
        dotted = dotted_name(node)
        if dotted is None or self._is_local_selector(dotted):
            self.generic_visit(node)
            return
        self._add(node, dotted)

    def _add(self, node: ast.expr, local_text: str) -> None:
        qualified_text, package = self._qualify(local_text)
        self.candidates.append(
            Candidate(
                file_path=self.file_path,
                line=node.lineno,
                column=node.col_offset + 1,
                local_text=local_text,
                qualified_text=qualified_text,
                package=package,
                enclosing=tuple(self._scopes),
                node=node,
            )
        )

    def _is_local(self, name: str) -> bool:
        return any(name in names for names in self._local_names)

    def _is_local_selector(self, dotted: str) -> bool:
        if self.type_info is None:
            return False
        return self._is_local(dotted.partition(".")[0])

    def _qualify(self, local_text: str) -> tuple[str | None, str | None]:
        if self.type_info is None:
            return None, None
        root, _, rest = local_text.partition(".")
        if self._is_local(root):
            return None, None
        path = self.type_info.resolve(root)
        if path is None:
            return None, None
        qualified = f"{path}.{rest}" if rest else path
        return qualified, self.type_info.package_of(local_text)


def function_local_names(
    node: ast.FunctionDef | ast.AsyncFunctionDef,
) -> frozenset[str]:
    """Return the names bound in the local scope of a function.

    Nested function, class and lambda bodies are not entered, but the names
    they define are. Imports inside the function are left to import
    analysis.
    """
    names = set(_parameter_names(node.args))
    declared: set[str] = set()
    pending: list[ast.AST] = list(node.body)
    while pending:
        child = pending.pop()
        if isinstance(child, ast.Name) and isinstance(child.ctx, (ast.Store, ast.Del)):
            names.add(child.id)
        elif isinstance(child, _SCOPE_NODES):
            names.add(child.name)
        elif isinstance(child, ast.ExceptHandler) and child.name:
            names.add(child.name)
        elif isinstance(child, (ast.Global, ast.Nonlocal)):
            declared.update(child.names)
        if not isinstance(child, _NESTED_SCOPES):
            pending.extend(ast.iter_child_nodes(child))
    return frozenset(names - declared)


def _parameter_names(arguments: ast.arguments) -> list[str]:
    params = [*arguments.posonlyargs, *arguments.args, *arguments.kwonlyargs]
    params.extend(arg for arg in (arguments.vararg, arguments.kwarg) if arg)
    return [arg.arg for arg in params]


def dotted_name(node: ast.expr) -> str | None:
    """Return ``a.b.c`` for an attribute chain rooted at a name, else None."""
    parts: list[str] = []
    current: ast.expr = node
    while isinstance(current, ast.Attribute):
        parts.append(current.attr)
        current = current.value
    if not isinstance(current, ast.Name):
        return None
    parts.append(current.id)
    return ".".join(reversed(parts))


def find_candidates(
    tree: ast.AST,
    file_path: str,
    type_info: ProtocolTypeInfo | None = None,
) -> list[Candidate]:
    """Enumerate identifier candidates of a parsed module.

    Args:
        tree: Parsed module.
        file_path: Path reported in candidate positions.
        type_info: Optional import resolution; None selects syntactic mode.

    Returns:
        Candidates in traversal order.
    """
    collector = CandidateCollector(file_path, type_info)
    collector.visit(tree)
    return collector.candidates


def candidate_matches(candidate: Candidate, pattern: Pattern) -> str | None:
    """Test a candidate against a pattern.

    The source spelling is tried first, then the fully-qualified form. A
    pattern with a package qualifier only fires for candidates whose
    resolved package satisfies it.

    Returns:
        The text that matched, or None.
    """
    if pattern.package_qualifier is not None:
        if candidate.package is None:
            return None
        if pattern.package_qualifier.search(candidate.package) is None:
            return None
    for text in candidate.texts:
        if pattern.matcher.search(text) is not None:
            return text
    return None


__all__: list[str] = [
    "CandidateCollector",
    "candidate_matches",
    "dotted_name",
    "find_candidates",
    "function_local_names",
]
