# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Static star-export lookup.

Answers "which names does ``from module import *`` bind?" by reading the
module's source from disk, never by importing it. Used as the default
``star_exports`` callback of ``ImportTypeInfo``.

Lookup:
    - The module is located on ``sys.path`` with ``PathFinder``, one dotted
      segment at a time, so parent packages are not imported either
    - Only pure-Python sources are read; built-in, frozen-only and extension
      modules export nothing
    - A module-level ``__all__`` built from string literals
      (``=``, ``+=``, ``.append``, ``.extend``) is the export list
    - Without ``__all__``, every public top-level binding is exported

Modules that cannot be found or parsed export nothing; that is logged at
debug level and never raised.
"""

from __future__ import annotations

import ast
import functools
import logging
from collections.abc import Iterator
from importlib.machinery import ModuleSpec, PathFinder, SourceFileLoader
from pathlib import Path

logger = logging.getLogger(__name__)

STAR_EXPORTS_CACHE_SIZE = 256


@functools.lru_cache(maxsize=STAR_EXPORTS_CACHE_SIZE)
def module_star_exports(module: str) -> frozenset[str]:
    """Return the names ``from module import *`` binds.

    Args:
        module: Absolute dotted module name.

    Returns:
        The exported names; empty if the module source is unavailable.

    Example:
        >>> "getenv" in module_star_exports("os")
        True
    """
    source_path = find_module_source(module)
    if source_path is None:
        return frozenset()
    try:
        tree = ast.parse(source_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, SyntaxError, ValueError) as e:
        logger.debug(
            "Cannot read module source for star exports",
            extra={
                "import_module": module,
                "error_type": type(e).__name__,
                "error": str(e),
            },
        )
        return frozenset()
    declared = _declared_all(tree)
    if declared is not None:
        return frozenset(declared)
    return frozenset(
        name for name in _top_level_names(tree) if not name.startswith("_")
    )


def find_module_source(module: str) -> Path | None:
    """Locate the ``.py`` source of ``module`` without importing anything."""
    spec: ModuleSpec | None = None
    search_path: list[str] | None = None
    parts = module.split(".")
    for end in range(1, len(parts) + 1):
        name = ".".join(parts[:end])
        try:
            spec = PathFinder.find_spec(name, search_path)
        except (ImportError, ValueError):
            spec = None
        if spec is None:
            logger.debug("Module source not found", extra={"import_module": name})
            return None
        search_path = (
            list(spec.submodule_search_locations)
            if spec.submodule_search_locations is not None
            else None
        )
        if end < len(parts) and search_path is None:
            # Not a package; the remaining parts cannot be submodules.
            return None
    if spec is None or not isinstance(spec.loader, SourceFileLoader):
        return None
    if spec.origin is None:
        return None
    return Path(spec.origin)


def _declared_all(tree: ast.Module) -> list[str] | None:
    names: list[str] | None = None
    for node in _module_statements(tree.body):
        if isinstance(node, ast.Assign) and _targets_all(node.targets):
            names = _string_items(node.value)
        elif isinstance(node, ast.AnnAssign) and _targets_all([node.target]):
            names = _string_items(node.value) if node.value is not None else []
        elif names is not None and isinstance(node, ast.AugAssign):
            if _targets_all([node.target]) and isinstance(node.op, ast.Add):
                names.extend(_string_items(node.value))
        elif names is not None and isinstance(node, ast.Expr):
            names.extend(_all_method_items(node.value))
    return names


def _module_statements(body: list[ast.stmt]) -> Iterator[ast.stmt]:
    """Yield module-level statements, entering conditional blocks."""
    for node in body:
        if isinstance(node, ast.If):
            yield from _module_statements(node.body)
            yield from _module_statements(node.orelse)
        elif isinstance(node, ast.Try):
            yield from _module_statements(node.body)
            for handler in node.handlers:
                yield from _module_statements(handler.body)
            yield from _module_statements(node.orelse)
            yield from _module_statements(node.finalbody)
        else:
            yield node


def _targets_all(targets: list[ast.expr]) -> bool:
    return any(isinstance(t, ast.Name) and t.id == "__all__" for t in targets)


def _string_items(value: ast.expr | None) -> list[str]:
    if isinstance(value, ast.Constant) and isinstance(value.value, str):
        return [value.value]
    if not isinstance(value, (ast.List, ast.Tuple, ast.Set)):
        return []
    return [
        item.value
        for item in value.elts
        if isinstance(item, ast.Constant) and isinstance(item.value, str)
    ]


def _all_method_items(call: ast.expr) -> list[str]:
    if not (
        isinstance(call, ast.Call)
        and isinstance(call.func, ast.Attribute)
        and isinstance(call.func.value, ast.Name)
        and call.func.value.id == "__all__"
        and call.func.attr in ("append", "extend")
        and len(call.args) == 1
    ):
        return []
    return _string_items(call.args[0])


def _top_level_names(tree: ast.Module) -> list[str]:
    names: list[str] = []
    for node in _module_statements(tree.body):
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            names.append(node.name)
        elif isinstance(node, ast.Import):
            names.extend(
                alias.asname or alias.name.split(".")[0] for alias in node.names
            )
        elif isinstance(node, ast.ImportFrom):
            names.extend(
                alias.asname or alias.name
                for alias in node.names
                if alias.name != "*"
            )
        elif isinstance(node, (ast.Assign, ast.AnnAssign, ast.AugAssign)):
            targets = node.targets if isinstance(node, ast.Assign) else [node.target]
            for target in targets:
                names.extend(
                    child.id
                    for child in ast.walk(target)
                    if isinstance(child, ast.Name) and isinstance(child.ctx, ast.Store)
                )
    return names


__all__: list[str] = [
    "STAR_EXPORTS_CACHE_SIZE",
    "find_module_source",
    "module_star_exports",
]
