# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Import-based type information.

Builds the name-to-canonical-path mapping of one module from its import
statements. This is the default ``ProtocolTypeInfo`` implementation used by
the linter when import analysis is enabled.

Supported forms:
    - ``import a.b``: binds ``a`` to module ``a`` and records ``a.b`` as known
    - ``import a.b as c``: binds ``c`` to module ``a.b``
    - ``from a import b as c``: binds ``c`` to symbol ``a.b`` of module ``a``
    - ``from . import b``: resolved against the module's package, if given
    - ``from a import *``: names resolve through ``star_exports(a)``, if given

Limitations:
    - Rebinding an imported name by module-level assignment is not tracked;
      function-local rebinding is handled by the identifier resolver
    - Star imports cannot be resolved without a ``star_exports`` callback.
      The linter passes ``module_star_exports``, which reads the exported
      names from the module source on ``sys.path`` without importing it
"""

from __future__ import annotations

import ast
import importlib.util
import logging
from collections.abc import Callable, Collection
from dataclasses import dataclass

logger = logging.getLogger(__name__)

StarExports = Callable[[str], Collection[str]]


@dataclass(frozen=True)
class ImportBinding:
    """What a local name is bound to.

    Attributes:
        path: Canonical dotted path (``os.getenv``, ``os.path``).
        package: Module the bound object belongs to.
        is_module: True if ``path`` names a module.
    """

    path: str
    package: str
    is_module: bool


class ImportTypeInfo:
    """Resolves names bound by a module's import statements.

    Example:
        >>> tree = ast.parse("import os as _os\\nfrom json import loads")
        >>> info = ImportTypeInfo.from_tree(tree)
        >>> info.resolve("_os"), info.resolve("loads")
        ('os', 'json.loads')
    """

    def __init__(
        self,
        bindings: dict[str, ImportBinding] | None = None,
        known_modules: Collection[str] = (),
        star_modules: tuple[str, ...] = (),
        star_exports: StarExports | None = None,
    ) -> None:
        self._bindings = dict(bindings or {})
        self._known_modules = frozenset(known_modules)
        self._star_modules = star_modules
        self._star_exports = star_exports

    @classmethod
    def from_tree(
        cls,
        tree: ast.AST,
        package: str | None = None,
        star_exports: StarExports | None = None,
    ) -> ImportTypeInfo:
        """Collect the import bindings of ``tree``.

        Args:
            tree: Parsed module.
            package: Dotted package of the module, for relative imports.
            star_exports: Returns the public names of a module, used to
                resolve names brought in by ``from module import *``.
        """
        bindings: dict[str, ImportBinding] = {}
        known_modules: set[str] = set()
        star_modules: list[str] = []

        imports = [
            node
            for node in ast.walk(tree)
            if isinstance(node, (ast.Import, ast.ImportFrom))
        ]
        imports.sort(key=lambda node: (node.lineno, node.col_offset))

        for node in imports:
            if isinstance(node, ast.Import):
                for alias in node.names:
                    known_modules.update(_module_prefixes(alias.name))
                    if alias.asname:
                        bindings[alias.asname] = ImportBinding(
                            path=alias.name, package=alias.name, is_module=True
                        )
                    else:
                        root = alias.name.split(".")[0]
                        bindings[root] = ImportBinding(
                            path=root, package=root, is_module=True
                        )
                continue

            module = _absolute_module(node, package)
            if module is None or module == "__future__":
                continue
            known_modules.update(_module_prefixes(module))
            for alias in node.names:
                if alias.name == "*":
                    star_modules.append(module)
                    continue
                bindings[alias.asname or alias.name] = ImportBinding(
                    path=f"{module}.{alias.name}",
                    package=module,
                    is_module=False,
                )

        return cls(
            bindings=bindings,
            known_modules=known_modules,
            star_modules=tuple(star_modules),
            star_exports=star_exports,
        )

    def binding(self, name: str) -> ImportBinding | None:
        """Return the binding of ``name``, consulting star imports last."""
        found = self._bindings.get(name)
        if found is not None:
            return found
        if self._star_exports is None:
            return None
        # Later star imports shadow earlier ones.
        for module in reversed(self._star_modules):
            if name in self._star_exports(module):
                return ImportBinding(
                    path=f"{module}.{name}", package=module, is_module=False
                )
        return None

    def resolve(self, name: str) -> str | None:
        found = self.binding(name)
        return found.path if found is not None else None

    def package_of(self, name: str) -> str | None:
        """Return the module a name or dotted selector belongs to.

        For a selector rooted at a module binding, the longest imported
        module that prefixes the qualified selector is used, so
        ``os.path.join`` belongs to ``os.path`` when ``os.path`` was
        imported and to ``os`` otherwise.
        """
        root, _, rest = name.partition(".")
        found = self.binding(root)
        if found is None:
            return None
        if not found.is_module or not rest:
            return found.package
        parts = f"{found.path}.{rest}".split(".")
        # The last part is the symbol, never the module.
        for end in range(len(parts) - 1, 0, -1):
            candidate = ".".join(parts[:end])
            if candidate in self._known_modules:
                return candidate
        return found.package


def _module_prefixes(module: str) -> list[str]:
    parts = module.split(".")
    return [".".join(parts[:end]) for end in range(1, len(parts) + 1)]


def _absolute_module(node: ast.ImportFrom, package: str | None) -> str | None:
    if not node.level:
        return node.module
    if package is None:
        logger.debug(
            "Skipping relative import without package context",
            extra={"import_module": node.module, "level": node.level},
        )
        return None
    relative = "." * node.level + (node.module or "")
    try:
        return importlib.util.resolve_name(relative, package)
    except (ImportError, ValueError):
        logger.debug(
            "Relative import escapes the top-level package",
            extra={"import_module": relative, "package": package},
        )
        return None


__all__: list[str] = ["ImportBinding", "ImportTypeInfo", "StarExports"]
