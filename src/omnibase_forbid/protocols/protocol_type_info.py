# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
Protocol definition for type information used by the identifier resolver.

Type information maps a local name, as bound in one module, to the canonical
dotted import path of what it refers to. It is injected so the resolver can
run without it: when it is absent, candidates are matched on their source
spelling only.

Design Principles:
    - Protocol-based interface for flexibility and testability
    - Runtime-checkable for isinstance() validation
    - Read-only: implementations must not change after construction

Related:
    - ImportTypeInfo: implementation built from a module's import statements
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolTypeInfo(Protocol):
    """Resolves local names to canonical import paths.

    Example Implementation:
        .. code-block:: python

            class StaticTypeInfo:
                def __init__(self, bindings: dict[str, tuple[str, str]]) -> None:
                    self._bindings = bindings

                def resolve(self, name: str) -> str | None:
                    binding = self._bindings.get(name)
                    return binding[0] if binding else None

                def package_of(self, name: str) -> str | None:
                    binding = self._bindings.get(name)
                    return binding[1] if binding else None
    """

    def resolve(self, name: str) -> str | None:
        """Return the canonical dotted path bound to ``name``.

        ``import os as _os`` binds ``_os`` to ``os``;
        ``from os import getenv`` binds ``getenv`` to ``os.getenv``.
        Returns None if ``name`` is not an imported binding.
        """
        ...

    def package_of(self, name: str) -> str | None:
        """Return the canonical module path ``name`` belongs to.

        ``name`` may be a plain binding or a dotted selector rooted at one
        (``_os.path.join``). For a symbol imported from a module this is
        that module. None if the root is unresolved.
        """
        ...


__all__: list[str] = ["ProtocolTypeInfo"]
