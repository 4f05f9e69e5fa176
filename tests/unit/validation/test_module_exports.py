# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Tests for static star-export lookup."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from omnibase_forbid.validation.module_exports import (
    find_module_source,
    module_star_exports,
)

WriteModule = Callable[[str, str], Path]


@pytest.fixture(autouse=True)
def _fresh_cache() -> Iterator[None]:
    module_star_exports.cache_clear()
    yield
    module_star_exports.cache_clear()


@pytest.fixture
def on_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, write_module: WriteModule
) -> WriteModule:
    """Write a module and put ``tmp_path`` on ``sys.path``."""

    def _write(relative: str, source: str) -> Path:
        path = write_module(relative, source)
        monkeypatch.syspath_prepend(str(tmp_path))
        return path

    return _write


class TestModuleStarExports:
    """Tests for module_star_exports()."""

    def test_literal_all(self, on_path: WriteModule) -> None:
        on_path(
            "fs_star_literal.py",
            """
            __all__ = ["read"]
            __all__ += ["write"]
            __all__.append("close")
            __all__.extend(("flush",))

            def read(): ...
            def hidden(): ...
            """,
        )
        assert module_star_exports("fs_star_literal") == {
            "read",
            "write",
            "close",
            "flush",
        }

    def test_conditional_all_extension(self, on_path: WriteModule) -> None:
        on_path(
            "fs_star_conditional.py",
            """
            import sys
            __all__ = ["base"]
            if sys.platform == "win32":
                __all__.append("windows_only")
            else:
                __all__.append("posix_only")
            """,
        )
        assert module_star_exports("fs_star_conditional") == {
            "base",
            "windows_only",
            "posix_only",
        }

    def test_public_names_without_all(self, on_path: WriteModule) -> None:
        on_path(
            "fs_star_public.py",
            """
            import json
            from os import getenv as env
            LIMIT: int = 3
            first, second = 1, 2
            _private = 0
            settings.value = 1

            def helper(): ...
            class Client: ...
            """,
        )
        assert module_star_exports("fs_star_public") == {
            "json",
            "env",
            "LIMIT",
            "first",
            "second",
            "helper",
            "Client",
        }

    def test_package_submodule(self, on_path: WriteModule) -> None:
        on_path("fs_star_pkg/__init__.py", "")
        on_path("fs_star_pkg/tools.py", "__all__ = ['run']\n")
        assert module_star_exports("fs_star_pkg.tools") == {"run"}
        assert "fs_star_pkg" not in sys.modules

    def test_module_is_not_imported(self, on_path: WriteModule) -> None:
        on_path("fs_star_side_effect.py", "raise RuntimeError('imported')\n")
        assert module_star_exports("fs_star_side_effect") == frozenset()
        assert "fs_star_side_effect" not in sys.modules

    def test_syntax_error_exports_nothing(self, on_path: WriteModule) -> None:
        on_path("fs_star_broken.py", "def broken(:\n")
        assert module_star_exports("fs_star_broken") == frozenset()

    def test_unknown_module(self) -> None:
        assert module_star_exports("fs_star_missing_module") == frozenset()

    def test_builtin_module(self) -> None:
        """Modules without Python source export nothing."""
        assert module_star_exports("sys") == frozenset()

    def test_standard_library_module(self) -> None:
        assert "getenv" in module_star_exports("os")


class TestFindModuleSource:
    """Tests for find_module_source()."""

    def test_package_init(self, on_path: WriteModule) -> None:
        path = on_path("fs_find_pkg/__init__.py", "")
        assert find_module_source("fs_find_pkg") == path

    def test_submodule_of_plain_module(self, on_path: WriteModule) -> None:
        on_path("fs_find_plain.py", "")
        assert find_module_source("fs_find_plain.inner") is None
