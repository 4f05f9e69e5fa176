# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_forbid tests."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from omnibase_forbid.validation import ForbiddenIdentifierLinter

WriteModule = Callable[[str, str], Path]


@pytest.fixture
def write_module(tmp_path: Path) -> WriteModule:
    """Write a dedented Python module under ``tmp_path``.

    Intermediate directories are created; ``__init__.py`` files are not.

    Example:
        >>> path = write_module("pkg/mod.py", "print('hi')")
    """

    def _write(relative: str, source: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def lint() -> Callable[..., list[str]]:
    """Lint a source snippet and return the issue strings."""

    def _lint(
        patterns: list[str],
        source: str,
        file_path: str = "example.py",
    ) -> list[str]:
        linter = ForbiddenIdentifierLinter(patterns)
        issues = linter.run_source(textwrap.dedent(source), file_path)
        return [str(issue) for issue in issues]

    return _lint
