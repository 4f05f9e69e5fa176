# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Source file loading for the forbidden identifier linter.

Expands files and directories into Python modules, reads and parses them.
Loading is fail-open: unreadable, oversized or unparseable files are logged
and skipped so one broken file never hides the issues of the others.
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from omnibase_forbid.models.model_source_unit import SourceUnit

logger = logging.getLogger(__name__)

# Maximum file size to process (in bytes).
# Files larger than this are skipped to prevent hangs on generated code.
_MAX_FILE_SIZE_BYTES: int = 1_000_000  # 1MB

# Directories to skip (exact name matching)
_SKIP_DIRECTORIES: frozenset[str] = frozenset(
    {
        "__pycache__",
        ".git",
        ".venv",
        "venv",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
        "node_modules",
    }
)


def is_test_file(path: Path) -> bool:
    """Return True for pytest-style test modules and conftest files."""
    name = path.name
    return (
        name == "conftest.py"
        or (name.startswith("test_") and name.endswith(".py"))
        or name.endswith("_test.py")
    )


def module_package(path: Path) -> str | None:
    """Return the dotted package containing ``path``.

    Walks up through directories holding an ``__init__.py``. Returns None
    for a module outside any package.
    """
    parts: list[str] = []
    directory = path.resolve().parent
    while (directory / "__init__.py").is_file():
        parts.append(directory.name)
        directory = directory.parent
    return ".".join(reversed(parts)) or None


def iter_python_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Expand paths into Python files, in a stable order.

    Explicit files are yielded as given. Directories are searched
    recursively, skipping cache, VCS and virtualenv directories.
    """
    for path in paths:
        if path.is_file():
            yield path
        elif path.is_dir():
            for candidate in sorted(path.rglob("*.py")):
                relative_parts = candidate.relative_to(path).parts[:-1]
                if any(part in _SKIP_DIRECTORIES for part in relative_parts):
                    continue
                if candidate.is_file():
                    yield candidate
        else:
            logger.warning("Path does not exist", extra={"path": str(path)})


def load_source(path: Path) -> SourceUnit | None:
    """Read and parse one file; None if it cannot be analysed."""
    try:
        file_size = path.stat().st_size
        if file_size > _MAX_FILE_SIZE_BYTES:
            logger.debug(
                "Skipping large file",
                extra={"file": str(path), "size_bytes": file_size},
            )
            return None
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(
            "Failed to read file",
            extra={
                "file": str(path),
                "error_type": type(e).__name__,
                "error": str(e),
            },
        )
        return None

    file_path = path.as_posix()
    try:
        tree = ast.parse(source, filename=file_path)
    except SyntaxError as e:
        logger.warning(
            "Failed to parse file",
            extra={"file": file_path, "line": e.lineno, "error": str(e)},
        )
        return None
    return SourceUnit(
        file_path=file_path,
        source=source,
        tree=tree,
        package=module_package(path),
    )


def load_sources(
    paths: Iterable[Path], include_tests: bool = True
) -> list[SourceUnit]:
    """Load every analysable Python file under ``paths``.

    Args:
        paths: Files and directories to analyse.
        include_tests: If False, test modules are skipped.
    """
    units: list[SourceUnit] = []
    for path in iter_python_files(paths):
        if not include_tests and is_test_file(path):
            logger.debug("Skipping test file", extra={"file": str(path)})
            continue
        unit = load_source(path)
        if unit is not None:
            units.append(unit)
    return units


__all__: list[str] = [
    "is_test_file",
    "iter_python_files",
    "load_source",
    "load_sources",
    "module_package",
]
