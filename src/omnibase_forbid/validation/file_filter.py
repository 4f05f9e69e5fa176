# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Per-file applicability of forbidden identifier patterns."""

from __future__ import annotations

from omnibase_forbid.models.model_pattern import Pattern


def ignore_file(pattern: Pattern, file_path: str) -> bool:
    """Decide whether ``pattern`` is switched off for ``file_path``.

    Rules are evaluated in order. A plain glob that matches ignores the
    file, a ``!`` glob that matches includes it again, and the last matching
    rule wins. With no matching rule, or no rules, the file is not ignored.

    Args:
        pattern: The pattern whose ignore rules apply.
        file_path: Path as supplied by the caller, matched verbatim.

    Returns:
        True if the pattern must not be applied to the file.
    """
    ignored = False
    for rule in pattern.glob_rules:
        if rule.matches(file_path):
            ignored = not rule.negated
    return ignored


def applicable_patterns(
    patterns: tuple[Pattern, ...] | list[Pattern], file_path: str
) -> list[Pattern]:
    """Return the patterns that apply to ``file_path``, order preserved."""
    return [p for p in patterns if not ignore_file(p, file_path)]


__all__: list[str] = ["applicable_patterns", "ignore_file"]
