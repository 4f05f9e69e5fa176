# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Inline message extraction for bare pattern expressions.

A bare pattern may carry its explanation inside an optional group that
starts with a literal ``#``::

    print(# use the logging module)?
    ^pdb\\.set_trace((((# remove before committing))))?$

The group stays part of the compiled expression (being optional, it never
changes what matches). This module only recovers the message text. The
scanner tracks escapes and character classes so ``\\(``, ``[(]`` and ``[#]``
are never mistaken for group syntax.
"""

from __future__ import annotations

_COMMENT_MARKER = "#"


def extract_comment(expression: str) -> str:
    """Return the message of the first ``#`` group, or an empty string.

    Groups are visited outermost first, in source order, so the message of
    ``a(# one)?b(# two)?`` is ``one``.
    """
    for start, end in _group_spans(expression):
        body = _group_body(expression[start:end])
        if body is not None and body.startswith(_COMMENT_MARKER):
            return body[len(_COMMENT_MARKER) :].strip()
    return ""


def _group_spans(expression: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` spans of group contents, ordered by start.

    Unbalanced parentheses are ignored; the expression compiler reports them.
    """
    spans: list[tuple[int, int]] = []
    open_positions: list[int] = []
    i = 0
    n = len(expression)
    while i < n:
        char = expression[i]
        if char == "\\":
            i += 2
            continue
        if char == "[":
            i = _skip_class(expression, i)
            continue
        if char == "(":
            open_positions.append(i + 1)
        elif char == ")" and open_positions:
            spans.append((open_positions.pop(), i))
        i += 1
    spans.sort()
    return spans


def _skip_class(expression: str, start: int) -> int:
    """Return the index just past the character class opened at ``start``."""
    i = start + 1
    n = len(expression)
    if i < n and expression[i] == "^":
        i += 1
    if i < n and expression[i] == "]":
        i += 1
    while i < n:
        if expression[i] == "\\":
            i += 2
            continue
        if expression[i] == "]":
            return i + 1
        i += 1
    return n


def _group_body(content: str) -> str | None:
    """Strip a group's extension prefix.

    Returns None for groups that cannot hold a message: lookarounds,
    backreferences and inline ``(?#...)`` comments.
    """
    if not content.startswith("?"):
        return content
    if content.startswith("?:"):
        return content[2:]
    if content.startswith("?P<"):
        close = content.find(">")
        return content[close + 1 :] if close != -1 else None
    # Scoped inline flags, e.g. (?i:...) or (?-i:...).
    colon = content.find(":")
    if colon > 1 and all(c.isalpha() or c == "-" for c in content[1:colon]):
        return content[colon + 1 :]
    return None


__all__: list[str] = ["extract_comment"]
