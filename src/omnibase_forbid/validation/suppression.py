# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Same-line ``allow:`` suppression directives.

A match is suppressed when the line it occurs on ends with a comment of the
form::

    print(report)  # allow:^print$

The text after ``allow:`` must be the triggering pattern's source text
verbatim, or the matched text itself (``# allow:print``). Only comments on
the line of the match count; there is no block or file scope.

Comments come from the tokenizer run over the whole module
(``collect_line_comments``), so a line that closes a multi-line string is
read the same way the interpreter reads it.
"""

from __future__ import annotations

import io
import logging
import re
import tokenize
from collections import defaultdict
from collections.abc import Iterable

logger = logging.getLogger(__name__)

_ALLOW_DIRECTIVE = re.compile(r"^#\s?allow:")


def directive_allows(
    comment: str, source_text: str, matched_text: str | None = None
) -> bool:
    """Check whether one comment allows a match.

    Args:
        comment: Comment text including the leading ``#``.
        source_text: Source text of the pattern that fired.
        matched_text: Text that satisfied the pattern, if known.

    Returns:
        True if the comment is an ``allow:`` directive naming the pattern
        source text or the matched text.
    """
    directive = _ALLOW_DIRECTIVE.match(comment)
    if directive is None:
        return False
    named = comment[directive.end() :].rstrip()
    for text in (source_text, matched_text):
        if text and _names(named, text):
            return True
    return False


def _names(named: str, text: str) -> bool:
    if not named.startswith(text):
        return False
    # Trailing prose after whitespace is allowed: "# allow:print legacy CLI".
    return len(named) == len(text) or named[len(text)].isspace()


def is_suppressed(
    line_comments: Iterable[str],
    source_text: str,
    matched_text: str | None = None,
) -> bool:
    """Check whether the comments of a source line allow a match.

    Args:
        line_comments: Comments on the line of the match, as returned by
            ``collect_line_comments(source)[line]``.
        source_text: Source text of the pattern that fired.
        matched_text: Text that satisfied the pattern, if known.

    Example:
        >>> comments = collect_line_comments("print(x)  # allow:^print$\\n")
        >>> is_suppressed(comments.get(1, ()), "^print$", "print")
        True
    """
    return any(
        directive_allows(comment, source_text, matched_text)
        for comment in line_comments
    )


def collect_line_comments(source: str) -> dict[int, list[str]]:
    """Map 1-based line numbers to the comments on them.

    Uses the tokenizer, so ``#`` inside string literals (including multi-line
    strings) is never taken for a comment. Tokenization errors end the
    collection early; comments found so far are kept.
    """
    comments: dict[int, list[str]] = defaultdict(list)
    try:
        for token in tokenize.generate_tokens(io.StringIO(source).readline):
            if token.type == tokenize.COMMENT:
                comments[token.start[0]].append(token.string)
    except (tokenize.TokenError, SyntaxError) as e:
        logger.debug(
            "Comment collection stopped early",
            extra={"error_type": type(e).__name__, "error": str(e)},
        )
    return dict(comments)


__all__: list[str] = [
    "collect_line_comments",
    "directive_allows",
    "is_suppressed",
]
