# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Double-star path glob compilation.

Translates path globs into anchored regular expressions. ``/`` is the only
segment separator and paths are matched exactly as supplied.

Syntax:
    - ``*`` matches any run of characters within one segment
    - ``?`` matches one character other than ``/``
    - ``**`` matches zero or more whole segments (``**/main.py`` matches
      ``main.py`` and ``a/b/main.py``); a lone ``**`` matches everything
    - ``[abc]``, ``[a-z]``, ``[!abc]`` character classes (never match ``/``)
    - ``{a,b}`` alternatives, which may nest
    - ``\\x`` matches ``x`` literally

A rule prefixed with ``!`` is negated: a match means "do not ignore".

Example:
    >>> rule = compile_glob_rule("!**/main.py")
    >>> rule.negated, rule.matches("pkg/main.py")
    (True, True)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from omnibase_forbid.errors import GlobSyntaxError

_NEGATION_PREFIX = "!"


@dataclass(frozen=True)
class GlobRule:
    """A compiled ignore rule.

    Attributes:
        glob: The glob text without the negation prefix.
        negated: True if the rule was written with a leading ``!``.
        regex: Anchored expression equivalent to ``glob``.
    """

    glob: str
    negated: bool
    regex: re.Pattern[str]

    def matches(self, path: str) -> bool:
        """Return True if ``path`` matches the glob."""
        return self.regex.fullmatch(path) is not None


def compile_glob(glob: str) -> re.Pattern[str]:
    """Compile a double-star glob into a regular expression.

    The result must be applied with ``fullmatch``.

    Raises:
        GlobSyntaxError: If a character class or alternative group is not
            terminated, or the glob ends with a lone escape.
    """
    return re.compile(_translate(glob, glob), re.DOTALL)


def compile_glob_rule(entry: str) -> GlobRule:
    """Compile one ignore entry, honoring a leading ``!``."""
    negated = entry.startswith(_NEGATION_PREFIX)
    glob = entry[len(_NEGATION_PREFIX) :] if negated else entry
    return GlobRule(glob=glob, negated=negated, regex=compile_glob(glob))


def _translate(glob: str, original: str) -> str:
    out: list[str] = []
    i = 0
    n = len(glob)
    while i < n:
        char = glob[i]
        if char == "*":
            if i + 1 < n and glob[i + 1] == "*":
                end = i + 2
                at_segment_start = i == 0 or glob[i - 1] == "/"
                if at_segment_start and end < n and glob[end] == "/":
                    out.append("(?:.*/)?")
                    i = end + 1
                    continue
                out.append(".*")
                i = end
                continue
            out.append("[^/]*")
            i += 1
        elif char == "?":
            out.append("[^/]")
            i += 1
        elif char == "[":
            end = _find_class_end(glob, i, original)
            out.append(_translate_class(glob[i + 1 : end]))
            i = end + 1
        elif char == "{":
            end = _find_brace_end(glob, i, original)
            alternatives = _split_alternatives(glob[i + 1 : end])
            out.append(
                "(?:"
                + "|".join(_translate(alt, original) for alt in alternatives)
                + ")"
            )
            i = end + 1
        elif char == "\\":
            if i + 1 >= n:
                raise GlobSyntaxError(
                    f"glob `{original}` ends with an unescaped backslash",
                    glob=original,
                )
            out.append(re.escape(glob[i + 1]))
            i += 2
        else:
            out.append(re.escape(char))
            i += 1
    return "".join(out)


def _find_class_end(glob: str, start: int, original: str) -> int:
    """Return the index of the ``]`` closing the class opened at ``start``."""
    i = start + 1
    n = len(glob)
    if i < n and glob[i] in "!^":
        i += 1
    # A leading ']' is a literal member of the class.
    if i < n and glob[i] == "]":
        i += 1
    while i < n:
        if glob[i] == "\\":
            i += 2
            continue
        if glob[i] == "]":
            return i
        i += 1
    raise GlobSyntaxError(
        f"glob `{original}` has an unterminated character class",
        glob=original,
    )


def _translate_class(content: str) -> str:
    negated = content[:1] in ("!", "^")
    if negated:
        content = content[1:]
    body = content.replace("[", "\\[")
    if negated:
        return f"[^/{body}]"
    return f"[{body}]"


def _find_brace_end(glob: str, start: int, original: str) -> int:
    """Return the index of the ``}`` closing the group opened at ``start``."""
    depth = 0
    i = start
    n = len(glob)
    while i < n:
        char = glob[i]
        if char == "\\":
            i += 2
            continue
        if char == "[":
            i = _find_class_end(glob, i, original) + 1
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    raise GlobSyntaxError(
        f"glob `{original}` has an unterminated alternative group",
        glob=original,
    )


def _split_alternatives(content: str) -> list[str]:
    """Split the body of a ``{...}`` group on its top-level commas."""
    alternatives: list[str] = []
    depth = 0
    current_start = 0
    i = 0
    n = len(content)
    while i < n:
        char = content[i]
        if char == "\\":
            i += 2
            continue
        if char == "[":
            i = _find_class_end(content, i, content) + 1
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == "," and depth == 0:
            alternatives.append(content[current_start:i])
            current_start = i + 1
        i += 1
    alternatives.append(content[current_start:])
    return alternatives


__all__: list[str] = [
    "GlobRule",
    "compile_glob",
    "compile_glob_rule",
]
