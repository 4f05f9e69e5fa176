# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Tests for same-line allow directives."""

from __future__ import annotations

import pytest

from omnibase_forbid.validation.suppression import (
    collect_line_comments,
    directive_allows,
    is_suppressed,
)


class TestDirectiveAllows:
    """Tests for directive_allows()."""

    @pytest.mark.parametrize(
        "comment",
        [
            "# allow:^print$",
            "#allow:^print$",
            "# allow:^print$   ",
            "# allow:^print$ legacy command output",
        ],
    )
    def test_source_text_directives(self, comment: str) -> None:
        assert directive_allows(comment, "^print$") is True

    def test_matched_text_directive(self) -> None:
        assert directive_allows("# allow:print", "^print$", "print") is True

    @pytest.mark.parametrize(
        "comment",
        [
            "# allow:^exit$",
            "# allow:^print$x",
            "# allows:^print$",
            "#  allow:^print$",
            "# noqa",
            "# allow:",
        ],
    )
    def test_non_matching_comments(self, comment: str) -> None:
        assert directive_allows(comment, "^print$", "print") is False


class TestIsSuppressed:
    """Tests for line-based suppression over tokenized comments."""

    @staticmethod
    def _suppressed(source: str, line: int, matched: str = "print") -> bool:
        comments = collect_line_comments(source)
        return is_suppressed(comments.get(line, ()), "^print$", matched)

    def test_trailing_directive(self) -> None:
        assert self._suppressed("print(x)  # allow:^print$\n", 1) is True

    def test_directive_inside_string(self) -> None:
        """A '#' in a string literal does not start a comment."""
        assert self._suppressed('print("# allow:^print$")\n', 1) is False

    def test_line_without_comment(self) -> None:
        assert self._suppressed("print(x)\n", 1) is False

    def test_directive_on_other_line(self) -> None:
        source = "# allow:^print$\nprint(x)\n"
        assert self._suppressed(source, 2) is False

    def test_line_closing_multiline_string(self) -> None:
        """The comment after a closing triple quote is a real comment."""
        source = 'x = """doc\nend"""; print(1)  # allow:^print$\n'
        assert self._suppressed(source, 2) is True

    def test_any_comment_on_line_may_allow(self) -> None:
        assert is_suppressed(["# noqa", "# allow:print"], "^print$", "print")


class TestCollectLineComments:
    """Tests for tokenizer-based comment collection."""

    def test_comments_by_line(self) -> None:
        source = 'x = "# not a comment"\nprint(x)  # allow:^print$\n'
        assert collect_line_comments(source) == {2: ["# allow:^print$"]}

    def test_multiline_strings_are_not_comments(self) -> None:
        source = 'DOC = """\n# allow:^print$\n"""\n'
        assert collect_line_comments(source) == {}

    def test_tokenize_error_is_not_raised(self) -> None:
        """Unterminated input ends collection without raising."""
        comments = collect_line_comments("# first\nx = (\n")
        assert isinstance(comments, dict)
