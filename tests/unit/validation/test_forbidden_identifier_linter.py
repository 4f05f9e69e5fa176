# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Tests for the forbidden identifier linter engine.

Tests cover:
- Issue text and positions
- Same-line allow directives
- Import-based matching and package qualifiers
- Documentation example exclusion
- Per-pattern ignore globs
- Pattern source precedence (explicit, config, defaults)
- Deterministic ordering and fail-open handling of broken sources
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Callable

import pytest

from omnibase_forbid.errors import PatternParseError
from omnibase_forbid.models import ModelLinterConfig, SourceUnit
from omnibase_forbid.validation import (
    DEFAULT_PATTERNS,
    ForbiddenIdentifierLinter,
    ImportTypeInfo,
    is_example_function,
)

LintFn = Callable[..., list[str]]

PRINTF_SOURCE = '\nimport fmt\n\ndef foo():\n\tfmt.Printf("here i am")\n'


class TestIssueReporting:
    """Tests for issue text and positions."""

    def test_selector_issue(self) -> None:
        linter = ForbiddenIdentifierLinter([r"fmt\.Printf"])
        issues = linter.run_source(PRINTF_SOURCE, "testing.py")
        assert [str(issue) for issue in issues] == [
            r"use of `fmt.Printf` disallowed by pattern `fmt\.Printf` "
            "at testing.py:5:2"
        ]

    def test_selector_issue_without_type_analysis(self) -> None:
        linter = ForbiddenIdentifierLinter(
            [r"fmt\.Printf"], config=ModelLinterConfig(analyze_types=False)
        )
        issues = linter.run_source(PRINTF_SOURCE, "testing.py")
        assert [(i.line, i.column, i.matched_text) for i in issues] == [
            (5, 2, "fmt.Printf")
        ]

    def test_message_is_appended(self, lint: LintFn) -> None:
        assert lint(["^print(# use logging)?$"], "print('x')\n") == [
            "use of `print` disallowed by pattern `^print(# use logging)?$`: "
            "use logging at example.py:1:1"
        ]

    def test_bare_name_without_import(self, lint: LintFn) -> None:
        assert lint(["Printf"], "Printf('here i am')\n") == [
            "use of `Printf` disallowed by pattern `Printf` at example.py:1:1"
        ]

    def test_no_issues(self, lint: LintFn) -> None:
        assert lint(["^exit$"], "print('x')\n") == []

    def test_issue_fields(self) -> None:
        linter = ForbiddenIdentifierLinter(["{p: ^exit$, msg: raise instead}"])
        (issue,) = linter.run_source("exit(1)\n", "cli.py")
        assert issue.to_dict() == {
            "file": "cli.py",
            "line": 1,
            "column": 1,
            "matched_text": "exit",
            "pattern": "^exit$",
            "message": "raise instead",
        }


class TestAllowDirectives:
    """Tests for same-line suppression."""

    @pytest.mark.parametrize(
        "directive",
        ["# allow:fmt.Printf", r"# allow:fmt\.Printf", r"#allow:fmt\.Printf ok"],
    )
    def test_directive_suppresses(self, directive: str) -> None:
        source = PRINTF_SOURCE.rstrip("\n") + f"  {directive}\n"
        linter = ForbiddenIdentifierLinter([r"fmt\.Printf"])
        assert linter.run_source(source, "testing.py") == []

    def test_directive_for_other_pattern(self, lint: LintFn) -> None:
        assert len(lint(["^print$"], "print(x)  # allow:^exit$\n")) == 1

    def test_directive_on_other_line(self, lint: LintFn) -> None:
        source = "# allow:^print$\nprint(x)\n"
        assert len(lint(["^print$"], source)) == 1

    def test_directive_only_suppresses_its_pattern(self, lint: LintFn) -> None:
        issues = lint(["^print$", "print"], "print(x)  # allow:^print$\n")
        assert len(issues) == 1
        assert "pattern `print`" in issues[0]

    def test_ignore_allow_directives(self) -> None:
        linter = ForbiddenIdentifierLinter(
            ["^print$"], config=ModelLinterConfig(ignore_allow_directives=True)
        )
        assert len(linter.run_source("print(x)  # allow:^print$\n")) == 1

    def test_directive_after_multiline_string(self, lint: LintFn) -> None:
        """A line closing a triple-quoted string can carry a directive."""
        source = 'x = """doc\nend"""; print(1)  # allow:^print$\n'
        assert lint(["^print$"], source) == []

    def test_record_is_allowed_by_its_expression(self, lint: LintFn) -> None:
        """Records are named by their p expression, in directives and issues."""
        record = "{p: ^print$, msg: use logging}"
        assert lint([record], "print(x)  # allow:^print$\n") == []
        assert lint([record], "print(x)\n") == [
            "use of `print` disallowed by pattern `^print$`: use logging "
            "at example.py:1:1"
        ]


class TestTypeAwareMatching:
    """Tests for import-resolved matching."""

    def test_aliased_module(self, lint: LintFn) -> None:
        issues = lint([r"^os\.getenv$"], "import os as _os\n_os.getenv('X')\n")
        assert issues == [
            r"use of `os.getenv` disallowed by pattern `^os\.getenv$` "
            "at example.py:2:1"
        ]

    def test_from_import(self, lint: LintFn) -> None:
        issues = lint([r"^os\.getenv$"], "from os import getenv\ngetenv('X')\n")
        assert len(issues) == 1

    def test_analysis_disabled(self) -> None:
        linter = ForbiddenIdentifierLinter(
            [r"^os\.getenv$"], config=ModelLinterConfig(analyze_types=False)
        )
        assert linter.run_source("import os as _os\n_os.getenv('X')\n") == []

    def test_package_qualifier(self, lint: LintFn) -> None:
        pattern = "{p: ^getenv$, pkg: ^os$}"
        assert len(lint([pattern], "from os import getenv\ngetenv('X')\n")) == 1
        assert lint([pattern], "def getenv(key):\n    pass\ngetenv('X')\n") == []
        assert lint([pattern], "from mylib import getenv\ngetenv('X')\n") == []

    def test_star_import(self, lint: LintFn) -> None:
        """Names from a star import resolve through the module source."""
        source = "from os import *\ngetenv('HOME')\n"
        assert lint([r"^os\.getenv$"], source) == [
            r"use of `os.getenv` disallowed by pattern `^os\.getenv$` "
            "at example.py:2:1"
        ]
        assert len(lint(["{p: getenv, pkg: ^os$}"], source)) == 1

    def test_star_import_of_unknown_module(self, lint: LintFn) -> None:
        source = "from no_such_module_here import *\ngetenv('HOME')\n"
        assert lint([r"^os\.getenv$"], source) == []

    @pytest.mark.parametrize(
        "source",
        [
            "import os\ndef f(os):\n    os.getenv('x')\n",
            "import os\ndef f():\n    os = load_fake()\n    os.getenv('x')\n",
            "import os\nhandler = lambda os: os.getenv('x')\n",
            "import os\nasync def f(*, os):\n    os.getenv('x')\n",
        ],
    )
    def test_local_binding_shadows_import(self, lint: LintFn, source: str) -> None:
        assert lint([r"^os\.getenv$"], source) == []

    def test_local_binding_shadows_from_import(self, lint: LintFn) -> None:
        source = "from os import getenv\ndef f(getenv):\n    getenv('x')\n"
        assert lint(["{p: getenv, pkg: ^os$}"], source) == []

    def test_global_declaration_does_not_shadow(self, lint: LintFn) -> None:
        source = (
            "import os\n"
            "def f():\n"
            "    global os\n"
            "    os = reload()\n"
            "    os.getenv('x')\n"
        )
        assert len(lint([r"^os\.getenv$"], source)) == 1

    def test_import_outside_shadowing_function(self, lint: LintFn) -> None:
        source = "import os\ndef f(env):\n    os.getenv(env)\n"
        assert len(lint([r"^os\.getenv$"], source)) == 1

    def test_injected_type_information(self) -> None:
        """Explicit type information replaces import analysis per unit."""
        source = "import os as _os\n_os.getenv('X')\n"
        unit = SourceUnit.from_source(source, "a.py")
        linter = ForbiddenIdentifierLinter([r"^os\.getenv$"])

        assert linter.run([unit], type_infos={"a.py": None}) == []
        assert unit.tree is not None
        type_infos = {"a.py": ImportTypeInfo.from_tree(unit.tree)}
        assert len(linter.run([unit], type_infos=type_infos)) == 1


class TestDocumentationExamples:
    """Tests for documentation example exclusion."""

    EXAMPLE_SOURCE = "def example_usage():\n    print('x')\n"

    def test_examples_are_skipped(self, lint: LintFn) -> None:
        assert lint(["^print$"], self.EXAMPLE_SOURCE) == []

    def test_examples_included_when_disabled(self) -> None:
        linter = ForbiddenIdentifierLinter(
            ["^print$"], config=ModelLinterConfig(exclude_doc_examples=False)
        )
        assert len(linter.run_source(self.EXAMPLE_SOURCE)) == 1

    def test_custom_predicate(self) -> None:
        source = "class Demo:\n    print('x')\nprint('y')\n"
        linter = ForbiddenIdentifierLinter(["^print$"])
        issues = linter.run(
            [SourceUnit.from_source(source, "demo.py")],
            exclude_example_node=lambda node: isinstance(node, ast.ClassDef),
        )
        assert [issue.line for issue in issues] == [3]

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("def example(): pass", True),
            ("def example_basic(): pass", True),
            ("async def ExampleClient(): pass", True),
            ("def examples(): pass", False),
            ("def run_example(): pass", False),
            ("class Example: pass", False),
        ],
    )
    def test_is_example_function(self, source: str, expected: bool) -> None:
        node = ast.parse(source).body[0]
        assert is_example_function(node) is expected


class TestIgnoreGlobs:
    """Tests for per-pattern file ignore rules."""

    PATTERN = '{p: ^print$, ignore: ["tests/**"]}'

    def test_ignored_file(self, lint: LintFn) -> None:
        assert lint([self.PATTERN], "print(x)\n", "tests/unit/test_a.py") == []

    def test_applied_file(self, lint: LintFn) -> None:
        assert len(lint([self.PATTERN], "print(x)\n", "src/app.py")) == 1

    def test_reincluded_file(self, lint: LintFn) -> None:
        pattern = '{p: ^print$, ignore: ["**", "!**/main.py"]}'
        assert len(lint([pattern], "print(x)\n", "pkg/main.py")) == 1
        assert lint([pattern], "print(x)\n", "pkg/other.py") == []


class TestPatternSources:
    """Tests for pattern precedence."""

    def test_defaults(self) -> None:
        linter = ForbiddenIdentifierLinter()
        assert tuple(p.source_text for p in linter.patterns) == DEFAULT_PATTERNS

    def test_default_patterns_report(self) -> None:
        linter = ForbiddenIdentifierLinter()
        source = "import pdb\nprint('x')\npdb.set_trace()\n"
        issues = linter.run_source(source)
        assert [(i.line, i.matched_text) for i in issues] == [
            (2, "print"),
            (3, "pdb.set_trace"),
        ]
        assert issues[0].pattern.message == "Use the logging module instead"

    def test_config_patterns_replace_defaults(self) -> None:
        config = ModelLinterConfig(patterns=("^exit$", {"p": "^quit$", "msg": "no"}))
        linter = ForbiddenIdentifierLinter(config=config)
        assert [p.source_text for p in linter.patterns] == ["^exit$", "^quit$"]
        assert linter.patterns[1].message == "no"

    def test_explicit_patterns_replace_config(self) -> None:
        config = ModelLinterConfig(patterns=("^exit$",))
        linter = ForbiddenIdentifierLinter(["^quit$"], config=config)
        assert [p.source_text for p in linter.patterns] == ["^quit$"]

    def test_invalid_pattern_fails_construction(self) -> None:
        with pytest.raises(PatternParseError):
            ForbiddenIdentifierLinter(["fmt\\"])


class TestRunBehaviour:
    """Tests for ordering and fail-open handling."""

    def test_ordering(self) -> None:
        units = [
            SourceUnit.from_source("print(a)\n", "b.py"),
            SourceUnit.from_source("x = 1\nprint(b); print(c)\n", "a.py"),
        ]
        linter = ForbiddenIdentifierLinter(["print", "^print$"])
        issues = linter.run(units)
        assert [issue.sort_key for issue in issues] == [
            ("a.py", 2, 1, "^print$"),
            ("a.py", 2, 1, "print"),
            ("a.py", 2, 11, "^print$"),
            ("a.py", 2, 11, "print"),
            ("b.py", 1, 1, "^print$"),
            ("b.py", 1, 1, "print"),
        ]

    def test_runs_are_deterministic(self) -> None:
        linter = ForbiddenIdentifierLinter(["print", r"fmt\.Printf"])
        units = [
            SourceUnit.from_source(PRINTF_SOURCE, "testing.py"),
            SourceUnit.from_source("print(1)\nprint(2)\n", "other.py"),
        ]
        first = [str(issue) for issue in linter.run(units)]
        second = [str(issue) for issue in linter.run(units)]
        assert first == second
        assert len(first) == 3

    def test_unparseable_source_is_skipped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        linter = ForbiddenIdentifierLinter(["^print$"])
        with caplog.at_level(logging.WARNING):
            issues = linter.run(
                [
                    SourceUnit.from_source("def broken(:\n", "broken.py"),
                    SourceUnit.from_source("print(x)\n", "ok.py"),
                ]
            )
        assert [issue.file_path for issue in issues] == ["ok.py"]
        assert "Skipping source without syntax tree" in caplog.text
