# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""AST-based Forbidden Identifier Linter.

Reports uses of identifiers that match user-supplied forbidden patterns.

Pipeline per source unit:
    1. File filter: drop patterns whose ignore globs exclude the file
    2. Identifier resolver: enumerate names and dotted selectors, qualified
       through import analysis when enabled
    3. Documentation examples: skip candidates inside example functions
    4. Matching: test each candidate against each remaining pattern
    5. Suppression: drop matches allowed by a same-line ``allow:`` comment

Issues are returned sorted by file, line, column and pattern source text,
independent of traversal order.

Error Model:
    Patterns are parsed when the linter is constructed; a bad pattern raises
    ``PatternParseError`` there and no run happens. ``run`` itself never
    raises for source content: units that failed to parse are logged and
    skipped, and missing type information degrades matching to the
    source spelling.

Usage:
    >>> linter = ForbiddenIdentifierLinter([r"fmt\\.Printf"])
    >>> issues = linter.run_source("fmt.Printf('here i am')\\n", "example.py")
    >>> str(issues[0])
    'use of `fmt.Printf` disallowed by pattern `fmt\\\\.Printf` at example.py:1:1'
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence

from omnibase_forbid.models.model_issue import Issue
from omnibase_forbid.models.model_linter_config import ModelLinterConfig
from omnibase_forbid.models.model_pattern import Pattern
from omnibase_forbid.models.model_source_unit import SourceUnit
from omnibase_forbid.protocols.protocol_type_info import ProtocolTypeInfo
from omnibase_forbid.validation.default_patterns import DEFAULT_PATTERNS
from omnibase_forbid.validation.file_filter import applicable_patterns
from omnibase_forbid.validation.identifier_resolver import (
    candidate_matches,
    find_candidates,
)
from omnibase_forbid.validation.import_type_info import ImportTypeInfo
from omnibase_forbid.validation.module_exports import module_star_exports
from omnibase_forbid.validation.pattern_parser import (
    PatternEntry,
    parse_pattern_value,
    parse_patterns,
)
from omnibase_forbid.validation.suppression import (
    collect_line_comments,
    is_suppressed,
)

logger = logging.getLogger(__name__)

ExampleNodePredicate = Callable[[ast.AST], bool]

_EXAMPLE_PREFIXES: tuple[str, ...] = ("example_", "Example")


def is_example_function(node: ast.AST) -> bool:
    """Default documentation-example predicate.

    Functions named ``example``, ``example_*`` or ``Example*`` hold
    documentation examples, where forbidden identifiers are expected.
    """
    if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
        return False
    return node.name == "example" or node.name.startswith(_EXAMPLE_PREFIXES)


class ForbiddenIdentifierLinter:
    """Finds uses of forbidden identifiers in parsed source units.

    The linter holds only immutable patterns and configuration, so one
    instance can be shared across runs and threads.

    Attributes:
        patterns: Parsed patterns, in the order supplied.
        config: Run options.
    """

    def __init__(
        self,
        patterns: Sequence[PatternEntry] | None = None,
        config: ModelLinterConfig | None = None,
    ) -> None:
        """Parse the patterns.

        Args:
            patterns: Pattern entries. When empty, the configuration's
                patterns are used, and when those are empty too, the default
                set. Each level fully replaces the next.
            config: Run options; defaults to ``ModelLinterConfig()``.

        Raises:
            PatternParseError: If any pattern cannot be parsed.
        """
        self.config = config or ModelLinterConfig()
        if patterns:
            self.patterns: tuple[Pattern, ...] = parse_patterns(patterns)
        elif self.config.patterns:
            self.patterns = tuple(
                parse_pattern_value(entry) for entry in self.config.patterns
            )
        else:
            self.patterns = parse_patterns(DEFAULT_PATTERNS)
        logger.debug(
            "Constructed forbidden identifier linter",
            extra={"pattern_count": len(self.patterns)},
        )

    def run(
        self,
        units: Iterable[SourceUnit],
        type_infos: Mapping[str, ProtocolTypeInfo | None] | None = None,
        exclude_example_node: ExampleNodePredicate | None = None,
    ) -> list[Issue]:
        """Lint source units.

        Args:
            units: Parsed source files.
            type_infos: Type information keyed by unit file path. A missing
                key or None value selects syntactic matching for that unit.
                When the mapping itself is None, import analysis builds type
                information per unit if ``config.analyze_types`` is set.
            exclude_example_node: Predicate marking enclosing definitions
                that hold documentation examples. Defaults to
                ``is_example_function``. Ignored when
                ``config.exclude_doc_examples`` is False.

        Returns:
            Issues sorted by file, line, column and pattern source text.
        """
        predicate: ExampleNodePredicate | None = None
        if self.config.exclude_doc_examples:
            predicate = exclude_example_node or is_example_function

        issues: list[Issue] = []
        for unit in units:
            if type_infos is not None:
                type_info = type_infos.get(unit.file_path)
            else:
                type_info = self._type_info_for(unit)
            issues.extend(self._run_unit(unit, type_info, predicate))
        issues.sort(key=lambda issue: issue.sort_key)
        return issues

    def run_source(
        self,
        source: str,
        file_path: str = "<string>",
        package: str | None = None,
    ) -> list[Issue]:
        """Parse and lint one source text."""
        return self.run([SourceUnit.from_source(source, file_path, package)])

    def _type_info_for(self, unit: SourceUnit) -> ProtocolTypeInfo | None:
        if not self.config.analyze_types or unit.tree is None:
            return None
        return ImportTypeInfo.from_tree(
            unit.tree, package=unit.package, star_exports=module_star_exports
        )

    def _run_unit(
        self,
        unit: SourceUnit,
        type_info: ProtocolTypeInfo | None,
        predicate: ExampleNodePredicate | None,
    ) -> list[Issue]:
        if unit.tree is None:
            logger.warning(
                "Skipping source without syntax tree",
                extra={"file": unit.file_path},
            )
            return []

        patterns = applicable_patterns(self.patterns, unit.file_path)
        if not patterns:
            logger.debug(
                "All patterns ignored for file",
                extra={"file": unit.file_path},
            )
            return []

        comments: dict[int, list[str]] = {}
        if not self.config.ignore_allow_directives:
            comments = collect_line_comments(unit.source)

        issues: list[Issue] = []
        for candidate in find_candidates(unit.tree, unit.file_path, type_info):
            if predicate is not None and any(
                predicate(node) for node in candidate.enclosing
            ):
                continue
            for pattern in patterns:
                matched = candidate_matches(candidate, pattern)
                if matched is None:
                    continue
                if is_suppressed(
                    comments.get(candidate.line, ()), pattern.source_text, matched
                ):
                    continue
                issues.append(
                    Issue(
                        file_path=candidate.file_path,
                        line=candidate.line,
                        column=candidate.column,
                        matched_text=matched,
                        pattern=pattern,
                    )
                )
        return issues


__all__: list[str] = [
    "ExampleNodePredicate",
    "ForbiddenIdentifierLinter",
    "is_example_function",
]
