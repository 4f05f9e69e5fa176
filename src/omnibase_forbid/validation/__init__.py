# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Forbidden identifier validation.

Pattern parsing, identifier resolution, suppression and the linter engine.

Error Model:
    Pattern problems are construction-time errors (``PatternParseError``).
    Running the linter is fail-open with respect to source content: files
    that do not parse are logged and skipped, and a unit without type
    information is matched on its source spelling only.
"""

from omnibase_forbid.validation.default_patterns import DEFAULT_PATTERNS
from omnibase_forbid.validation.file_filter import applicable_patterns, ignore_file
from omnibase_forbid.validation.forbidden_identifier_linter import (
    ExampleNodePredicate,
    ForbiddenIdentifierLinter,
    is_example_function,
)
from omnibase_forbid.validation.identifier_resolver import (
    candidate_matches,
    find_candidates,
)
from omnibase_forbid.validation.import_type_info import ImportTypeInfo
from omnibase_forbid.validation.module_exports import module_star_exports
from omnibase_forbid.validation.pattern_comment import extract_comment
from omnibase_forbid.validation.pattern_parser import (
    parse_pattern,
    parse_pattern_value,
    parse_patterns,
)
from omnibase_forbid.validation.suppression import is_suppressed

__all__: list[str] = [
    "DEFAULT_PATTERNS",
    "ExampleNodePredicate",
    "ForbiddenIdentifierLinter",
    "ImportTypeInfo",
    "applicable_patterns",
    "candidate_matches",
    "extract_comment",
    "find_candidates",
    "ignore_file",
    "is_example_function",
    "is_suppressed",
    "module_star_exports",
    "parse_pattern",
    "parse_pattern_value",
    "parse_patterns",
]
