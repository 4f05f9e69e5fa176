# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Forbidden identifier linter models (one model per file)."""

from omnibase_forbid.models.model_candidate import Candidate
from omnibase_forbid.models.model_issue import Issue
from omnibase_forbid.models.model_linter_config import ModelLinterConfig
from omnibase_forbid.models.model_pattern import Pattern
from omnibase_forbid.models.model_pattern_record import ModelPatternRecord
from omnibase_forbid.models.model_source_unit import SourceUnit

__all__: list[str] = [
    "Candidate",
    "Issue",
    "ModelLinterConfig",
    "ModelPatternRecord",
    "Pattern",
    "SourceUnit",
]
