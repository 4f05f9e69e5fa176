# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Source and configuration loading for the forbidden identifier linter."""

from omnibase_forbid.runtime.config_loader import (
    load_linter_config,
    resolve_config_path,
)
from omnibase_forbid.runtime.source_loader import load_sources

__all__: list[str] = ["load_linter_config", "load_sources", "resolve_config_path"]
