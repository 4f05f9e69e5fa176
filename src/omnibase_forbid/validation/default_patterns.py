# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Built-in forbidden identifier patterns.

Used only when the caller supplies no patterns at all. An explicit pattern
list replaces this set entirely; it is never merged with it.
"""

from __future__ import annotations

DEFAULT_PATTERNS: tuple[str, ...] = (
    r"^(print|pprint\.pprint|pprint\.pp)(# Use the logging module instead)?$",
    r"^(breakpoint|pdb\.set_trace|ipdb\.set_trace)(# Remove debugger calls before committing)?$",
)


__all__: list[str] = ["DEFAULT_PATTERNS"]
