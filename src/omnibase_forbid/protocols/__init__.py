# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Forbidden identifier linter protocols."""

from omnibase_forbid.protocols.protocol_type_info import ProtocolTypeInfo

__all__: list[str] = ["ProtocolTypeInfo"]
