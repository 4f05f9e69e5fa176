# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Linter configuration file loading.

Resolution order for the configuration file:
    1. Explicit path (``--config``)
    2. ``OMNIBASE_FORBID_CONFIG`` environment variable
    3. ``.forbid.yaml`` in the current working directory

Example file::

    exclude_doc_examples: true
    patterns:
      - ^print(# use logging)?$
      - {p: ^os\\.getenv$, msg: read settings instead, ignore: ["tests/**"]}

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
    - Rejects files larger than MAX_CONFIG_SIZE_BYTES
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from omnibase_forbid.errors import ConfigurationError, ModelForbidErrorContext
from omnibase_forbid.models.model_linter_config import ModelLinterConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "OMNIBASE_FORBID_CONFIG"
DEFAULT_CONFIG_FILENAME = ".forbid.yaml"
MAX_CONFIG_SIZE_BYTES = 1_000_000


def resolve_config_path(explicit: Path | None = None) -> Path | None:
    """Return the configuration file to load, or None if there is none."""
    if explicit is not None:
        return explicit
    from_env = os.environ.get(CONFIG_ENV_VAR, "")
    if from_env:
        return Path(from_env)
    default = Path.cwd() / DEFAULT_CONFIG_FILENAME
    return default if default.is_file() else None


def load_linter_config(path: Path) -> ModelLinterConfig:
    """Load and validate a linter configuration file.

    An empty file yields the default configuration.

    Raises:
        ConfigurationError: If the file is missing, too large, not valid
            YAML, not a mapping, or does not match ModelLinterConfig.
    """
    context = ModelForbidErrorContext.with_correlation(
        operation="load_linter_config",
        target_name=str(path),
    )
    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}", context=context)

    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigurationError(
            f"Config file too large: {file_size} bytes (max {MAX_CONFIG_SIZE_BYTES})",
            context=context,
        )

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config: {e}", context=context) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config: {e}", context=context
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config must be a mapping, got {type(data).__name__}",
            context=context,
        )

    try:
        config = ModelLinterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid config {path}: {e}", context=context
        ) from e

    logger.debug(
        "Loaded linter config",
        extra={"config_path": str(path), "pattern_count": len(config.patterns)},
    )
    return config


__all__: list[str] = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_FILENAME",
    "MAX_CONFIG_SIZE_BYTES",
    "load_linter_config",
    "resolve_config_path",
]
